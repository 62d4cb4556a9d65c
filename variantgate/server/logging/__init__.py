from .validation_payloads import outcome_to_loggable

__all__ = ["outcome_to_loggable"]
