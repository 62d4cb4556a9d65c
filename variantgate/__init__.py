"""Public package entrypoint for variantgate.

This package provides a stable import surface for the product variant
configuration and inheritance validation engine, plus optional frontend
adapters (CLI and FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "DraftConfiguration": ("variantgate.core", "DraftConfiguration"),
    "app": ("variantgate.server.main", "app"),
    "create_app": ("variantgate.server.main", "create_app"),
    "resolve": ("variantgate.core.api", "resolve_draft"),
    "submission_payload": ("variantgate.core", "submission_payload"),
    "validate": ("variantgate.core.api", "validate_draft"),
}

try:
    __version__ = version("variantgate")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DraftConfiguration",
    "__version__",
    "app",
    "create_app",
    "resolve",
    "submission_payload",
    "validate",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
