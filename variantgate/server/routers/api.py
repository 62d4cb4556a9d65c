"""JSON API routes: /health, /api/v1/*."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from ...config import get_settings
from ...core.api import parse_configuration, resolve_draft, validate_draft
from ...core.canonical.entities import DraftConfiguration
from ...core.canonical.helpers import suggest_slug
from ...core.errors import DraftParseError
from ...core.payload import build_submission_payload
from ...core.resolve import inheritance_hints
from ..logging import outcome_to_loggable
from ..schemas import DraftRequest

settings = get_settings()
router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _configuration_from_request(payload: DraftRequest) -> DraftConfiguration:
    try:
        return parse_configuration(payload.to_draft())
    except DraftParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.post("/api/v1/products/validate")
def validate_product(payload: DraftRequest) -> dict[str, Any]:
    configuration = _configuration_from_request(payload)
    outcome = validate_draft(configuration, strict=False)
    loggable = outcome_to_loggable(outcome, configuration)
    if loggable is not None:
        logger.debug("Product draft validation: %s", loggable)
    return outcome.to_dict()


@router.post("/api/v1/products/resolve")
def resolve_product(payload: DraftRequest) -> dict[str, Any]:
    configuration = _configuration_from_request(payload)
    return {
        "variants": [
            {**effective.to_dict(), "hints": inheritance_hints(effective)}
            for effective in resolve_draft(configuration)
        ]
    }


@router.post("/api/v1/products/payload")
def product_payload(payload: DraftRequest) -> dict[str, Any]:
    configuration = _configuration_from_request(payload)
    outcome = validate_draft(configuration, strict=False)
    if not outcome.valid:
        raise HTTPException(status_code=422, detail=outcome.to_dict())
    return build_submission_payload(configuration)


@router.get("/api/v1/slug")
def slug(name: str = Query(..., description="Product name to derive a URL slug from")) -> dict:
    return {"slug": suggest_slug(name)}
