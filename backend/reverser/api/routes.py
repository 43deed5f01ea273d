from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from ..models import ErrorEnvelope, ReverseRequest, ReverseResponse
from ..services.reverse import reverse_with_stats
from ..services.text_utils import normalize_whitespace
from ..settings import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _reverse(text: str, collapse_whitespace: bool) -> ReverseResponse:
    max_chars = get_settings().max_text_chars
    if len(text) > max_chars:
        raise HTTPException(
            status_code=413,
            detail={
                "error": {
                    "code": "TEXT_TOO_LONG",
                    "message": f"Text is {len(text)} characters; the limit is {max_chars}.",
                    "hint": "Split the text into smaller pieces.",
                }
            },
        )

    source = normalize_whitespace(text) if collapse_whitespace else text
    try:
        result = reverse_with_stats(source)
    except Exception as e:  # pragma: no cover
        logger.exception("reverse failed for %d chars", len(text))
        raise HTTPException(
            status_code=500,
            detail={
                "error": {
                    "code": "REVERSE_FAILED",
                    "message": "Reversal failed.",
                    "hint": str(e),
                }
            },
        )

    logger.debug("reversed %d words", result.word_count)
    return ReverseResponse(original=text, reversed=result.reversed, word_count=result.word_count)


@router.get("/health")
def health() -> dict:
    return {"ok": True}


@router.post(
    "/reverse",
    response_model=ReverseResponse,
    responses={
        413: {"model": ErrorEnvelope},
        422: {"model": ErrorEnvelope},
        500: {"model": ErrorEnvelope},
    },
)
def reverse(req: ReverseRequest) -> ReverseResponse:
    return _reverse(req.text, req.collapse_whitespace)


@router.get(
    "/reverse",
    response_model=ReverseResponse,
    responses={
        413: {"model": ErrorEnvelope},
        500: {"model": ErrorEnvelope},
    },
)
def reverse_query(
    text: str = Query(default=""),
    collapse_whitespace: bool = Query(default=False),
) -> ReverseResponse:
    return _reverse(text, collapse_whitespace)
