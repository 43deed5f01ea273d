from __future__ import annotations

from pydantic import BaseModel


class ErrorPayload(BaseModel):
    code: str
    message: str
    hint: str | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorPayload


class ReverseRequest(BaseModel):
    text: str
    # Treat tabs/newlines as separators too, so multi-line input reads as one sentence.
    collapse_whitespace: bool = False


class ReverseResponse(BaseModel):
    original: str
    reversed: str
    word_count: int
