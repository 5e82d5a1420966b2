"""Tokenization models for ``POST /tokenize`` and ``POST /detokenize``."""
from __future__ import annotations

from aleph_alpha_api.common.schema import ResponseModel, WireModel


class TokenizationRequest(WireModel):
    model: str
    prompt: str
    tokens: bool = False
    token_ids: bool = True


class TokenizationResponse(ResponseModel):
    tokens: list[str] | None = None
    token_ids: list[int] | None = None


class DetokenizationRequest(WireModel):
    model: str
    token_ids: list[int]


class DetokenizationResponse(ResponseModel):
    result: str
