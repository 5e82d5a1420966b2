"""Evaluation models for ``POST /evaluate``."""
from __future__ import annotations

from aleph_alpha_api.common.schema import ResponseModel, WireModel
from aleph_alpha_api.prompt import Hosting, Prompt


class EvaluationRequest(WireModel):
    """Score how likely ``model`` is to produce ``completion_expected`` after ``prompt``."""

    model: str
    prompt: Prompt
    completion_expected: str
    hosting: Hosting | None = None
    contextual_control_threshold: float | None = None
    control_log_additive: bool | None = None

    @classmethod
    def from_text(cls, model: str, prompt: str, completion_expected: str) -> EvaluationRequest:
        return cls(model=model, prompt=Prompt.from_text(prompt), completion_expected=completion_expected)


class EvaluationResult(ResponseModel):
    log_probability: float | None = None
    log_perplexity: float | None = None
    log_perplexity_per_token: float | None = None
    log_perplexity_per_character: float | None = None
    # True if completion_expected is what greedy sampling would produce.
    correct_greedy: bool | None = None
    token_count: int | None = None
    character_count: int | None = None
    completion: str | None = None


class EvaluationResponse(ResponseModel):
    model_version: str
    result: EvaluationResult
