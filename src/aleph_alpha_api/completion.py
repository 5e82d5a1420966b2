"""Completion request and response models for ``POST /complete``."""
from __future__ import annotations
from typing import Any

from aleph_alpha_api.common.schema import ResponseModel, WireModel
from aleph_alpha_api.error import EmptyCompletionsError
from aleph_alpha_api.prompt import Hosting, Prompt


class CompletionRequest(WireModel):
    """
    Parameters for completing a prompt.

    Only ``model``, ``prompt`` and ``maximum_tokens`` are required. Everything
    else is sent only when set. Sampling parameters are applied server side in
    the order temperature, top_k, top_p; combining all three is allowed but
    rarely useful. No cross-field checks (e.g. ``best_of`` > ``n``) happen
    locally, the API reports those.

    Example:
        req = CompletionRequest.from_text(LUMINOUS_BASE, "An apple a day", 10).set(
            temperature=0.8, top_k=50, top_p=0.95, best_of=2, minimum_tokens=2,
        )
    """

    model: str
    prompt: Prompt
    maximum_tokens: int
    hosting: Hosting | None = None
    minimum_tokens: int | None = None
    echo: bool | None = None
    temperature: float | None = None
    top_k: int | None = None
    top_p: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    sequence_penalty: float | None = None
    sequence_penalty_min_length: int | None = None
    repetition_penalties_include_prompt: bool | None = None
    repetition_penalties_include_completion: bool | None = None
    use_multiplicative_presence_penalty: bool | None = None
    use_multiplicative_frequency_penalty: bool | None = None
    use_multiplicative_sequence_penalty: bool | None = None
    # Tokens exempt from all penalties. Stop sequences are added unless
    # penalty_exceptions_include_stop_sequences is False.
    penalty_exceptions: list[str] | None = None
    penalty_bias: str | None = None
    penalty_exceptions_include_stop_sequences: bool | None = None
    best_of: int | None = None
    n: int | None = None
    log_probs: int | None = None
    stop_sequences: list[str] | None = None
    tokens: bool | None = None
    raw_completion: bool | None = None
    disable_optimizations: bool | None = None
    # Inclusion and exclusion strings must not be prefixes of each other.
    completion_bias_inclusion: list[str] | None = None
    completion_bias_inclusion_first_token_only: bool | None = None
    completion_bias_exclusion: list[str] | None = None
    completion_bias_exclusion_first_token_only: bool | None = None
    contextual_control_threshold: float | None = None
    control_log_additive: bool | None = None
    logit_bias: dict[int, float] | None = None

    @classmethod
    def from_text(cls, model: str, text: str, maximum_tokens: int, **fields: Any) -> CompletionRequest:
        return cls(model=model, prompt=Prompt.from_text(text), maximum_tokens=maximum_tokens, **fields)


class CompletionOutput(ResponseModel):
    completion: str
    finish_reason: str
    log_probs: list[dict[str, float | None]] | None = None
    raw_completion: str | None = None
    completion_tokens: list[str] | None = None


class CompletionResponse(ResponseModel):
    model_version: str
    completions: list[CompletionOutput]

    def best(self) -> CompletionOutput:
        """
        The best completion, i.e. the first one returned.

        Raises:
            EmptyCompletionsError: If the server returned no completions.
        """
        if not self.completions:
            raise EmptyCompletionsError(
                f"Response from model version {self.model_version!r} contains no completions"
            )
        return self.completions[0]

    def best_text(self) -> str:
        return self.best().completion
