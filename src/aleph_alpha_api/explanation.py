"""Explanation models for ``POST /explain``.

An explanation reports how much each part of the prompt contributed to each
token of a target completion.
"""
from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from aleph_alpha_api.common.schema import ResponseModel, WireModel
from aleph_alpha_api.prompt import ControlTokenOverlap, Hosting, Prompt


class Postprocessing(str, Enum):
    """Applied to the difference in cross entropy scores for each token."""

    NONE = "none"
    ABSOLUTE = "absolute"
    SQUARE = "square"


class PromptGranularityType(str, Enum):
    TOKEN = "token"
    WORD = "word"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"
    CUSTOM = "custom"


class PromptGranularity(WireModel):
    """
    Unit in which prompt importance is reported.

    ``CUSTOM`` splits the prompt on ``delimiter``. For image items the
    granularity picks the tiling: token 12x12, word 6x6, sentence 3x3,
    paragraph 1.
    """

    granularity_type: PromptGranularityType = Field(default=PromptGranularityType.TOKEN, alias="type")
    delimiter: str = ""


class TargetGranularity(str, Enum):
    """One explanation for the whole target, or one per target token."""

    COMPLETE = "complete"
    TOKEN = "token"


class ExplanationRequest(WireModel):
    model: str
    prompt: Prompt
    hosting: Hosting | None = None
    target: str | None = None
    # 0 <= factor < 1 suppresses, 1 is identity, > 1 amplifies.
    control_factor: float | None = None
    contextual_control_threshold: float | None = None
    control_log_additive: bool | None = None
    postprocessing: Postprocessing | None = None
    normalize: bool | None = None
    prompt_granularity: PromptGranularity | None = None
    target_granularity: TargetGranularity | None = None
    control_token_overlap: ControlTokenOverlap | None = None


class ScoredSegment(ResponseModel):
    """Score for ``length`` characters starting at ``start`` (inclusive)."""

    start: int
    length: int
    score: float


class ImageRect(ResponseModel):
    """Region of an image prompt item, in fractions of the image size."""

    top: float
    left: float
    width: float
    height: float


class ScoredRect(ResponseModel):
    rect: ImageRect
    score: float


class TokenIdsImportance(ResponseModel):
    """One score per token of a ``token_ids`` prompt item, in prompt order."""

    type: Literal["token_ids"] = "token_ids"
    scores: list[float]


class TargetImportance(ResponseModel):
    """Importance of the part of the target preceding the explained token."""

    type: Literal["target"] = "target"
    scores: list[ScoredSegment]


class TextImportance(ResponseModel):
    type: Literal["text"] = "text"
    scores: list[ScoredSegment]


class ImageImportance(ResponseModel):
    type: Literal["image"] = "image"
    scores: list[ScoredRect]


ItemImportance = Annotated[
    Union[TokenIdsImportance, TargetImportance, TextImportance, ImageImportance],
    Field(discriminator="type"),
]


class ExplanationItem(ResponseModel):
    target: str
    # One entry per prompt item in order; the last one refers to the target.
    items: list[ItemImportance]


class ExplanationResponse(ResponseModel):
    model_version: str
    explanations: list[ExplanationItem]
