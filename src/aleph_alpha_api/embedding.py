"""Embedding models for ``/embed``, ``/semantic_embed`` and ``/batch_semantic_embed``."""
from __future__ import annotations
from enum import Enum

from pydantic import Field

from aleph_alpha_api.common.schema import ResponseModel, WireModel
from aleph_alpha_api.prompt import Hosting, Prompt

Embedding = list[float]


class EmbeddingRequest(WireModel):
    """
    Raw layer embeddings.

    ``layers`` selects transformer layers (negative values count from the
    end) and ``pooling`` the aggregations (e.g. ``"max"``, ``"mean"``); the
    response holds one vector per layer/pooling pair.
    """

    model: str
    prompt: Prompt
    layers: list[int]
    pooling: list[str]
    hosting: Hosting | None = None
    tokens: bool | None = None
    embedding_type: str | None = Field(default=None, alias="type")
    normalize: bool | None = None
    contextual_control_threshold: float | None = None
    control_log_additive: bool | None = None

    @classmethod
    def from_text(cls, model: str, prompt: str, layer: int, pooling: str, normalize: bool) -> EmbeddingRequest:
        return cls(
            model=model,
            prompt=Prompt.from_text(prompt),
            layers=[layer],
            pooling=[pooling],
            normalize=normalize,
        )


class EmbeddingResponse(ResponseModel):
    model_version: str
    # "layer_<n>" -> pooling -> vector
    embeddings: dict[str, dict[str, Embedding]]
    tokens: list[str] | None = None


class EmbeddingRepresentation(str, Enum):
    """
    Use ``SYMMETRIC`` to compare texts of the same kind, ``DOCUMENT`` and
    ``QUERY`` on the two sides of an asymmetric search.
    """

    SYMMETRIC = "symmetric"
    DOCUMENT = "document"
    QUERY = "query"


class SemanticEmbeddingRequest(WireModel):
    model: str
    prompt: Prompt
    representation: EmbeddingRepresentation = EmbeddingRepresentation.SYMMETRIC
    hosting: Hosting | None = None
    # Only 128 is supported by the API at the moment.
    compress_to_size: int | None = None
    normalize: bool | None = None
    contextual_control_threshold: float | None = None
    control_log_additive: bool | None = None


class SemanticEmbeddingResponse(ResponseModel):
    model_version: str
    embedding: Embedding


class BatchSemanticEmbeddingRequest(WireModel):
    model: str
    prompts: list[Prompt]
    representation: EmbeddingRepresentation = EmbeddingRepresentation.SYMMETRIC
    hosting: Hosting | None = None
    compress_to_size: int | None = None
    normalize: bool | None = None
    contextual_control_threshold: float | None = None
    control_log_additive: bool | None = None


class BatchSemanticEmbeddingResponse(ResponseModel):
    model_version: str
    # Same order as the request prompts.
    embeddings: list[Embedding]
