"""
Async client for the Aleph Alpha inference API.

Provides:
- Typed request/response models for completion, evaluation, explanation,
  embeddings, tokenization, API tokens and user settings
- An httpx-based transport that authenticates and maps failures to
  :mod:`aleph_alpha_api.error` types
- :class:`Client`, one coroutine per endpoint
"""
from aleph_alpha_api.api_tokens import (
    ApiTokenMetadata,
    CreateApiTokenRequest,
    CreateApiTokenResponse,
    ListApiTokensResponse,
)
from aleph_alpha_api.client import Client
from aleph_alpha_api.common.config import ALEPH_ALPHA_API_BASE_URL, ClientSettings, load_settings
from aleph_alpha_api.completion import CompletionOutput, CompletionRequest, CompletionResponse
from aleph_alpha_api.embedding import (
    BatchSemanticEmbeddingRequest,
    BatchSemanticEmbeddingResponse,
    EmbeddingRepresentation,
    EmbeddingRequest,
    EmbeddingResponse,
    SemanticEmbeddingRequest,
    SemanticEmbeddingResponse,
)
from aleph_alpha_api.error import (
    ApiError,
    BusyError,
    ClientError,
    DeserializeError,
    EmptyCompletionsError,
    HttpError,
    TokenizerError,
    TooManyRequestsError,
)
from aleph_alpha_api.evaluate import EvaluationRequest, EvaluationResponse, EvaluationResult
from aleph_alpha_api.explanation import (
    ExplanationItem,
    ExplanationRequest,
    ExplanationResponse,
    ImageImportance,
    ImageRect,
    Postprocessing,
    PromptGranularity,
    PromptGranularityType,
    ScoredRect,
    ScoredSegment,
    TargetGranularity,
    TargetImportance,
    TextImportance,
    TokenIdsImportance,
)
from aleph_alpha_api.prompt import (
    BoundingBox,
    ControlTokenOverlap,
    Hosting,
    Image,
    ImageControl,
    Prompt,
    Text,
    TextControl,
    TokenControl,
    TokenIds,
)
from aleph_alpha_api.tokenization import (
    DetokenizationRequest,
    DetokenizationResponse,
    TokenizationRequest,
    TokenizationResponse,
)
from aleph_alpha_api.users import UserChange, UserDetail

LUMINOUS_BASE = "luminous-base"
LUMINOUS_BASE_CONTROL = "luminous-base-control"
LUMINOUS_EXTENDED = "luminous-extended"
LUMINOUS_EXTENDED_CONTROL = "luminous-extended-control"
LUMINOUS_SUPREME = "luminous-supreme"
LUMINOUS_SUPREME_CONTROL = "luminous-supreme-control"

__all__ = [
    "ALEPH_ALPHA_API_BASE_URL",
    "LUMINOUS_BASE",
    "LUMINOUS_BASE_CONTROL",
    "LUMINOUS_EXTENDED",
    "LUMINOUS_EXTENDED_CONTROL",
    "LUMINOUS_SUPREME",
    "LUMINOUS_SUPREME_CONTROL",
    "ApiError",
    "ApiTokenMetadata",
    "BatchSemanticEmbeddingRequest",
    "BatchSemanticEmbeddingResponse",
    "BoundingBox",
    "BusyError",
    "Client",
    "ClientError",
    "ClientSettings",
    "CompletionOutput",
    "CompletionRequest",
    "CompletionResponse",
    "ControlTokenOverlap",
    "CreateApiTokenRequest",
    "CreateApiTokenResponse",
    "DeserializeError",
    "DetokenizationRequest",
    "DetokenizationResponse",
    "EmbeddingRepresentation",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EmptyCompletionsError",
    "EvaluationRequest",
    "EvaluationResponse",
    "EvaluationResult",
    "ExplanationItem",
    "ExplanationRequest",
    "ExplanationResponse",
    "Hosting",
    "HttpError",
    "Image",
    "ImageControl",
    "ImageImportance",
    "ImageRect",
    "ListApiTokensResponse",
    "Postprocessing",
    "Prompt",
    "PromptGranularity",
    "PromptGranularityType",
    "ScoredRect",
    "ScoredSegment",
    "SemanticEmbeddingRequest",
    "SemanticEmbeddingResponse",
    "TargetGranularity",
    "TargetImportance",
    "Text",
    "TextControl",
    "TextImportance",
    "TokenControl",
    "TokenIds",
    "TokenIdsImportance",
    "TokenizationRequest",
    "TokenizationResponse",
    "TokenizerError",
    "TooManyRequestsError",
    "UserChange",
    "UserDetail",
    "load_settings",
]
