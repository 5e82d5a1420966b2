"""Async client with one coroutine per remote endpoint.

Example:
    async with Client(os.environ["AA_API_TOKEN"]) as client:
        req = CompletionRequest.from_text(LUMINOUS_BASE, "An apple a day", 10).set(temperature=0.8)
        resp = await client.complete(req, nice=True)
        print("An apple a day" + resp.best_text())

Each call is a single round trip: no retries, no caching. One client may be
shared by concurrent tasks. The library sets no deadline; wrap calls in
``asyncio.wait_for`` when latency must be bounded.
"""
from __future__ import annotations
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import SecretStr, TypeAdapter, ValidationError
from tokenizers import Tokenizer

from aleph_alpha_api import http
from aleph_alpha_api.api_tokens import (
    ApiTokenMetadata,
    CreateApiTokenRequest,
    CreateApiTokenResponse,
)
from aleph_alpha_api.common.config import ALEPH_ALPHA_API_BASE_URL, ClientSettings, load_settings
from aleph_alpha_api.common.schema import WireModel
from aleph_alpha_api.completion import CompletionRequest, CompletionResponse
from aleph_alpha_api.embedding import (
    BatchSemanticEmbeddingRequest,
    BatchSemanticEmbeddingResponse,
    EmbeddingRequest,
    EmbeddingResponse,
    SemanticEmbeddingRequest,
    SemanticEmbeddingResponse,
)
from aleph_alpha_api.error import DeserializeError, TokenizerError
from aleph_alpha_api.evaluate import EvaluationRequest, EvaluationResponse
from aleph_alpha_api.explanation import ExplanationRequest, ExplanationResponse
from aleph_alpha_api.tokenization import (
    DetokenizationRequest,
    DetokenizationResponse,
    TokenizationRequest,
    TokenizationResponse,
)
from aleph_alpha_api.users import UserChange, UserDetail

LOGGER = logging.getLogger("aleph_alpha_api.client")

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _parse(response: httpx.Response, response_type: type[T] | Any) -> T:
    try:
        data = response.json()
    except ValueError as e:
        raise DeserializeError(f"Response from {response.request.url.path} is not JSON: {e}") from e
    try:
        return _adapter(response_type).validate_python(data)
    except ValidationError as e:
        raise DeserializeError(f"Unexpected response from {response.request.url.path}: {e}") from e


def _payload(body: WireModel | Mapping[str, Any]) -> Any:
    if isinstance(body, WireModel):
        return body.to_payload()
    return body


class Client:
    """
    Client for the inference API.

    Args:
        api_token: Token sent as bearer credential on every request.
        base_url: API root, the production endpoint unless testing elsewhere.
        timeout: Per-request timeout in seconds, ``None`` for no limit.
        nice: Politeness flag used when a completion-family call passes ``nice=None``.
        transport: Replacement httpx transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = ALEPH_ALPHA_API_BASE_URL,
        *,
        timeout: float | None = None,
        nice: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.nice = nice
        self._api_token = SecretStr(api_token)
        self._http = http.create_client(api_token, base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, transport: httpx.AsyncBaseTransport | None = None
    ) -> Client:
        return cls(
            settings.api_token.get_secret_value(),
            settings.base_url,
            timeout=settings.timeout,
            nice=settings.nice,
            transport=transport,
        )

    @classmethod
    def from_env(cls, path: str | Path | None = None) -> Client:
        """Build a client from ``AA_*`` environment variables and an optional YAML file."""
        return cls.from_settings(load_settings(path))

    @property
    def api_token(self) -> SecretStr:
        return self._api_token

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._http.aclose()

    # Generic verbs

    async def post(
        self,
        path: str,
        body: WireModel | Mapping[str, Any],
        response_type: type[T] | Any,
        query: Mapping[str, str] | None = None,
    ) -> T:
        response = await http.post(self._http, path, _payload(body), params=query)
        return _parse(response, response_type)

    async def post_nice(
        self,
        path: str,
        body: WireModel | Mapping[str, Any],
        response_type: type[T] | Any,
        nice: bool | None = None,
    ) -> T:
        if nice is None:
            nice = self.nice
        query = None if nice is None else {"nice": str(nice).lower()}
        return await self.post(path, body, response_type, query)

    async def get(self, path: str, response_type: type[T] | Any) -> T:
        response = await http.get(self._http, path)
        return _parse(response, response_type)

    async def get_string(self, path: str) -> str:
        response = await http.get(self._http, path)
        return response.text

    async def get_binary(self, path: str) -> bytes:
        response = await http.get(self._http, path)
        return response.content

    async def delete(self, path: str) -> None:
        await http.delete(self._http, path)

    # Inference

    async def complete(self, req: CompletionRequest, nice: bool | None = None) -> CompletionResponse:
        """Complete a prompt using a specific model."""
        return await self.post_nice("/complete", req, CompletionResponse, nice)

    async def evaluate(self, req: EvaluationRequest, nice: bool | None = None) -> EvaluationResponse:
        """Likelihood of the model producing an expected completion for a prompt."""
        return await self.post_nice("/evaluate", req, EvaluationResponse, nice)

    async def explain(self, req: ExplanationRequest, nice: bool | None = None) -> ExplanationResponse:
        """How much each section of a prompt impacts each token of the target."""
        return await self.post_nice("/explain", req, ExplanationResponse, nice)

    async def embed(self, req: EmbeddingRequest, nice: bool | None = None) -> EmbeddingResponse:
        return await self.post_nice("/embed", req, EmbeddingResponse, nice)

    async def semantic_embed(
        self, req: SemanticEmbeddingRequest, nice: bool | None = None
    ) -> SemanticEmbeddingResponse:
        """Embed a prompt for downstream tasks such as semantic similarity."""
        return await self.post_nice("/semantic_embed", req, SemanticEmbeddingResponse, nice)

    async def batch_semantic_embed(
        self, req: BatchSemanticEmbeddingRequest, nice: bool | None = None
    ) -> BatchSemanticEmbeddingResponse:
        return await self.post_nice("/batch_semantic_embed", req, BatchSemanticEmbeddingResponse, nice)

    async def tokenize(self, req: TokenizationRequest) -> TokenizationResponse:
        return await self.post("/tokenize", req, TokenizationResponse)

    async def detokenize(self, req: DetokenizationRequest) -> DetokenizationResponse:
        return await self.post("/detokenize", req, DetokenizationResponse)

    async def get_tokenizer_binary(self, model: str) -> bytes:
        return await self.get_binary(f"/models/{model}/tokenizer")

    async def get_tokenizer(self, model: str) -> Tokenizer:
        """
        Download and load the tokenizer of ``model``.

        Raises:
            TokenizerError: If the downloaded blob is not a valid tokenizer.
        """
        blob = await self.get_tokenizer_binary(model)
        try:
            return Tokenizer.from_buffer(blob)
        except Exception as e:
            raise TokenizerError(f"Failed to load tokenizer for {model}: {e}") from e

    async def get_version(self) -> str:
        """Version of the API deployed at ``base_url``."""
        return await self.get_string("/version")

    # Account

    async def list_api_tokens(self) -> list[ApiTokenMetadata]:
        """Metadata of the tokens registered for this user."""
        return await self.get("/users/me/tokens", list[ApiTokenMetadata])

    async def create_api_token(self, req: CreateApiTokenRequest) -> CreateApiTokenResponse:
        """Create a token. Its value is only returned by this call."""
        response = await self.post("/users/me/tokens", req, CreateApiTokenResponse)
        LOGGER.info("Created API token %s", response.metadata.token_id)
        return response

    async def delete_api_token(self, token_id: int) -> None:
        await self.delete(f"/users/me/tokens/{token_id}")
        LOGGER.info("Deleted API token %s", token_id)

    async def get_user_settings(self) -> UserDetail:
        return await self.get("/users/me", UserDetail)

    async def change_user_settings(self, settings: UserChange) -> UserDetail:
        return await self.post("/users/me", settings, UserDetail)
