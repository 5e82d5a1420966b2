"""API token management models for ``/users/me/tokens``."""
from __future__ import annotations

from aleph_alpha_api.common.schema import ResponseModel, WireModel


class ApiTokenMetadata(ResponseModel):
    """A registered token. The token value itself is never listed."""

    description: str | None = None
    token_id: int


ListApiTokensResponse = list[ApiTokenMetadata]


class CreateApiTokenRequest(WireModel):
    description: str


class CreateApiTokenResponse(ResponseModel):
    metadata: ApiTokenMetadata
    # Only returned once, on creation.
    token: str
