"""Authenticated HTTP transport.

One function per verb. Each performs a single exchange and either returns the
successful ``httpx.Response`` or raises an :mod:`aleph_alpha_api.error` type.
"""
from __future__ import annotations
import logging
from typing import Any, Mapping

import httpx

from aleph_alpha_api.error import BusyError, ClientError, HttpError, TooManyRequestsError

LOGGER = logging.getLogger("aleph_alpha_api.http")

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def create_client(
    api_token: str,
    base_url: str,
    *,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the pooled async client every call goes through.

    The bearer token is a default header; httpx masks ``Authorization`` in its
    header reprs, and this module never logs headers.

    Args:
        api_token: Token sent as ``Authorization: Bearer <token>``.
        base_url: Prefix for every request path.
        timeout: Seconds before giving up on a request, ``None`` for no limit.
        transport: Replacement transport (mock or ASGI) for tests.
    """
    headers = {"Authorization": f"Bearer {api_token}"}
    return httpx.AsyncClient(
        base_url=base_url,
        headers=headers,
        timeout=httpx.Timeout(timeout),
        transport=transport,
    )


def translate_http_error(response: httpx.Response) -> httpx.Response:
    """Return ``response`` if it succeeded, otherwise raise the matching error."""
    if response.is_success:
        return response
    status = response.status_code
    # Keep the body even when it comes from a proxy rather than the API.
    body = response.text
    LOGGER.warning(
        "%s %s failed with status %s",
        response.request.method,
        response.request.url.path,
        status,
    )
    if status == httpx.codes.TOO_MANY_REQUESTS:
        raise TooManyRequestsError()
    if status == httpx.codes.SERVICE_UNAVAILABLE:
        raise BusyError()
    raise HttpError(status=status, body=body)


async def _send(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    *,
    json: Any = None,
    params: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.Response:
    try:
        response = await client.request(method, path, json=json, params=params, headers=headers)
    except httpx.HTTPError as e:
        LOGGER.warning("%s %s failed: %s", method, path, e)
        raise ClientError(f"{method} {path} failed: {e}") from e
    LOGGER.debug("%s %s -> %s", method, path, response.status_code)
    return translate_http_error(response)


async def post(
    client: httpx.AsyncClient,
    path: str,
    body: Any,
    params: Mapping[str, str] | None = None,
) -> httpx.Response:
    return await _send(client, "POST", path, json=body, params=params, headers=JSON_HEADERS)


async def get(
    client: httpx.AsyncClient,
    path: str,
    params: Mapping[str, str] | None = None,
) -> httpx.Response:
    return await _send(client, "GET", path, params=params)


async def delete(client: httpx.AsyncClient, path: str) -> httpx.Response:
    return await _send(client, "DELETE", path)
