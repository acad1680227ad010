"""Module for fetching documents from the task metadata endpoint."""

from typing import Optional

import httpx
from loguru import logger

from .exceptions import RequestConstructionFailed, RequestFailed, ResponseReadFailed


def _build_request(
    client: httpx.AsyncClient, url: str, timeout: Optional[float]
) -> httpx.Request:
    try:
        if timeout is None:
            return client.build_request("GET", url)
        return client.build_request("GET", url, timeout=timeout)
    except httpx.InvalidURL as e:
        raise RequestConstructionFailed(
            f"could not create metadata request: {e}"
        ) from e


async def fetch(
    client: httpx.AsyncClient, url: str, timeout: Optional[float] = None
) -> bytes:
    """Issue a single GET request against `url` and return the raw response body.

    The status code of the response is not inspected, and the request is
    never retried. Cancelling the calling task cancels the request.

    Parameters
    ----------
    client : `httpx.AsyncClient`
        Client used to send the request. Timeouts and other transport
        settings are taken from the client unless `timeout` is given.
    url : `str`
        Fully formed URL of the metadata document.
    timeout : `Optional[float]`
        Timeout in seconds for this request only.

    Returns
    -------
    `bytes`
        The complete response body.

    Raises
    ------
    `RequestConstructionFailed`
        The URL is not a valid URL.
    `RequestFailed`
        The request could not be sent (network error, timeout, etc.)
    `ResponseReadFailed`
        The response body could not be read.
    """
    request = _build_request(client, url, timeout)

    logger.debug("Fetching metadata from {}", url)
    try:
        response = await client.send(request, stream=True)
    except httpx.HTTPError as e:
        raise RequestFailed(f"could not send metadata request: {e}") from e

    try:
        body = await response.aread()
    except (httpx.HTTPError, httpx.StreamError) as e:
        raise ResponseReadFailed(f"could not read metadata response: {e}") from e
    finally:
        await response.aclose()

    logger.debug(
        "Received {} bytes from {} (status code {})",
        len(body),
        url,
        response.status_code,
    )
    return body
