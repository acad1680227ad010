"""Module defining functions for retrieving ECS task and container metadata.

The version of the task metadata endpoint is determined by the environment
variables set by the ECS agent:

- `ECS_CONTAINER_METADATA_URI_V4` (Fargate platform 1.4.0+, EC2 agent 1.39.0+)
- `ECS_CONTAINER_METADATA_URI` (Fargate platform 1.3.0+, EC2 agent 1.21.0+)

When both are set, V4 is used.
"""

from typing import Optional

import httpx
from loguru import logger

from .config import ENV_METADATA_URI_V3, ENV_METADATA_URI_V4, EndpointSettings
from .exceptions import DecodeFailed, MissingEndpoint, TransportError
from .http import fetch
from .models import (
    ContainerMetadata,
    ContainerMetadataV3,
    ContainerMetadataV4,
    TaskMetadata,
    TaskMetadataV3,
    TaskMetadataV4,
    decode,
)
from .models.common import ModelT
from .resolver import MetadataVersion, has_metadata, resolve_endpoint

__all__ = [
    "get_task",
    "get_container",
    "get_task_v3",
    "get_container_v3",
    "get_task_v4",
    "get_container_v4",
    "has_metadata",
]


async def get_task(
    client: httpx.AsyncClient,
    settings: Optional[EndpointSettings] = None,
    timeout: Optional[float] = None,
) -> TaskMetadata:
    """Get the metadata of the current task.

    Example:
        >>> async with httpx.AsyncClient() as client:
        ...     task = await get_task(client)
        >>> task.version
        <MetadataVersion.V4: 'v4'>
        >>> task.family
        'curltest'

    Parameters
    ----------
    client : `httpx.AsyncClient`
        Client used to query the metadata endpoint.
    settings : `Optional[EndpointSettings]`
        Endpoint URLs. Read from the environment if omitted.
    timeout : `Optional[float]`
        Timeout in seconds for the request, overriding the client's timeout.

    Returns
    -------
    `TaskMetadata`
        Either a `TaskMetadataV4` or a `TaskMetadataV3`, depending on the
        endpoint that is available.

    Raises
    ------
    `NoMetadataAvailable`
        Neither endpoint is advertised in the environment.
    `TransportError`
        The request failed.
    `DecodeFailed`
        The response could not be parsed.
    """
    if settings is None:
        settings = EndpointSettings()
    endpoint = resolve_endpoint(settings)
    if endpoint.version == MetadataVersion.V4:
        return await get_task_v4(client, settings, timeout)
    return await get_task_v3(client, settings, timeout)


async def get_container(
    client: httpx.AsyncClient,
    settings: Optional[EndpointSettings] = None,
    timeout: Optional[float] = None,
) -> ContainerMetadata:
    """Get the metadata of the container this process runs in.

    Returns either a `ContainerMetadataV4` or a `ContainerMetadataV3`.
    See `get_task` for the parameters and exceptions.
    """
    if settings is None:
        settings = EndpointSettings()
    endpoint = resolve_endpoint(settings)
    if endpoint.version == MetadataVersion.V4:
        return await get_container_v4(client, settings, timeout)
    return await get_container_v3(client, settings, timeout)


async def get_task_v3(
    client: httpx.AsyncClient,
    settings: Optional[EndpointSettings] = None,
    timeout: Optional[float] = None,
) -> TaskMetadataV3:
    """Get the metadata of the current task in the V3 format."""
    base_url = _get_base_url(settings, MetadataVersion.V3)
    return await _get_document(
        client, f"{base_url}/task", TaskMetadataV3, "task metadata (v3)", timeout
    )


async def get_container_v3(
    client: httpx.AsyncClient,
    settings: Optional[EndpointSettings] = None,
    timeout: Optional[float] = None,
) -> ContainerMetadataV3:
    """Get the metadata of the current container in the V3 format."""
    base_url = _get_base_url(settings, MetadataVersion.V3)
    return await _get_document(
        client, base_url, ContainerMetadataV3, "container metadata (v3)", timeout
    )


async def get_task_v4(
    client: httpx.AsyncClient,
    settings: Optional[EndpointSettings] = None,
    timeout: Optional[float] = None,
) -> TaskMetadataV4:
    """Get the metadata of the current task in the V4 format."""
    base_url = _get_base_url(settings, MetadataVersion.V4)
    return await _get_document(
        client, f"{base_url}/task", TaskMetadataV4, "task metadata (v4)", timeout
    )


async def get_container_v4(
    client: httpx.AsyncClient,
    settings: Optional[EndpointSettings] = None,
    timeout: Optional[float] = None,
) -> ContainerMetadataV4:
    """Get the metadata of the current container in the V4 format."""
    base_url = _get_base_url(settings, MetadataVersion.V4)
    return await _get_document(
        client, base_url, ContainerMetadataV4, "container metadata (v4)", timeout
    )


def _get_base_url(
    settings: Optional[EndpointSettings], version: MetadataVersion
) -> str:
    """Get the base URL of a specific version of the endpoint.

    Raises `MissingEndpoint` if its environment variable is unset or empty.
    """
    if settings is None:
        settings = EndpointSettings()
    if version == MetadataVersion.V4:
        url, env_var = settings.uri_v4, ENV_METADATA_URI_V4
    else:
        url, env_var = settings.uri_v3, ENV_METADATA_URI_V3
    if not url:
        raise MissingEndpoint(env_var)
    return url


async def _get_document(
    client: httpx.AsyncClient,
    url: str,
    model: type[ModelT],
    description: str,
    timeout: Optional[float],
) -> ModelT:
    """Fetch a document from the metadata endpoint and parse it into `model`."""
    try:
        body = await fetch(client, url, timeout=timeout)
    except TransportError as e:
        raise type(e)(f"could not retrieve {description}: {e}") from e

    try:
        doc = decode(model, body)
    except DecodeFailed as e:
        raise DecodeFailed(f"could not unmarshal into {description}: {e}") from e

    logger.debug("Parsed {} from {}", description, url)
    return doc
