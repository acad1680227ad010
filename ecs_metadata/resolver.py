"""Resolves which version of the task metadata endpoint to use."""

from enum import Enum
from typing import NamedTuple, Optional

from loguru import logger

from .config import EndpointSettings
from .exceptions import NoMetadataAvailable


class MetadataVersion(Enum):
    """Schema version of the task metadata endpoint."""

    V3 = "v3"
    V4 = "v4"


class Endpoint(NamedTuple):
    """Base URL of a task metadata endpoint and the schema version it serves."""

    version: MetadataVersion
    url: str


def resolve_endpoint(settings: Optional[EndpointSettings] = None) -> Endpoint:
    """Determine the endpoint to fetch task metadata from.

    The V4 endpoint is preferred. Tasks running on Fargate platform version
    1.4.0 or later advertise both, but V3 is only kept for compatibility.

    Settings are read from the environment on every call unless given.
    """
    if settings is None:
        settings = EndpointSettings()

    if settings.uri_v4:
        endpoint = Endpoint(MetadataVersion.V4, settings.uri_v4)
    elif settings.uri_v3:
        endpoint = Endpoint(MetadataVersion.V3, settings.uri_v3)
    else:
        raise NoMetadataAvailable()

    logger.debug(
        "Resolved task metadata endpoint {} ({})",
        endpoint.url,
        endpoint.version.value,
    )
    return endpoint


def has_metadata(settings: Optional[EndpointSettings] = None) -> bool:
    """Returns whether a task metadata endpoint is available in the environment."""
    if settings is None:
        settings = EndpointSettings()
    return bool(settings.uri_v3 or settings.uri_v4)
