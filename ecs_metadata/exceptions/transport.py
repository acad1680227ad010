from .base import MetadataError


class TransportError(MetadataError):
    """Base class for errors raised while talking to the metadata endpoint."""


class RequestConstructionFailed(TransportError):
    """The metadata URL could not be turned into a request."""


class RequestFailed(TransportError):
    """The HTTP client failed to send the request (network error, timeout, ...)."""


class ResponseReadFailed(TransportError):
    """The response body could not be read in full."""
