from .base import *
from .transport import *

__all__ = [
    "MetadataError",
    "NoMetadataAvailable",
    "MissingEndpoint",
    "DecodeFailed",
    "TransportError",
    "RequestConstructionFailed",
    "RequestFailed",
    "ResponseReadFailed",
]
