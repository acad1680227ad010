class MetadataError(Exception):
    """Base class for task metadata exceptions."""


class NoMetadataAvailable(MetadataError):
    """Raised when no task metadata endpoint is advertised in the environment."""

    def __init__(self, message: str = "could not resolve ECS task metadata") -> None:
        super().__init__(message)


class MissingEndpoint(MetadataError):
    """Raised when the endpoint for a specific metadata version is not set."""

    env_var: str

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"missing metadata uri in environment ({env_var})")


class DecodeFailed(MetadataError):
    """Raised when a metadata response can't be parsed into its model."""
