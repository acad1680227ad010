"""Building blocks shared by the V3 and V4 metadata models."""

from datetime import datetime
from typing import Annotated, Any, Optional, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from ..exceptions import DecodeFailed
from ..utils.time import truncate_nanoseconds

# Timestamps are None when the endpoint omits them (e.g. StartedAt of a
# container that hasn't started yet).
Timestamp = Annotated[Optional[datetime], BeforeValidator(truncate_nanoseconds)]


class MetadataModel(BaseModel):
    """Base class for documents returned by the task metadata endpoint.

    Fields are populated from the endpoint's (PascalCase) field names, but can
    also be populated by their attribute names. Unknown fields are ignored,
    and fields that are null are left at their defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return v


class Limits(MetadataModel):
    """Resource limits of a task or container."""

    cpu: float = Field(0.0, alias="CPU")  # vCPUs
    memory: int = Field(0, alias="Memory")  # MiB


ModelT = TypeVar("ModelT", bound=BaseModel)


def decode(model: type[ModelT], body: bytes) -> ModelT:
    """Parse a JSON document into the given model.

    Raises `DecodeFailed` if the body is not valid JSON or doesn't match
    the shape of the model. Missing fields are left at their defaults.
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise DecodeFailed(f"invalid {model.__name__} document: {e}") from e
