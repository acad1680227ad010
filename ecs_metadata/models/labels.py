from collections.abc import Mapping
from typing import Any

from pydantic import (
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    PrivateAttr,
    model_serializer,
    model_validator,
)

from .common import MetadataModel

LABEL_ECS_CLUSTER = "com.amazonaws.ecs.cluster"
LABEL_ECS_CONTAINER_NAME = "com.amazonaws.ecs.container-name"
LABEL_ECS_TASK_ARN = "com.amazonaws.ecs.task-arn"
LABEL_ECS_TASK_DEFINITION_FAMILY = "com.amazonaws.ecs.task-definition-family"
LABEL_ECS_TASK_DEFINITION_VERSION = "com.amazonaws.ecs.task-definition-version"

WELL_KNOWN_LABELS = frozenset(
    {
        LABEL_ECS_CLUSTER,
        LABEL_ECS_CONTAINER_NAME,
        LABEL_ECS_TASK_ARN,
        LABEL_ECS_TASK_DEFINITION_FAMILY,
        LABEL_ECS_TASK_DEFINITION_VERSION,
    }
)


class LabelsV3(MetadataModel):
    """Docker labels of a container in the V3 format.

    Only the labels set by the ECS agent are kept.
    """

    ecs_cluster: str = Field("", alias=LABEL_ECS_CLUSTER)
    ecs_container_name: str = Field("", alias=LABEL_ECS_CONTAINER_NAME)
    ecs_task_arn: str = Field("", alias=LABEL_ECS_TASK_ARN)
    ecs_task_definition_family: str = Field("", alias=LABEL_ECS_TASK_DEFINITION_FAMILY)
    ecs_task_definition_version: str = Field(
        "", alias=LABEL_ECS_TASK_DEFINITION_VERSION
    )


class LabelsV4(LabelsV3):
    """Docker labels of a container in the V4 format.

    The labels set by the ECS agent are exposed as attributes. Any other
    label (e.g. labels from the task definition) can be looked up with `get()`.

    Example:
        >>> labels = LabelsV4.model_validate(
        ...     {"com.amazonaws.ecs.cluster": "default", "team": "payments"}
        ... )
        >>> labels.ecs_cluster
        'default'
        >>> labels.get("team")
        'payments'
        >>> labels.get("com.amazonaws.ecs.cluster")
        ''
    """

    # Any other key is a label, so labels are only populated by label name
    model_config = ConfigDict(populate_by_name=False)

    _rest: dict[str, str] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def split_labels(
        cls, data: Any, handler: ModelWrapValidatorHandler["LabelsV4"]
    ) -> "LabelsV4":
        """Move the ECS labels into their fields and keep the rest aside."""
        if isinstance(data, cls):
            return handler(data)
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError("labels must be an object")

        known: dict[str, Any] = {}
        rest: dict[str, str] = {}
        for key, value in data.items():
            if key in WELL_KNOWN_LABELS:
                known[key] = value
            elif value is None:
                rest[key] = ""
            elif isinstance(value, str):
                rest[key] = value
            else:
                raise ValueError(f"value of label '{key}' must be a string")

        labels = handler(known)
        labels._rest = rest
        return labels

    @model_serializer
    def merge_labels(self) -> dict[str, str]:
        # Labels are always keyed by label name. Unset ECS labels are left out.
        d = {
            field.alias: getattr(self, name)
            for name, field in type(self).model_fields.items()
            if getattr(self, name)
        }
        d.update(self._rest)
        return d

    def get(self, name: str) -> str:
        """Get the value of a label that isn't set by the ECS agent.

        Returns an empty string if the label doesn't exist.
        """
        return self._rest.get(name, "")
