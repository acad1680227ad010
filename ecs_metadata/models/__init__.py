from typing import Union

from .common import Limits, decode
from .labels import LabelsV3, LabelsV4
from .v3 import ContainerLimitsV3, ContainerMetadataV3, NetworkV3, TaskMetadataV3
from .v4 import ContainerMetadataV4, LogOptions, NetworkV4, TaskMetadataV4

# Return types of get_task() and get_container(). Use the `version` class
# attribute (or isinstance) to tell them apart.
TaskMetadata = Union[TaskMetadataV3, TaskMetadataV4]
ContainerMetadata = Union[ContainerMetadataV3, ContainerMetadataV4]

__all__ = [
    "ContainerLimitsV3",
    "ContainerMetadata",
    "ContainerMetadataV3",
    "ContainerMetadataV4",
    "LabelsV3",
    "LabelsV4",
    "Limits",
    "LogOptions",
    "NetworkV3",
    "NetworkV4",
    "TaskMetadata",
    "TaskMetadataV3",
    "TaskMetadataV4",
    "decode",
]
