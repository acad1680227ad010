"""Models for the task metadata endpoint version 3.

See: https://docs.aws.amazon.com/AmazonECS/latest/developerguide/task-metadata-endpoint-v3.html
"""

from typing import ClassVar

from pydantic import Field

from ..resolver import MetadataVersion
from .common import Limits, MetadataModel, Timestamp
from .labels import LabelsV3


class ContainerLimitsV3(MetadataModel):
    """Resource limits of a container. V3 reports CPU units as an integer."""

    cpu: int = Field(0, alias="CPU")
    memory: int = Field(0, alias="Memory")


class NetworkV3(MetadataModel):
    network_mode: str = Field("", alias="NetworkMode")
    ipv4_addresses: list[str] = Field(default_factory=list, alias="IPv4Addresses")


class ContainerMetadataV3(MetadataModel):
    """Metadata of a single container, as returned by `${ECS_CONTAINER_METADATA_URI}`."""

    version: ClassVar[MetadataVersion] = MetadataVersion.V3

    docker_id: str = Field("", alias="DockerId")
    name: str = Field("", alias="Name")
    docker_name: str = Field("", alias="DockerName")
    image: str = Field("", alias="Image")
    image_id: str = Field("", alias="ImageID")
    labels: LabelsV3 = Field(default_factory=LabelsV3, alias="Labels")
    desired_status: str = Field("", alias="DesiredStatus")
    known_status: str = Field("", alias="KnownStatus")
    limits: ContainerLimitsV3 = Field(default_factory=ContainerLimitsV3, alias="Limits")
    created_at: Timestamp = Field(None, alias="CreatedAt")
    started_at: Timestamp = Field(None, alias="StartedAt")
    type: str = Field("", alias="Type")
    networks: list[NetworkV3] = Field(default_factory=list, alias="Networks")


class TaskMetadataV3(MetadataModel):
    """Metadata of the task, as returned by `${ECS_CONTAINER_METADATA_URI}/task`."""

    version: ClassVar[MetadataVersion] = MetadataVersion.V3

    cluster: str = Field("", alias="Cluster")
    task_arn: str = Field("", alias="TaskARN")
    family: str = Field("", alias="Family")
    revision: str = Field("", alias="Revision")
    desired_status: str = Field("", alias="DesiredStatus")
    known_status: str = Field("", alias="KnownStatus")
    containers: list[ContainerMetadataV3] = Field(
        default_factory=list, alias="Containers"
    )
    limits: Limits = Field(default_factory=Limits, alias="Limits")
    pull_started_at: Timestamp = Field(None, alias="PullStartedAt")
    pull_stopped_at: Timestamp = Field(None, alias="PullStoppedAt")
