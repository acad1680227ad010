"""Models for the task metadata endpoint version 4.

See: https://docs.aws.amazon.com/AmazonECS/latest/developerguide/task-metadata-endpoint-v4.html
"""

from typing import ClassVar

from pydantic import Field

from ..resolver import MetadataVersion
from .common import Limits, MetadataModel, Timestamp
from .labels import LabelsV4


class LogOptions(MetadataModel):
    """Options of the awslogs log driver."""

    # The agent reports this as a string ("true"), not as a boolean
    awslogs_create_group: str = Field("", alias="awslogs-create-group")
    awslogs_group: str = Field("", alias="awslogs-group")
    awslogs_stream: str = Field("", alias="awslogs-stream")
    awslogs_region: str = Field("", alias="awslogs-region")


class NetworkV4(MetadataModel):
    network_mode: str = Field("", alias="NetworkMode")
    ipv4_addresses: list[str] = Field(default_factory=list, alias="IPv4Addresses")
    attachment_index: int = Field(0, alias="AttachmentIndex")
    ipv4_subnet_cidr_block: str = Field("", alias="IPv4SubnetCIDRBlock")
    mac_address: str = Field("", alias="MACAddress")
    domain_name_servers: list[str] = Field(
        default_factory=list, alias="DomainNameServers"
    )
    domain_name_search_list: list[str] = Field(
        default_factory=list, alias="DomainNameSearchList"
    )
    private_dns_name: str = Field("", alias="PrivateDNSName")
    subnet_gateway_ipv4_address: str = Field("", alias="SubnetGatewayIpv4Address")


class ContainerMetadataV4(MetadataModel):
    """Metadata of a single container, as returned by `${ECS_CONTAINER_METADATA_URI_V4}`."""

    version: ClassVar[MetadataVersion] = MetadataVersion.V4

    docker_id: str = Field("", alias="DockerId")
    name: str = Field("", alias="Name")
    docker_name: str = Field("", alias="DockerName")
    image: str = Field("", alias="Image")
    image_id: str = Field("", alias="ImageID")
    labels: LabelsV4 = Field(default_factory=LabelsV4, alias="Labels")
    desired_status: str = Field("", alias="DesiredStatus")
    known_status: str = Field("", alias="KnownStatus")
    limits: Limits = Field(default_factory=Limits, alias="Limits")
    created_at: Timestamp = Field(None, alias="CreatedAt")
    started_at: Timestamp = Field(None, alias="StartedAt")
    type: str = Field("", alias="Type")
    container_arn: str = Field("", alias="ContainerARN")
    log_driver: str = Field("", alias="LogDriver")
    log_options: LogOptions = Field(default_factory=LogOptions, alias="LogOptions")
    networks: list[NetworkV4] = Field(default_factory=list, alias="Networks")


class TaskMetadataV4(MetadataModel):
    """Metadata of the task, as returned by `${ECS_CONTAINER_METADATA_URI_V4}/task`."""

    version: ClassVar[MetadataVersion] = MetadataVersion.V4

    cluster: str = Field("", alias="Cluster")
    task_arn: str = Field("", alias="TaskARN")
    family: str = Field("", alias="Family")
    revision: str = Field("", alias="Revision")
    desired_status: str = Field("", alias="DesiredStatus")
    known_status: str = Field("", alias="KnownStatus")
    limits: Limits = Field(default_factory=Limits, alias="Limits")
    pull_started_at: Timestamp = Field(None, alias="PullStartedAt")
    pull_stopped_at: Timestamp = Field(None, alias="PullStoppedAt")
    availability_zone: str = Field("", alias="AvailabilityZone")
    launch_type: str = Field("", alias="LaunchType")
    containers: list[ContainerMetadataV4] = Field(
        default_factory=list, alias="Containers"
    )
