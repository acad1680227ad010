from datetime import datetime, timezone
from typing import Any

from hypothesis import strategies as st

from ecs_metadata.models.labels import WELL_KNOWN_LABELS

# Hypothesis strategies for documents in the wire format of the V4 endpoint

_TEXT = st.text(max_size=20)
_TIMESTAMP = st.datetimes(
    min_value=datetime(2000, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(timezone.utc),
).map(lambda dt: dt.isoformat().replace("+00:00", "Z"))

# Labels not set by the ECS agent (e.g. docker labels from the task definition)
EXTRA_LABELS = st.dictionaries(
    st.text(min_size=1, max_size=30).filter(lambda k: k not in WELL_KNOWN_LABELS),
    _TEXT,
    max_size=10,
)
# Any subset of the labels set by the ECS agent
WELL_KNOWN_LABEL_VALUES = st.dictionaries(
    st.sampled_from(sorted(WELL_KNOWN_LABELS)), _TEXT
)

_LABELS = st.builds(
    lambda known, extra: {**extra, **known},
    WELL_KNOWN_LABEL_VALUES,
    EXTRA_LABELS,
)

_LIMITS = st.fixed_dictionaries(
    {
        "CPU": st.floats(min_value=0, max_value=64).map(lambda cpu: round(cpu, 4)),
        "Memory": st.integers(min_value=0, max_value=2**20),
    }
)

_NETWORK = st.fixed_dictionaries(
    {
        "NetworkMode": st.sampled_from(["awsvpc", "bridge", "host"]),
        "IPv4Addresses": st.lists(_TEXT, max_size=3),
        "AttachmentIndex": st.integers(min_value=0, max_value=8),
        "IPv4SubnetCIDRBlock": _TEXT,
        "MACAddress": _TEXT,
        "DomainNameServers": st.lists(_TEXT, max_size=3),
        "DomainNameSearchList": st.lists(_TEXT, max_size=3),
        "PrivateDNSName": _TEXT,
        "SubnetGatewayIpv4Address": _TEXT,
    }
)

_LOG_OPTIONS = st.fixed_dictionaries(
    {
        "awslogs-create-group": st.sampled_from(["true", "false", ""]),
        "awslogs-group": _TEXT,
        "awslogs-stream": _TEXT,
        "awslogs-region": _TEXT,
    }
)

CONTAINER_V4 = st.fixed_dictionaries(
    {
        "DockerId": _TEXT,
        "Name": _TEXT,
        "DockerName": _TEXT,
        "Image": _TEXT,
        "ImageID": _TEXT,
        "Labels": _LABELS,
        "DesiredStatus": _TEXT,
        "KnownStatus": _TEXT,
        "Limits": _LIMITS,
        "CreatedAt": _TIMESTAMP,
        "Type": st.sampled_from(["NORMAL", "CNI_PAUSE"]),
        "ContainerARN": _TEXT,
        "LogDriver": _TEXT,
        "LogOptions": _LOG_OPTIONS,
        "Networks": st.lists(_NETWORK, max_size=2),
    },
    # A container that hasn't started yet has no StartedAt
    optional={"StartedAt": _TIMESTAMP},
)

TASK_V4: st.SearchStrategy[dict[str, Any]] = st.fixed_dictionaries(
    {
        "Cluster": _TEXT,
        "TaskARN": _TEXT,
        "Family": _TEXT,
        "Revision": _TEXT,
        "DesiredStatus": _TEXT,
        "KnownStatus": _TEXT,
        "Limits": _LIMITS,
        "AvailabilityZone": _TEXT,
        "LaunchType": st.sampled_from(["EC2", "FARGATE", "EXTERNAL"]),
        "Containers": st.lists(CONTAINER_V4, max_size=3),
    },
    optional={"PullStartedAt": _TIMESTAMP, "PullStoppedAt": _TIMESTAMP},
)
