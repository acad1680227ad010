import re
from typing import Any

# Fractional seconds beyond microsecond precision, e.g. ".620912337Z"
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def truncate_nanoseconds(timestamp: Any) -> Any:
    """Truncate the fractional seconds of an RFC 3339 timestamp to microseconds.

    The ECS agent reports timestamps with nanosecond precision, which
    `datetime` can't represent. Values that aren't strings are returned as-is.

    Example:
        >>> truncate_nanoseconds("2020-10-02T00:15:07.620912337Z")
        '2020-10-02T00:15:07.620912Z'
    """
    if isinstance(timestamp, str):
        return _FRACTION_RE.sub(r"\1", timestamp, count=1)
    return timestamp

