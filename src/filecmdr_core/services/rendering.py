"""
Rendering - fixed-width mode and time strings for the info line.

Mode strings look like "drwxr-xr-x": one type character (d, e, f, l, o)
followed by the rwx triads for user, group and other. Set-uid, set-gid and
sticky bits are accepted but not represented.

Time strings look like "08/09/2016 20:06" (local time).
"""

import stat
import time
from datetime import datetime
from typing import Optional, Union

from ..domain.errors import DomainError
from ..domain.models import Settings
from .classifier import classify


MODE_MIN = 0o010000          # Smallest mode with type bits
MODE_MAX = 0o167777          # Largest type bits with all permission bits

MODE_STRING_LEN = 10
TIME_STRING_LEN = 16

# (bit, char) pairs in output order
PERMISSION_BITS = (
    (stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x"),
)


def render_permissions(mode: int) -> str:
    """The nine rwx characters for user, group and other."""
    return "".join(char if mode & bit else "-" for bit, char in PERMISSION_BITS)


def render_mode(mode: int, owner_uid: int, owner_gid: int,
                settings: Optional[Settings] = None) -> str:
    """
    Convert file mode bits to a 10 character type + permission string.

    Args:
        mode: File mode (type bits + permission bits)
        owner_uid: Owner user id, used for the executable test
        owner_gid: Owner group id, used for the executable test
        settings: Identity of the invoking user (defaults to this process)

    Returns:
        The mode string, e.g. "frw-r-----"

    Raises:
        DomainError: If mode is outside the valid file mode range or has
                     no type character
    """
    if not MODE_MIN <= mode <= MODE_MAX:
        raise DomainError(f"Mode {mode:#o} is out of range for a file mode")

    settings = settings or Settings.from_process()
    classification = classify(mode, mode, owner_uid, owner_gid,
                              settings.invoking_uid, settings.invoking_gid)

    type_char = classification.type_char
    if type_char is None:
        raise DomainError(f"Mode {mode:#o} has no displayable file type")

    return type_char + render_permissions(mode)


def render_time(point_in_time: Union[int, float, datetime]) -> str:
    """
    Convert a point in time to local "DD/MM/YYYY HH:MM".

    Args:
        point_in_time: Seconds since the epoch, or a datetime (naive
                       datetimes are taken as local time)

    Raises:
        DomainError: If the value cannot be converted to a calendar time
                     that fits the format
    """
    try:
        if isinstance(point_in_time, datetime):
            tm = point_in_time.astimezone().timetuple()
        else:
            tm = time.localtime(point_in_time)
    except (OverflowError, OSError, ValueError) as e:
        raise DomainError(f"Cannot convert {point_in_time!r} to local time: {e}") from e

    if not 0 <= tm.tm_year <= 9999:
        raise DomainError(f"Year {tm.tm_year} does not fit a 4 digit year")

    return (f"{tm.tm_mday:02d}/{tm.tm_mon:02d}/{tm.tm_year:04d} "
            f"{tm.tm_hour:02d}:{tm.tm_min:02d}")
