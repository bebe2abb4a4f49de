"""Conversion between SMPP time strings and Unix timestamps."""

import time

_YEAR_SECONDS = 31556952
_MONTH_SECONDS = 2629746
_DAY_SECONDS = 86400
_QUARTER_HOUR = 15 * 60
_MIN_TIME_ZONE = -48
_MAX_TIME_ZONE = 48


def abs_time_to_smpp(abs_time):
    """Format a Unix timestamp as an absolute SMPP time in local time."""
    return time.strftime("%y%m%d%H%M%S", time.localtime(abs_time)) + "000+"


def smpp_time_to_abs(smpp_time):
    """Parse an absolute or relative SMPP time string into a Unix timestamp."""
    if len(smpp_time) != 16:
        raise ValueError("time field with invalid length != 16")

    year, month, day, hour, minute, second = (
        int(smpp_time[i:i + 2]) for i in range(0, 12, 2)
    )
    kind = smpp_time[15]

    if kind == "R":
        offset = (
            year * _YEAR_SECONDS
            + month * _MONTH_SECONDS
            + day * _DAY_SECONDS
            + hour * 3600
            + minute * 60
            + second
        )
        return int(time.time() + offset)

    if not (1 <= month <= 12 and 1 <= day <= 31 and hour <= 23 and minute <= 59 and second <= 59):
        raise ValueError("invalid time")

    if kind not in "+-":
        raise ValueError("invalid vpf of time")

    time_zone = int(smpp_time[13:15])
    if kind == "-":
        time_zone = -time_zone
    if not _MIN_TIME_ZONE <= time_zone <= _MAX_TIME_ZONE:
        raise ValueError("invalid timezone")

    total_seconds = int(time.mktime((year + 2000, month, day, hour, minute, second, 0, 0, -1)))
    isdst = 1 if time.localtime(total_seconds).tm_isdst > 0 else 0
    local_zone = (abs(time.timezone) + isdst * 3600) // _QUARTER_HOUR
    return total_seconds + (local_zone - time_zone) * _QUARTER_HOUR