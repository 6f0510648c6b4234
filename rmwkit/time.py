"""Durations expressed as seconds plus nanoseconds, with saturating conversion."""

from __future__ import annotations

from dataclasses import dataclass

INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1
NSEC_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class Time:
    """A span of time split into whole seconds and remaining nanoseconds."""

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        for name in ("sec", "nsec"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int")
            if not 0 <= value <= UINT64_MAX:
                raise ValueError(f"{name} must fit in an unsigned 64-bit integer")


DURATION_UNSPECIFIED = Time(0, 0)
DURATION_INFINITE = Time(INT64_MAX // NSEC_PER_SEC, INT64_MAX % NSEC_PER_SEC)

_MAX_SEC = INT64_MAX // NSEC_PER_SEC


def time_total_nsec(time: Time) -> int:
    """Return the total nanoseconds in ``time``, saturating at the signed 64-bit maximum."""
    if time.sec > _MAX_SEC:
        return INT64_MAX
    sec_as_nsec = time.sec * NSEC_PER_SEC
    if time.nsec > INT64_MAX - sec_as_nsec:
        return INT64_MAX
    return sec_as_nsec + time.nsec


def time_equal(left: Time, right: Time) -> bool:
    """Return whether two times denote the same number of nanoseconds."""
    return time_total_nsec(left) == time_total_nsec(right)


def time_from_nsec(nanoseconds: int) -> Time:
    """Split a nanosecond count into a time; negative counts mean an infinite duration."""
    if nanoseconds < 0:
        return DURATION_INFINITE
    nanoseconds = min(nanoseconds, INT64_MAX)
    sec, nsec = divmod(nanoseconds, NSEC_PER_SEC)
    return Time(sec, nsec)


def time_normalize(time: Time) -> Time:
    """Return ``time`` with its nanoseconds brought below one second."""
    return time_from_nsec(time_total_nsec(time))