"""Quality-of-service policies and the predefined profiles built from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from rmwkit.time import DURATION_UNSPECIFIED, INT64_MAX, NSEC_PER_SEC, Time


class HistoryPolicy(enum.IntEnum):
    """How many samples are kept."""

    SYSTEM_DEFAULT = 0
    KEEP_LAST = 1
    KEEP_ALL = 2
    UNKNOWN = 3


class ReliabilityPolicy(enum.IntEnum):
    """Whether delivery is guaranteed."""

    SYSTEM_DEFAULT = 0
    RELIABLE = 1
    BEST_EFFORT = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class DurabilityPolicy(enum.IntEnum):
    """Whether samples persist for late joiners."""

    SYSTEM_DEFAULT = 0
    TRANSIENT_LOCAL = 1
    VOLATILE = 2
    UNKNOWN = 3
    BEST_AVAILABLE = 4


class LivelinessPolicy(enum.IntEnum):
    """How an endpoint asserts that it is alive."""

    SYSTEM_DEFAULT = 0
    AUTOMATIC = 1
    MANUAL_BY_NODE = 2
    MANUAL_BY_TOPIC = 3
    UNKNOWN = 4
    BEST_AVAILABLE = 5


class QosCompatibility(enum.IntEnum):
    """Outcome of comparing a publisher profile with a subscription profile."""

    OK = 0
    WARNING = 1
    ERROR = 2


DEPTH_SYSTEM_DEFAULT = 0

DEADLINE_DEFAULT = DURATION_UNSPECIFIED
LIFESPAN_DEFAULT = DURATION_UNSPECIFIED
LIVELINESS_LEASE_DURATION_DEFAULT = DURATION_UNSPECIFIED

_BEST_AVAILABLE_NSEC = INT64_MAX - 1
DEADLINE_BEST_AVAILABLE = Time(
    _BEST_AVAILABLE_NSEC // NSEC_PER_SEC, _BEST_AVAILABLE_NSEC % NSEC_PER_SEC
)
LIVELINESS_LEASE_DURATION_BEST_AVAILABLE = DEADLINE_BEST_AVAILABLE


@dataclass(frozen=True)
class QosProfile:
    """A complete set of quality-of-service policies."""

    history: HistoryPolicy = HistoryPolicy.KEEP_LAST
    depth: int = 10
    reliability: ReliabilityPolicy = ReliabilityPolicy.RELIABLE
    durability: DurabilityPolicy = DurabilityPolicy.VOLATILE
    deadline: Time = DEADLINE_DEFAULT
    lifespan: Time = LIFESPAN_DEFAULT
    liveliness: LivelinessPolicy = LivelinessPolicy.SYSTEM_DEFAULT
    liveliness_lease_duration: Time = LIVELINESS_LEASE_DURATION_DEFAULT
    avoid_ros_namespace_conventions: bool = False

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must not be negative")
        object.__setattr__(self, "history", HistoryPolicy(self.history))
        object.__setattr__(self, "reliability", ReliabilityPolicy(self.reliability))
        object.__setattr__(self, "durability", DurabilityPolicy(self.durability))
        object.__setattr__(self, "liveliness", LivelinessPolicy(self.liveliness))


SENSOR_DATA = QosProfile(
    HistoryPolicy.KEEP_LAST,
    5,
    ReliabilityPolicy.BEST_EFFORT,
    DurabilityPolicy.VOLATILE,
)

PARAMETERS = QosProfile(
    HistoryPolicy.KEEP_LAST,
    1000,
    ReliabilityPolicy.RELIABLE,
    DurabilityPolicy.VOLATILE,
)

DEFAULT = QosProfile(
    HistoryPolicy.KEEP_LAST,
    10,
    ReliabilityPolicy.RELIABLE,
    DurabilityPolicy.VOLATILE,
)

SERVICES_DEFAULT = QosProfile(
    HistoryPolicy.KEEP_LAST,
    10,
    ReliabilityPolicy.RELIABLE,
    DurabilityPolicy.VOLATILE,
)

PARAMETER_EVENTS = QosProfile(
    HistoryPolicy.KEEP_LAST,
    1000,
    ReliabilityPolicy.RELIABLE,
    DurabilityPolicy.VOLATILE,
)

SYSTEM_DEFAULT = QosProfile(
    HistoryPolicy.SYSTEM_DEFAULT,
    DEPTH_SYSTEM_DEFAULT,
    ReliabilityPolicy.SYSTEM_DEFAULT,
    DurabilityPolicy.SYSTEM_DEFAULT,
)

# Policies resolved when the endpoint is created, to match most discovered endpoints.
BEST_AVAILABLE = QosProfile(
    HistoryPolicy.KEEP_LAST,
    10,
    ReliabilityPolicy.BEST_AVAILABLE,
    DurabilityPolicy.BEST_AVAILABLE,
    DEADLINE_BEST_AVAILABLE,
    LIFESPAN_DEFAULT,
    LivelinessPolicy.BEST_AVAILABLE,
    LIVELINESS_LEASE_DURATION_BEST_AVAILABLE,
)

UNKNOWN = QosProfile(
    HistoryPolicy.UNKNOWN,
    DEPTH_SYSTEM_DEFAULT,
    ReliabilityPolicy.UNKNOWN,
    DurabilityPolicy.UNKNOWN,
    liveliness=LivelinessPolicy.UNKNOWN,
)