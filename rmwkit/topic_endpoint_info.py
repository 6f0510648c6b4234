"""Information about one publisher or subscription endpoint on a topic."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

from rmwkit.qos_profiles import SYSTEM_DEFAULT, QosProfile

GID_STORAGE_SIZE = 24


class EndpointType(enum.IntEnum):
    """Whether an endpoint publishes or subscribes."""

    INVALID = 0
    PUBLISHER = 1
    SUBSCRIPTION = 2


def _zero_gid() -> bytes:
    return bytes(GID_STORAGE_SIZE)


@dataclass
class TopicEndpointInfo:
    """Node, type, endpoint kind, global id and QoS of a topic endpoint."""

    node_name: Optional[str] = None
    node_namespace: Optional[str] = None
    topic_type: Optional[str] = None
    endpoint_type: EndpointType = EndpointType.INVALID
    endpoint_gid: bytes = field(default_factory=_zero_gid)
    qos_profile: QosProfile = SYSTEM_DEFAULT

    @staticmethod
    def _checked_str(value: Optional[str], name: str) -> str:
        if value is None:
            raise ValueError(f"{name} is null")
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a str")
        return value

    def set_topic_type(self, topic_type: str) -> None:
        """Store the topic type name."""
        self.topic_type = self._checked_str(topic_type, "topic_type")

    def set_node_name(self, node_name: str) -> None:
        """Store the name of the node owning the endpoint."""
        self.node_name = self._checked_str(node_name, "node_name")

    def set_node_namespace(self, node_namespace: str) -> None:
        """Store the namespace of the node owning the endpoint."""
        self.node_namespace = self._checked_str(node_namespace, "node_namespace")

    def set_endpoint_type(self, endpoint_type: EndpointType) -> None:
        """Store whether the endpoint publishes or subscribes."""
        self.endpoint_type = EndpointType(endpoint_type)

    def set_gid(self, gid: bytes) -> None:
        """Store the endpoint's global id, zero-padded to the full storage size."""
        if gid is None:
            raise ValueError("gid is null")
        raw = bytes(gid)
        if len(raw) > GID_STORAGE_SIZE:
            raise ValueError("size is more than GID_STORAGE_SIZE")
        self.endpoint_gid = raw.ljust(GID_STORAGE_SIZE, b"\x00")

    def set_qos_profile(self, qos_profile: QosProfile) -> None:
        """Store the endpoint's quality-of-service profile."""
        if qos_profile is None:
            raise ValueError("qos_profile is null")
        if not isinstance(qos_profile, QosProfile):
            raise TypeError("qos_profile must be a QosProfile")
        self.qos_profile = qos_profile

    def fini(self) -> None:
        """Drop the stored strings and return to the zero-initialized state."""
        self.node_name = None
        self.node_namespace = None
        self.topic_type = None
        self.endpoint_type = EndpointType.INVALID
        self.endpoint_gid = _zero_gid()
        self.qos_profile = SYSTEM_DEFAULT