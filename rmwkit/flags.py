"""Optional middleware features and localhost-only communication modes."""

from __future__ import annotations

import enum


class Feature(enum.IntEnum):
    """Optional features a middleware implementation may support."""

    MESSAGE_INFO_PUBLICATION_SEQUENCE_NUMBER = 0
    MESSAGE_INFO_RECEPTION_SEQUENCE_NUMBER = 1


class LocalhostOnly(enum.IntEnum):
    """Whether a context may only communicate through localhost."""

    DEFAULT = 0
    ENABLED = 1
    DISABLED = 2