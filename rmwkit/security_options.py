"""Security settings handed to a middleware context."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class SecurityEnforcement(enum.IntEnum):
    """Whether security is enforced or only applied where available."""

    PERMISSIVE = 0
    ENFORCE = 1


@dataclass
class SecurityOptions:
    """Security enforcement mode and the root directory of security artifacts."""

    enforce_security: SecurityEnforcement = SecurityEnforcement.PERMISSIVE
    security_root_path: Optional[str] = None

    def copy_from(self, src: SecurityOptions) -> None:
        """Replace these options with the values held by ``src``."""
        if src is None:
            raise ValueError("src argument is null")
        self.security_root_path = src.security_root_path
        self.enforce_security = SecurityEnforcement(src.enforce_security)

    def set_root_path(self, security_root_path: str) -> None:
        """Replace the security root path, leaving the enforcement mode as it is."""
        if security_root_path is None:
            raise ValueError("security_root_path argument is null")
        self.security_root_path = security_root_path

    def fini(self) -> None:
        """Release the root path and return to the zero-initialized state."""
        self.enforce_security = SecurityEnforcement.PERMISSIVE
        self.security_root_path = None


def zero_initialized_security_options() -> SecurityOptions:
    """Return options with every member zeroed."""
    return SecurityOptions(SecurityEnforcement(0), None)


def default_security_options() -> SecurityOptions:
    """Return permissive options with no root path."""
    return SecurityOptions(SecurityEnforcement.PERMISSIVE, None)