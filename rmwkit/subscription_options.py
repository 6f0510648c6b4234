"""Options used when creating a subscription."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from rmwkit.content_filter_options import ContentFilterOptions


class UniqueNetworkFlowEndpoints(enum.IntEnum):
    """Whether an endpoint needs a network flow distinct from other endpoints."""

    NOT_REQUIRED = 0
    STRICTLY_REQUIRED = 1
    OPTIONALLY_REQUIRED = 2
    SYSTEM_DEFAULT = 3


@dataclass
class SubscriptionOptions:
    """Middleware options for a subscription."""

    rmw_specific_subscription_payload: Any = None
    ignore_local_publications: bool = False
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpoints = (
        UniqueNetworkFlowEndpoints.NOT_REQUIRED
    )
    content_filter_options: Optional[ContentFilterOptions] = None


def default_subscription_options() -> SubscriptionOptions:
    """Return options that accept local publications and need no unique flow or filter."""
    return SubscriptionOptions(
        rmw_specific_subscription_payload=None,
        ignore_local_publications=False,
        require_unique_network_flow_endpoints=UniqueNetworkFlowEndpoints.NOT_REQUIRED,
        content_filter_options=None,
    )