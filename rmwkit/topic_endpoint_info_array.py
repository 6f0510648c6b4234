"""Arrays of topic endpoint information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from rmwkit.topic_endpoint_info import TopicEndpointInfo


@dataclass
class TopicEndpointInfoArray:
    """A sized array of topic endpoint information elements."""

    size: int = 0
    info_array: Optional[List[TopicEndpointInfo]] = None

    def check_zero(self) -> None:
        """Raise RuntimeError unless the array is zero initialized."""
        if self.size != 0 or self.info_array is not None:
            raise RuntimeError("topic_endpoint_info_array is not zeroed")

    def init_with_size(self, size: int) -> None:
        """Allocate ``size`` zero-initialized elements; the array must be zeroed first."""
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError("size must be an int")
        if size < 0:
            raise ValueError("size must not be negative")
        try:
            self.check_zero()
        except RuntimeError as exc:
            raise ValueError("topic_endpoint_info_array must be zero initialized") from exc
        self.info_array = [TopicEndpointInfo() for _ in range(size)]
        self.size = size

    def fini(self) -> None:
        """Finalize every element, drop the storage and return to the zeroed state."""
        for info in self.info_array or ():
            info.fini()
        self.info_array = None
        self.size = 0