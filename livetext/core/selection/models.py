from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from livetext.core.regions.models import TextRegion


class SelectionState(Enum):
    """Drag state of the selection engine."""

    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class RegionHandle:
    """
    Reference to a region at a known position of a known collection.

    ``generation`` identifies the collection the handle was issued for; a
    handle outliving a collection replacement no longer resolves.
    """

    index: int
    region: TextRegion
    generation: int


@dataclass(frozen=True)
class SelectionChangedEvent:
    """Payload of the selection-changed notification."""

    selected_regions: Tuple[TextRegion, ...] = field(default_factory=tuple)
    is_selecting: bool = False

    @property
    def count(self) -> int:
        return len(self.selected_regions)
