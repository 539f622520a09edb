"""
Geometric clustering of text-region boxes for the spotlight mask.
"""

from typing import Iterable, List, Sequence, Set, Union

from .models import Rect, TextRegion

DEFAULT_HORIZONTAL_TOLERANCE = 35.0
DEFAULT_VERTICAL_TOLERANCE = 5.0


class RegionMerger:
    """
    Groups bounding boxes into maximal connected clusters.

    Two boxes are adjacent when they intersect, when they share vertical
    extent and sit closer than ``horizontal_tolerance`` side by side (words on
    one line), or when they share horizontal extent and sit closer than
    ``vertical_tolerance`` one above the other (stacked lines). Line spacing
    in OCR output is usually tighter than word spacing, so the vertical
    tolerance stays the smaller of the two.
    """

    def __init__(
        self,
        horizontal_tolerance: float = DEFAULT_HORIZONTAL_TOLERANCE,
        vertical_tolerance: float = DEFAULT_VERTICAL_TOLERANCE,
    ):
        self.horizontal_tolerance = horizontal_tolerance
        self.vertical_tolerance = vertical_tolerance

    def merge(self, regions: Iterable[Union[TextRegion, Rect]]) -> List[Rect]:
        """
        Merge regions (or bare rects) into cluster bounding rectangles.

        Args:
            regions: Text regions or rects in collection order

        Returns:
            One rect per connected cluster, in order of each cluster's first box
        """
        rects = [r.bounding_box if isinstance(r, TextRegion) else r for r in regions]
        return self.merge_rects(rects)

    def merge_rects(self, rects: Sequence[Rect]) -> List[Rect]:
        merged: List[Rect] = []
        processed: Set[int] = set()

        for i, rect in enumerate(rects):
            if i in processed:
                continue

            current = rect
            processed.add(i)

            # Keep sweeping until a full pass absorbs nothing
            found_adjacent = True
            while found_adjacent:
                found_adjacent = False
                for j, other in enumerate(rects):
                    if j in processed:
                        continue
                    if self.are_adjacent(current, other):
                        current = current.union(other)
                        processed.add(j)
                        found_adjacent = True

            merged.append(current)

        return merged

    def are_adjacent(self, first: Rect, second: Rect) -> bool:
        """Check whether two rects belong to the same visual cluster."""
        # Degenerate boxes are singletons
        if first.is_degenerate or second.is_degenerate:
            return False

        if first.intersects(second):
            return True

        y_overlap = first.top < second.bottom and first.bottom > second.top
        if y_overlap:
            gap = max(second.left - first.right, first.left - second.right)
            if gap < self.horizontal_tolerance:
                return True

        x_overlap = first.left < second.right and first.right > second.left
        if x_overlap:
            gap = max(second.top - first.bottom, first.top - second.bottom)
            if gap < self.vertical_tolerance:
                return True

        return False
