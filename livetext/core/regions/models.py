from dataclasses import dataclass, field
from typing import Tuple

# ==============================================================================
# Geometry
# ==============================================================================


@dataclass(frozen=True)
class Point:
    """A 2-D point in overlay/image pixel space."""

    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle stored as origin plus size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_edges(cls, x0: float, y0: float, x1: float, y1: float) -> "Rect":
        return cls(x0, y0, x1 - x0, y1 - y0)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_degenerate(self) -> bool:
        """Zero or negative area."""
        return self.width <= 0 or self.height <= 0

    def contains(self, x: float, y: float) -> bool:
        """Check if a point is within this rect (edges included)."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def intersects(self, other: "Rect") -> bool:
        """Edge-inclusive overlap test."""
        return (
            other.left <= self.right
            and other.right >= self.left
            and other.top <= self.bottom
            and other.bottom >= self.top
        )

    def union(self, other: "Rect") -> "Rect":
        """Smallest rect containing both."""
        return Rect.from_edges(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def inflated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x - dx, self.y - dy, self.width + 2 * dx, self.height + 2 * dy)

    def scaled(self, factor: float) -> "Rect":
        return Rect(
            self.x * factor, self.y * factor, self.width * factor, self.height * factor
        )

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Return (x0, y0, x1, y1)."""
        return (self.left, self.top, self.right, self.bottom)


# ==============================================================================
# Text Regions
# ==============================================================================


@dataclass(frozen=True)
class TextRegion:
    """One OCR-recognized token with its position and reading-order indices."""

    text: str
    bounding_box: Rect
    confidence: float = 1.0
    # TL, TR, BR, BL; only used for rotated-text rendering
    corners: Tuple[Point, ...] = field(default_factory=tuple)
    line_index: int = 0
    word_index: int = 0

    @classmethod
    def from_box(
        cls,
        text: str,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        confidence: float = 1.0,
        line_index: int = 0,
        word_index: int = 0,
    ) -> "TextRegion":
        """Build a region from box edges, deriving the four corner points."""
        return cls(
            text=text or "",
            bounding_box=Rect.from_edges(x0, y0, x1, y1),
            confidence=confidence,
            corners=(Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)),
            line_index=line_index,
            word_index=word_index,
        )

    @property
    def reading_key(self) -> Tuple[int, int]:
        return (self.line_index, self.word_index)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point is within region bounds."""
        return self.bounding_box.contains(x, y)

    def __str__(self) -> str:
        box = self.bounding_box
        return (
            f"Text: '{self.text}', BoundingBox: ({box.x:.0f}, {box.y:.0f}, "
            f"{box.width:.0f}x{box.height:.0f}), Confidence: {self.confidence:.2f}"
        )
