"""
Draw commands produced by the geometry generators.

Every command carries plot-space coordinates (origin at the top-left corner
of the plot area, y growing downward) and a style tag naming its curve class.
Colors and widths for a tag live in ``constants.STYLES``; the rendering
adapter resolves them, the generators never do.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..calculations.scales import CoordinateFrame

Point = Tuple[float, float]


@dataclass(frozen=True)
class LineCommand:
    """Straight segment from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float
    style: str = "gridline"
    clip: bool = False
    value: Optional[float] = None


@dataclass(frozen=True)
class PathCommand:
    """
    One or more disjoint polylines drawn as a single curve.

    A profile with gaps becomes several ``segments``; the adapter never
    bridges from the end of one segment to the start of the next.
    """

    segments: Tuple[Tuple[Point, ...], ...]
    style: str = "gridline"
    clip: bool = True
    linewidth: Optional[float] = None
    value: Optional[float] = None

    @property
    def points(self) -> List[Point]:
        return [p for segment in self.segments for p in segment]


@dataclass(frozen=True)
class RectCommand:
    x: float
    y: float
    width: float
    height: float
    style: str


@dataclass(frozen=True)
class TextCommand:
    """Text label anchored at (x, y); ``anchor`` is start, middle or end."""

    x: float
    y: float
    text: str
    style: str = "label"
    anchor: str = "start"
    rotation: float = 0.0
    font_size: Optional[float] = None


@dataclass(frozen=True)
class GlyphElement:
    """
    One stroke of a wind barb glyph in glyph-local coordinates.

    ``kind`` is one of stem, flag, pennant, half_pennant. Flags are filled
    polylines, the rest are open lines.
    """

    kind: str
    points: Tuple[Point, ...]

    @property
    def filled(self) -> bool:
        return self.kind == "flag"


@dataclass(frozen=True)
class WindBarbGlyph:
    """Reusable barb geometry for one 5-knot speed bucket."""

    speed: int
    flags: int
    pennants: int
    half_pennants: int
    elements: Tuple[GlyphElement, ...]


@dataclass(frozen=True)
class GlyphPlacement:
    """
    An instance of a cached glyph on the plot.

    The glyph is rotated by ``rotation`` degrees (clockwise on screen) about
    its origin and then translated to (x, y), as one combined transform.
    """

    bucket: int
    x: float
    y: float
    rotation: float
    pressure: float
    style: str = "windbarb"


@dataclass
class Scene:
    """
    Complete geometry of one render pass.

    Attributes:
        frame: CoordinateFrame the geometry was computed with
        site_name: Site label for the title and export filename
        source_name: Data source label
        width: Total diagram width in pixels
        height: Total diagram height in pixels
        margin: Offsets of the plot area inside the diagram
        background: Isotherms, isobars, dry adiabats, axes and ticks
        profiles: Temperature and dew-point paths
        barbs: Wind barb placements
        annotations: Title, axis labels and legend
        glyphs: Shared glyph set referenced by ``barbs``
    """

    frame: CoordinateFrame
    site_name: str
    source_name: str
    width: int
    height: int
    margin: Mapping[str, float]
    background: List = field(default_factory=list)
    profiles: List = field(default_factory=list)
    barbs: List[GlyphPlacement] = field(default_factory=list)
    annotations: List = field(default_factory=list)
    glyphs: Mapping[int, WindBarbGlyph] = field(default_factory=dict)

    def layer_sizes(self) -> Dict[str, int]:
        return {
            "background": len(self.background),
            "profiles": len(self.profiles),
            "barbs": len(self.barbs),
            "annotations": len(self.annotations),
        }


def freeze_segments(segments: Sequence[Sequence[Point]]) -> Tuple[Tuple[Point, ...], ...]:
    return tuple(tuple(segment) for segment in segments if segment)
