"""Rendering collaborator interface and surface-independent frame builder.

The planner calls :meth:`Renderer.redraw` after every accepted mutation.
Renderers only consume the point lists they are given and never touch the
planner state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import List, Protocol, Sequence, Tuple

from .config import (
    GRID_SPACING_PX,
    POINT_RADIUS_PX,
    SURFACE_HEIGHT_PX,
    SURFACE_WIDTH_PX,
)
from .models import PixelPoint

GridLine = Tuple[PixelPoint, PixelPoint]


class Renderer(Protocol):
    def redraw(
        self,
        committed_points: Sequence[PixelPoint],
        in_progress_path: Sequence[PixelPoint],
        close_loop: bool,
    ) -> None: ...


class NullRenderer:
    """Renderer that draws nothing."""

    def redraw(
        self,
        committed_points: Sequence[PixelPoint],
        in_progress_path: Sequence[PixelPoint],
        close_loop: bool,
    ) -> None:
        return None


@dataclass(slots=True)
class RedrawCall:
    committed_points: Tuple[PixelPoint, ...]
    in_progress_path: Tuple[PixelPoint, ...]
    close_loop: bool


@dataclass(slots=True)
class RecordingRenderer:
    """Keeps every redraw request; handy for tests and headless replays."""

    calls: List[RedrawCall] = field(default_factory=list)

    def redraw(
        self,
        committed_points: Sequence[PixelPoint],
        in_progress_path: Sequence[PixelPoint],
        close_loop: bool,
    ) -> None:
        self.calls.append(
            RedrawCall(tuple(committed_points), tuple(in_progress_path), close_loop)
        )

    @property
    def last(self) -> RedrawCall | None:
        return self.calls[-1] if self.calls else None


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything needed to paint one frame of the drawing surface."""

    width: float
    height: float
    grid_lines: Tuple[GridLine, ...]
    committed_polyline: Tuple[PixelPoint, ...]
    path_polyline: Tuple[PixelPoint, ...]
    markers: Tuple[PixelPoint, ...]
    marker_radius: float


def build_grid(
    width: float, height: float, spacing: int = GRID_SPACING_PX
) -> Tuple[GridLine, ...]:
    """Return vertical then horizontal grid lines every ``spacing`` pixels."""

    if spacing <= 0:
        return ()
    lines: List[GridLine] = []
    for x in range(0, int(math.ceil(width)), spacing):
        lines.append(((float(x), 0.0), (float(x), float(height))))
    for y in range(0, int(math.ceil(height)), spacing):
        lines.append(((0.0, float(y)), (float(width), float(y))))
    return tuple(lines)


def build_frame(
    committed_points: Sequence[PixelPoint],
    in_progress_path: Sequence[PixelPoint],
    close_loop: bool,
    *,
    width: float = SURFACE_WIDTH_PX,
    height: float = SURFACE_HEIGHT_PX,
    grid_spacing: int = GRID_SPACING_PX,
    marker_radius: float = POINT_RADIUS_PX,
) -> Frame:
    """Describe the grid, the committed path and the in-progress path.

    The in-progress path is closed back to its first point only when
    ``close_loop`` is set and it has more than two points.
    """

    path = [tuple(point) for point in in_progress_path]
    if close_loop and len(path) > 2:
        path.append(path[0])
    return Frame(
        width=width,
        height=height,
        grid_lines=build_grid(width, height, grid_spacing),
        committed_polyline=tuple(tuple(point) for point in committed_points),
        path_polyline=tuple(path),
        markers=tuple(tuple(point) for point in in_progress_path),
        marker_radius=marker_radius,
    )


class FrameRenderer:
    """Renderer that keeps the most recent :class:`Frame` for a painter to pick up."""

    def __init__(
        self,
        width: float = SURFACE_WIDTH_PX,
        height: float = SURFACE_HEIGHT_PX,
        grid_spacing: int = GRID_SPACING_PX,
    ) -> None:
        self.width = width
        self.height = height
        self.grid_spacing = grid_spacing
        self.frame: Frame | None = None
        self.frames_built = 0

    def redraw(
        self,
        committed_points: Sequence[PixelPoint],
        in_progress_path: Sequence[PixelPoint],
        close_loop: bool,
    ) -> None:
        self.frame = build_frame(
            committed_points,
            in_progress_path,
            close_loop,
            width=self.width,
            height=self.height,
            grid_spacing=self.grid_spacing,
        )
        self.frames_built += 1


__all__ = [
    "Frame",
    "FrameRenderer",
    "NullRenderer",
    "RecordingRenderer",
    "RedrawCall",
    "Renderer",
    "build_frame",
    "build_grid",
]
