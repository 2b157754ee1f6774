"""Immediate-mode drawing contexts.

The overlay renderer talks to a small cairo-shaped API (``DrawingContext``).
Two implementations live here:

* ``RecordingContext`` keeps the calls as ``DrawCommand`` tuples. It is the
  display-free output used by tests and by offscreen shadow surfaces.
* ``SvgContext`` turns the calls into SVG elements on a drawsvg Drawing.
  Painted surfaces become groups clipped to the surface bounds with an
  ``feGaussianBlur`` filter applied.
"""

from __future__ import annotations

__all__ = [
    "DrawCommand",
    "DrawingContext",
    "RecordingContext",
    "SurfaceSnapshot",
    "SvgContext",
    "replay",
]

from dataclasses import dataclass
from typing import Any, Iterable, Protocol

import drawsvg as draw

from fold_overlay.render.color import rgb_to_hex


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing call."""

    op: str
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class SurfaceSnapshot:
    """Recorded contents of an offscreen surface, ready to composite."""

    width: int
    height: int
    radius: float
    commands: tuple[DrawCommand, ...]


class DrawingContext(Protocol):
    def new_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None: ...

    def close_path(self) -> None: ...

    def rectangle(self, x: float, y: float, width: float, height: float) -> None: ...

    def set_source_rgba(self, r: float, g: float, b: float, a: float = 1.0) -> None: ...

    def fill(self) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, tx: float, ty: float) -> None: ...

    def paint_surface(self, surface: SurfaceSnapshot) -> None: ...


def replay(commands: Iterable[DrawCommand], target: DrawingContext) -> None:
    """Issue recorded commands against another context."""
    for cmd in commands:
        getattr(target, cmd.op)(*cmd.args)


class RecordingContext:
    """DrawingContext that records every call."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def _record(self, op: str, *args: Any) -> None:
        self.commands.append(DrawCommand(op, args))

    def new_path(self) -> None:
        self._record("new_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        self._record("curve_to", x1, y1, x2, y2, x3, y3)

    def close_path(self) -> None:
        self._record("close_path")

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rectangle", x, y, width, height)

    def set_source_rgba(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self._record("set_source_rgba", r, g, b, a)

    def fill(self) -> None:
        self._record("fill")

    def save(self) -> None:
        self._record("save")

    def restore(self) -> None:
        self._record("restore")

    def translate(self, tx: float, ty: float) -> None:
        self._record("translate", tx, ty)

    def paint_surface(self, surface: SurfaceSnapshot) -> None:
        self._record("paint_surface", surface)

    def ops(self) -> list[str]:
        """Just the operation names, in call order."""
        return [cmd.op for cmd in self.commands]

    def find(self, op: str) -> list[DrawCommand]:
        return [cmd for cmd in self.commands if cmd.op == op]


class SvgContext:
    """DrawingContext that renders into a drawsvg Drawing (or a group of one)."""

    def __init__(
        self,
        width: float,
        height: float,
        container: draw.DrawingParentElement | None = None,
    ) -> None:
        self.width = width
        self.height = height
        if container is None:
            self.drawing: draw.Drawing | None = draw.Drawing(width, height)
            self._container = self.drawing
        else:
            self.drawing = None
            self._container = container
        self._segments: list[tuple[str, tuple[float, ...]]] = []
        self._color = "#000000"
        self._alpha = 1.0
        self._origin = (0.0, 0.0)
        self._stack: list[tuple[tuple[float, float], str, float]] = []

    def _point(self, x: float, y: float) -> tuple[float, float]:
        return x + self._origin[0], y + self._origin[1]

    def new_path(self) -> None:
        self._segments = []

    def move_to(self, x: float, y: float) -> None:
        self._segments.append(("M", self._point(x, y)))

    def line_to(self, x: float, y: float) -> None:
        self._segments.append(("L", self._point(x, y)))

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        self._segments.append(
            ("C", self._point(x1, y1) + self._point(x2, y2) + self._point(x3, y3))
        )

    def close_path(self) -> None:
        self._segments.append(("Z", ()))

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self.move_to(x, y)
        self.line_to(x + width, y)
        self.line_to(x + width, y + height)
        self.line_to(x, y + height)
        self.close_path()

    def set_source_rgba(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self._color = rgb_to_hex((r, g, b))
        self._alpha = a

    def fill(self) -> None:
        """Fill and clear the current path. No path, no output."""
        if not self._segments:
            return
        path = draw.Path(fill=self._color, fill_opacity=self._alpha)
        for command, coords in self._segments:
            getattr(path, command)(*coords)
        self._container.append(path)
        self._segments = []

    def save(self) -> None:
        self._stack.append((self._origin, self._color, self._alpha))

    def restore(self) -> None:
        self._origin, self._color, self._alpha = self._stack.pop()

    def translate(self, tx: float, ty: float) -> None:
        self._origin = (self._origin[0] + tx, self._origin[1] + ty)

    def paint_surface(self, surface: SurfaceSnapshot) -> None:
        """Composite a surface with its top-left at the current origin."""
        clip = draw.ClipPath()
        clip.append(draw.Rectangle(0, 0, surface.width, surface.height))
        outer = draw.Group(
            transform=f"translate({self._origin[0]},{self._origin[1]})",
            clip_path=clip,
        )
        if surface.radius > 0:
            blur = draw.Filter(x="-50%", y="-50%", width="200%", height="200%")
            blur.append(draw.FilterItem(
                "feGaussianBlur",
                in_="SourceGraphic",
                stdDeviation=surface.radius,
            ))
            inner = draw.Group(filter=blur)
            outer.append(inner)
        else:
            inner = outer
        replay(surface.commands, SvgContext(surface.width, surface.height, container=inner))
        self._container.append(outer)

    def append(self, element: draw.DrawingElement) -> None:
        """Add a raw drawsvg element (e.g. text) on top of what is drawn so far."""
        self._container.append(element)

    def as_svg(self) -> str:
        if self.drawing is None:
            raise RuntimeError("as_svg() is only available on a top-level SvgContext")
        return self.drawing.as_svg()
