"""Tests for the offscreen shadow surface and shadow compositing."""

from __future__ import annotations

import pytest

from fold_overlay.layout.regions import RegionGeometry
from fold_overlay.render.canvas import RecordingContext, SurfaceSnapshot
from fold_overlay.render.shadow import (
    ShadowSurface,
    SurfaceError,
    composite_shadow,
    shadow_radius,
)
from fold_overlay.render.style import Theme

THEME = Theme(name="test", background_color="#202020", foreground_color="#ff8000")


def _geometry(**overrides) -> RegionGeometry:
    values = dict(position=0, x=30.0, y=40.0, width=200, height=64)
    values.update(overrides)
    return RegionGeometry(**values)


class TestShadowSurface:
    @pytest.mark.parametrize("size", [(0, 10), (10, 0), (-5, 10)])
    def test_rejects_empty_size(self, size):
        with pytest.raises(SurfaceError):
            ShadowSurface(*size, radius=2)

    def test_rejects_negative_radius(self):
        with pytest.raises(SurfaceError):
            ShadowSurface(10, 10, radius=-1)

    def test_released_on_exit(self):
        with ShadowSurface(10, 10, 2) as surface:
            surface.context().fill()
        assert surface.released
        with pytest.raises(SurfaceError):
            surface.context()

    def test_released_when_drawing_fails(self):
        with pytest.raises(ZeroDivisionError):
            with ShadowSurface(10, 10, 2) as surface:
                1 / 0
        assert surface.released

    def test_draw_paints_snapshot(self):
        target = RecordingContext()
        with ShadowSurface(12, 8, 3) as surface:
            surface.context().set_source_rgba(1, 0, 0, 0.5)
            surface.draw(target)
        (cmd,) = target.commands
        assert cmd.op == "paint_surface"
        snapshot = cmd.args[0]
        assert isinstance(snapshot, SurfaceSnapshot)
        assert (snapshot.width, snapshot.height, snapshot.radius) == (12, 8, 3)
        assert snapshot.commands[0].op == "set_source_rgba"


def test_shadow_radius_scales_with_zoom():
    assert shadow_radius(1.0) == 2
    assert shadow_radius(1.6) == 3
    assert shadow_radius(0.3) == 0


def test_composite_shadow_offsets_by_padding():
    cr = RecordingContext()
    assert composite_shadow(cr, _geometry(), THEME, 1.0, 16.0, 800, 600)
    assert cr.ops() == ["save", "translate", "paint_surface", "restore"]
    # radius 2, padding 4
    assert cr.find("translate")[0].args == (26.0, 36.0)


def test_composite_shadow_surface_size_and_content():
    cr = RecordingContext()
    composite_shadow(cr, _geometry(), THEME, 1.0, 16.0, 800, 600)
    snapshot = cr.find("paint_surface")[0].args[0]
    assert (snapshot.width, snapshot.height) == (200 + 8, 64 + 8)
    assert snapshot.radius == 2

    ops = [c.op for c in snapshot.commands]
    # clear, then the padded rounded rectangle filled with the foreground color
    assert ops[:2] == ["set_source_rgba", "fill"]
    assert ops.count("curve_to") == 4
    assert snapshot.commands[2].op == "new_path"
    assert snapshot.commands[3].args == (4 + 4.0, 4)
    fill_color = [c for c in snapshot.commands if c.op == "set_source_rgba"][-1]
    assert fill_color.args == pytest.approx((1.0, 128 / 255, 0.0, 0.6))


def test_composite_shadow_clamped_to_viewport():
    cr = RecordingContext()
    composite_shadow(cr, _geometry(width=900, height=700), THEME, 1.0, 16.0, 800, 600)
    snapshot = cr.find("paint_surface")[0].args[0]
    assert (snapshot.width, snapshot.height) == (800, 600)


def test_composite_shadow_skipped_when_surface_cannot_be_allocated():
    cr = RecordingContext()
    assert not composite_shadow(cr, _geometry(width=-50), THEME, 1.0, 16.0, 800, 600)
    assert cr.commands == []


def test_target_restored_when_paint_fails():
    class FailingContext(RecordingContext):
        def paint_surface(self, surface):
            raise SurfaceError("blur unavailable")

    cr = FailingContext()
    assert not composite_shadow(cr, _geometry(), THEME, 1.0, 16.0, 800, 600)
    assert cr.ops() == ["save", "translate", "restore"]
