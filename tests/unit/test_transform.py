"""
Tests for the screen/world view transform.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from knowmap_core.config import ViewSettings
from knowmap_core.services.transform import ViewTransform


class TestViewTransform:
    """Coordinate conversion, pan and clamped zoom."""

    @pytest.mark.parametrize("k", [0.1, 1.0, 1.7, 4.0])
    def test_round_trip(self, k):
        """Verify screen -> world -> screen is the identity at both scale limits."""
        t = ViewTransform(k=k, x=123.0, y=-45.0)
        assert t.k == k
        for sx, sy in [(0, 0), (400, 300), (-12.5, 999.25)]:
            wx, wy = t.to_world(sx, sy)
            assert t.to_screen(wx, wy) == pytest.approx((sx, sy))

    def test_to_world(self):
        """Verify world = (screen - translate) / scale."""
        t = ViewTransform(k=2.0, x=100.0, y=50.0)
        assert t.to_world(300, 250) == (100.0, 100.0)

    def test_center_on_origin(self):
        """Verify reset puts the origin at the viewport center at scale 1."""
        t = ViewTransform(k=3.0, x=5, y=5)
        t.center_on_origin(800, 600)
        assert t.as_tuple() == (1.0, 400.0, 300.0)
        assert t.to_world(400, 300) == (0.0, 0.0)

    def test_pan_by(self):
        """Verify panning shifts the translation by the pointer delta."""
        t = ViewTransform()
        t.pan_by(10, -20)
        assert (t.x, t.y) == (10, -20)

    def test_zoom_keeps_point_under_cursor(self):
        """Verify the world point under the cursor stays put while zooming."""
        t = ViewTransform(x=400, y=300)
        before = t.to_world(500, 350)
        assert t.zoom_at(1.25, 500, 350)
        assert t.to_world(500, 350) == pytest.approx(before)
        assert t.k == pytest.approx(1.25)

    def test_zoom_clamped_to_max(self):
        """Verify zoom stops at the maximum scale and reports no change."""
        t = ViewTransform()
        t.zoom_at(100, 0, 0)
        assert t.k == 4.0
        assert not t.zoom_at(2, 0, 0)

    def test_zoom_clamped_to_min(self):
        """Verify zoom stops at the minimum scale."""
        t = ViewTransform()
        t.zoom_at(0.0001, 0, 0)
        assert t.k == 0.1

    def test_constructor_clamps(self):
        """Verify an out-of-range initial scale is clamped."""
        assert ViewTransform(k=50).k == 4.0

    def test_custom_limits(self):
        """Verify ViewSettings limits are honoured."""
        t = ViewTransform(settings=ViewSettings(min_scale=0.5, max_scale=2.0))
        t.zoom_at(10, 0, 0)
        assert t.k == 2.0
