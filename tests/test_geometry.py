import math
import logging

import numpy as np
import pytest

from python_phasor import Q_, DrawingConfig, DimensionMismatchError, pol
from python_phasor.geometry import (
    MarkerKind,
    Panel,
    segment_geometry,
    phasor_geometry,
    lengthdimension_geometry,
    arc_geometry,
    phasorsine_geometry
)


# ------------------------------------------------------------------------------
# Phasor
# ------------------------------------------------------------------------------

def test_phasor_along_real_axis():
    geom = phasor_geometry(1 + 0j, origin=0, ref=1)
    assert geom.start == pytest.approx((0.0, 0.0))
    assert geom.end == pytest.approx((1.0, 0.0))
    assert geom.length == pytest.approx(1.0)
    assert geom.angle == pytest.approx(0.0)


def test_phasor_along_imaginary_axis():
    geom = phasor_geometry(pol(1.0, math.pi / 2))
    assert geom.start == pytest.approx((0.0, 0.0))
    assert geom.end == pytest.approx((0.0, 1.0), abs=1e-12)
    # lagging by 90°
    assert geom.tangent == pytest.approx((1.0, 0.0), abs=1e-12)


def test_phasor_head_starts_close_to_end():
    geom = phasor_geometry(2 + 0j, ref=1)
    assert geom.head_start == pytest.approx((1.998, 0.0))
    cfg = DrawingConfig(head_fraction=0.9)
    geom = phasor_geometry(2 + 0j, ref=1, config=cfg)
    assert geom.head_start == pytest.approx((1.8, 0.0))


def test_phasor_with_units_is_scaled_by_ref():
    geom = phasor_geometry(
        Q_(30 + 40j, 'V'),
        origin=Q_(10, 'V'),
        ref=Q_(100, 'V')
    )
    assert geom.start == pytest.approx((0.1, 0.0))
    assert geom.end == pytest.approx((0.4, 0.4))
    assert geom.length == pytest.approx(0.5)


def test_phasor_default_ref_is_one_unit():
    geom = phasor_geometry(Q_(3 + 4j, 'A'))
    assert geom.end == pytest.approx((3.0, 4.0))


def test_phasor_compatible_units_of_different_scale():
    geom = phasor_geometry(Q_(100, 'V'), origin=Q_(0.1, 'kV'), ref=Q_(1, 'kV'))
    assert geom.start == pytest.approx((0.1, 0.0))
    assert geom.end == pytest.approx((0.2, 0.0))


def test_phasor_negative_ref_mirrors_phasor():
    geom = phasor_geometry(1 + 0j, ref=-2.0)
    assert geom.end == pytest.approx((-0.5, 0.0))
    geom = phasor_geometry(Q_(1 + 0j, 'V'), ref=Q_(-2.0, 'V'))
    assert geom.end == pytest.approx((-0.5, 0.0))


def test_phasor_in_per_unit():
    geom = phasor_geometry(Q_(0.5, 'pu'), ref=1.0)
    assert geom.end == pytest.approx((0.5, 0.0))
    geom = phasor_geometry(Q_(0.5j, 'pu'), origin=Q_(0.25, 'pu'), ref=Q_(0.5, 'pu'))
    assert geom.start == pytest.approx((0.5, 0.0))
    assert geom.end == pytest.approx((0.5, 1.0))


@pytest.mark.parametrize(
    "c, origin, ref",
    [
        (Q_(1, 'V'), Q_(0, 'A'), Q_(1, 'V')),
        (Q_(1, 'V'), Q_(0, 'V'), Q_(1, 'A')),
        (Q_(1, 'V'), None, 1.0),
        (1 + 1j, None, Q_(1, 'V')),
    ]
)
def test_phasor_dimension_mismatch(c, origin, ref):
    with pytest.raises(DimensionMismatchError):
        phasor_geometry(c, origin=origin, ref=ref)


def test_dimension_mismatch_is_raised_for_zero_phasor():
    with pytest.raises(DimensionMismatchError):
        phasor_geometry(Q_(0, 'V'), ref=Q_(1, 'A'))


@pytest.mark.parametrize("c", [0, 0j, Q_(0j, 'V')])
def test_zero_phasor_has_no_geometry(c):
    assert phasor_geometry(c) is None


@pytest.mark.parametrize("par", [0.05, -0.1, 0.3])
@pytest.mark.parametrize("c", [1 + 0j, 1j, -2 + 1j, 0.3 - 0.7j])
def test_parallel_shift_is_perpendicular(c, par):
    unshifted = phasor_geometry(c)
    geom = phasor_geometry(c, par=par)
    dx0 = geom.start[0] - unshifted.start[0]
    dy0 = geom.start[1] - unshifted.start[1]
    dx1 = geom.end[0] - unshifted.end[0]
    dy1 = geom.end[1] - unshifted.end[1]
    # same displacement at both ends
    assert (dx0, dy0) == pytest.approx((dx1, dy1))
    assert math.hypot(dx0, dy0) == pytest.approx(abs(par))
    # perpendicular to the phasor
    dot = dx0 * geom.direction[0] + dy0 * geom.direction[1]
    assert dot == pytest.approx(0.0, abs=1e-12)
    # shifted against the tangential vector
    assert (dx0, dy0) == pytest.approx(
        (-par * geom.tangent[0], -par * geom.tangent[1])
    )


def test_positive_par_shifts_real_phasor_upwards():
    geom = phasor_geometry(1 + 0j, par=0.1)
    assert geom.start == pytest.approx((0.0, 0.1))
    assert geom.end == pytest.approx((1.0, 0.1))


def test_label_position():
    geom = phasor_geometry(2 + 0j, labelrsep=0.25, labeltsep=0.1)
    # tangential vector of a real phasor points downwards
    assert geom.label_xy == pytest.approx((0.5, 0.1))


def test_label_rotation():
    c = pol(1.0, math.radians(30))
    assert phasor_geometry(c).label_rotation == 0.0
    # relative angle is only applied with relative rotation
    assert phasor_geometry(c, labelrelangle=0.5).label_rotation == 0.0
    geom = phasor_geometry(c, labelrelrot=True)
    assert geom.label_rotation == pytest.approx(30.0)
    geom = phasor_geometry(c, labelrelrot=True, labelrelangle=Q_(-30, 'deg'))
    assert geom.label_rotation == pytest.approx(0.0, abs=1e-12)


def test_segment_geometry_zero_length():
    assert segment_geometry(1.0, 1.0, 1.0, 1.0) is None


def test_segment_at():
    seg = segment_geometry(0.0, 0.0, 0.0, 2.0)
    assert seg.at(0.5) == pytest.approx((0.0, 1.0))


# ------------------------------------------------------------------------------
# Length dimension
# ------------------------------------------------------------------------------

def test_lengthdimension_markers():
    geom = lengthdimension_geometry(0.0, 0.0, 1.0, 0.0)
    assert geom.start_marker.kind == MarkerKind.ARROW
    assert geom.start_marker.xy == pytest.approx((0.0, 0.0))
    assert geom.start_marker.xytext == pytest.approx((0.001, 0.0))
    assert geom.end_marker.kind == MarkerKind.ARROW
    assert geom.end_marker.xy == pytest.approx((1.0, 0.0))
    assert geom.end_marker.xytext == pytest.approx((0.999, 0.0))


def test_lengthdimension_dot_and_unknown_styles():
    geom = lengthdimension_geometry(
        0.0, 0.0, 1.0, 1.0, arrowstyle1=".", arrowstyle2=""
    )
    assert geom.start_marker.kind == MarkerKind.DOT
    assert geom.start_marker.xytext is None
    assert geom.end_marker is None


def test_lengthdimension_logs_missing_markers(caplog):
    caplog.set_level(logging.DEBUG, logger="python_phasor.geometry.dimension")
    lengthdimension_geometry(0.0, 0.0, 1.0, 0.0, arrowstyle1="?", arrowstyle2="")
    messages = [r.getMessage() for r in caplog.records]
    assert "No marker at start of length dimension (arrowstyle1='?')." in messages
    assert "No marker at end of length dimension (arrowstyle2='')." in messages


def test_lengthdimension_without_shift_has_no_aux_lines():
    geom = lengthdimension_geometry(0.0, 0.0, 1.0, 0.0)
    assert geom.aux_lines == ()


def test_lengthdimension_aux_lines():
    geom = lengthdimension_geometry(
        0.0, 0.0, 1.0, 0.0, par=-0.1, paroverhang=0.02
    )
    # negative par shifts a real dimension line downwards
    assert geom.start == pytest.approx((0.0, -0.1))
    assert geom.end == pytest.approx((1.0, -0.1))
    assert len(geom.aux_lines) == 2
    (p1, q1), (p2, q2) = geom.aux_lines
    assert p1 == pytest.approx((0.0, 0.0))
    assert q1 == pytest.approx((0.0, -0.12))
    assert p2 == pytest.approx((1.0, 0.0))
    assert q2 == pytest.approx((1.0, -0.12))


def test_lengthdimension_zero_length():
    assert lengthdimension_geometry(0.5, 0.5, 0.5, 0.5) is None


# ------------------------------------------------------------------------------
# Angular dimension
# ------------------------------------------------------------------------------

def test_arc_quarter_circle():
    geom = arc_geometry(1.0, 0.0, math.pi / 2)
    assert geom.samples == 45
    assert (geom.x[0], geom.y[0]) == pytest.approx((1.0, 0.0))
    assert (geom.x[-1], geom.y[-1]) == pytest.approx((0.0, 1.0), abs=1e-12)
    assert geom.sign == 1.0


@pytest.mark.parametrize(
    "phi1, phi2",
    [(0.0, math.pi / 2), (1.0, -0.5), (-2.0, 2.5), (0.2, 0.3)]
)
def test_arc_covers_span_monotonically(phi1, phi2):
    geom = arc_geometry(0.5, phi1, phi2, origin=0.2 - 0.1j)
    angles = np.arctan2(geom.y + 0.1, geom.x - 0.2)
    angles = np.unwrap(angles)
    assert angles[0] == pytest.approx(phi1)
    assert angles[-1] == pytest.approx(phi2)
    steps = np.diff(angles)
    assert np.all(np.sign(steps) == np.sign(phi2 - phi1))
    assert geom.sign == np.sign(phi2 - phi1)


def test_arc_accepts_degrees():
    geom = arc_geometry(1.0, Q_(0, 'deg'), Q_(90, 'deg'))
    assert geom.samples == 45


def test_arc_markers():
    geom = arc_geometry(1.0, 0.0, math.pi / 2)
    assert geom.start_marker.kind == MarkerKind.DOT
    assert geom.start_marker.xy == pytest.approx((1.0, 0.0))
    assert geom.end_marker.kind == MarkerKind.ARROW
    # the arrow head at the end points in the direction of the arc
    x, y = geom.end_marker.xytext
    assert x > 0.0
    assert y == pytest.approx(1.0, abs=1e-3)


def test_arc_reversed_start_arrow():
    geom = arc_geometry(1.0, math.pi / 2, 0.0, arrowstyle1="<|-", arrowstyle2="x")
    assert geom.sign == -1.0
    assert geom.end_marker is None
    # begin of a clockwise arc at 90°: arrow comes from the right
    x, y = geom.start_marker.xytext
    assert x > 0.0
    assert y == pytest.approx(1.0, abs=1e-3)


def test_arc_label():
    geom = arc_geometry(1.0, 0.0, math.pi / 2, labelrsep=0.1, labelphisep=0.5)
    a = math.pi / 4
    assert geom.label_xy == pytest.approx((1.1 * math.cos(a), 1.1 * math.sin(a)))
    assert geom.label_rotation == 0.0
    geom = arc_geometry(1.0, 0.0, math.pi / 2, labelrelrot=True)
    assert geom.label_rotation == pytest.approx(45.0)


def test_arc_dot90():
    assert arc_geometry(1.0, 0.0, math.pi / 2).dot90_xy is None
    geom = arc_geometry(0.4, 0.0, math.pi / 2, origin=1 + 1j, dot90=True)
    a = math.pi / 4
    assert geom.dot90_xy == pytest.approx(
        (1.0 + 0.2 * math.cos(a), 1.0 + 0.2 * math.sin(a))
    )


def test_arc_custom_step():
    geom = arc_geometry(1.0, 0.0, math.pi, config=DrawingConfig(arc_step_deg=10.0))
    assert geom.samples == 18


# ------------------------------------------------------------------------------
# Phasor and sine
# ------------------------------------------------------------------------------

def test_phasorsine_samples():
    geom = phasorsine_geometry(0.8, math.pi / 4)
    assert len(geom.sine_x) == 1001
    assert geom.sine_x[0] == 0.0
    assert geom.sine_x[-1] == pytest.approx(360.0)
    assert geom.sine_y[0] == pytest.approx(0.8 * math.sin(math.pi / 4))
    assert np.max(np.hypot(geom.circle_x, geom.circle_y)) == pytest.approx(0.8)
    assert geom.phasor == pytest.approx(pol(0.8, math.pi / 4))
    assert geom.yticks == (-0.8, 0.0, 0.8)


def test_phasorsine_guide_lines():
    geom = phasorsine_geometry(1.0, Q_(30, 'deg'))
    initial, to_phasor, maximum, minimum = geom.guide_lines
    assert initial.xy_from == pytest.approx((0.0, 0.5))
    assert initial.xy_to == pytest.approx((360.0, 0.5))
    assert to_phasor.panel_from == Panel.SINE
    assert to_phasor.panel_to == Panel.PHASOR
    assert to_phasor.xy_to == pytest.approx((math.cos(math.pi / 6), 0.5))
    assert maximum.xy_to == pytest.approx((60.0, 1.0))
    assert minimum.xy_to == pytest.approx((240.0, -1.0))


def test_phasorsine_guide_lines_wrap_around():
    geom = phasorsine_geometry(1.0, Q_(120, 'deg'))
    maximum = geom.guide_lines[2]
    assert maximum.xy_to == pytest.approx((330.0, 1.0))
