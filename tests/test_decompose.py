import math

import pytest

from beam_calc.domain.loads import DistributedLoad, HorizontalPointLoad, MomentLoad, PointLoad
from beam_calc.engine.decompose import decompose_loads, decompose_point_load


def test_angled_point_load_splits_into_cos_and_sin_components():
    vertical, horizontal = decompose_point_load(PointLoad(position=3.0, magnitude=100.0, angle_deg=30.0))

    assert isinstance(vertical, PointLoad)
    assert isinstance(horizontal, HorizontalPointLoad)
    assert vertical.position == 3.0
    assert horizontal.position == 3.0
    assert vertical.magnitude == pytest.approx(86.6025, abs=1e-4)
    assert horizontal.magnitude == pytest.approx(50.0)
    assert vertical.angle_deg == 0.0


def test_zero_angle_point_load_passes_through_unchanged():
    p = PointLoad(position=1.0, magnitude=5.0)
    assert decompose_point_load(p) == [p]
    assert decompose_point_load(p)[0] is p


def test_distributed_and_moment_loads_pass_through():
    d = DistributedLoad(position=0.0, length=2.0, magnitude=3.0)
    m = MomentLoad(position=1.0, magnitude=4.0)
    out = decompose_loads([d, m])
    assert out == [d, m]


def test_negative_angle_gives_leftward_horizontal_component():
    _, horizontal = decompose_point_load(PointLoad(position=0.0, magnitude=100.0, angle_deg=-30.0))
    assert horizontal.magnitude == pytest.approx(-50.0)


def test_angle_outside_ui_range_is_not_rejected():
    vertical, horizontal = decompose_point_load(PointLoad(position=0.0, magnitude=100.0, angle_deg=120.0))
    assert vertical.magnitude == pytest.approx(-50.0)
    assert horizontal.magnitude == pytest.approx(100.0 * math.sin(math.radians(120.0)))


def test_decompose_loads_expands_only_angled_point_loads():
    loads = [
        PointLoad(position=1.0, magnitude=10.0),
        PointLoad(position=2.0, magnitude=10.0, angle_deg=45.0),
        DistributedLoad(position=0.0, length=1.0, magnitude=1.0),
    ]
    out = decompose_loads(loads)

    assert len(out) == 4
    assert sum(isinstance(ld, HorizontalPointLoad) for ld in out) == 1
