import numpy as np
import pytest

from beam_calc.domain.errors import UNSATISFIED_EQUILIBRIUM, UNSUPPORTED_CONFIGURATION
from beam_calc.domain.loads import DistributedLoad, MomentLoad, PointLoad
from beam_calc.domain.model import BeamModel
from beam_calc.domain.results import STATUS_INVALID, STATUS_OK, STATUS_UNSUPPORTED
from beam_calc.domain.supports import SupportClass, SupportPair
from beam_calc.engine.pipeline import analyze_beam, analyze_model, outcome_notes


def test_simple_beam_scenario():
    out = analyze_beam(10.0, [PointLoad(position=4.0, magnitude=50.0)], SupportPair("pinned", "roller"))

    assert out.status == STATUS_OK
    assert out.ok
    assert out.support_class is SupportClass.SIMPLE
    assert out.result.reactions.left.vertical == pytest.approx(30.0)
    assert out.result.reactions.right.vertical == pytest.approx(20.0)
    assert out.result.positions.size == 101


def test_cantilever_scenario():
    out = analyze_beam(5.0, [PointLoad(position=5.0, magnitude=10.0)], SupportPair("fixed", "free"))

    r = out.result.reactions
    assert r.left.vertical == pytest.approx(10.0)
    assert r.left.moment == pytest.approx(50.0)
    assert (r.right.vertical, r.right.horizontal, r.right.moment) == (0.0, 0.0, 0.0)


def test_roller_roller_with_angled_load_returns_result_with_diagnostic():
    out = analyze_beam(
        10.0,
        [PointLoad(position=5.0, magnitude=100.0, angle_deg=30.0)],
        SupportPair("roller", "roller"),
    )

    assert out.ok
    assert out.result.reactions.left.horizontal == 0.0
    assert out.result.reactions.right.horizontal == 0.0
    assert [d.kind for d in out.diagnostics] == [UNSATISFIED_EQUILIBRIUM]
    # la componente horizontal sigue apareciendo en el axial
    assert out.result.axial_force[-1] == pytest.approx(50.0)


def test_hidden_loads_are_ignored():
    supports = SupportPair("fixed", "roller")
    visible = [PointLoad(position=3.0, magnitude=10.0)]
    hidden = visible + [DistributedLoad(position=0.0, length=10.0, magnitude=5.0, visible=False)]

    a = analyze_beam(10.0, visible, supports).result
    b = analyze_beam(10.0, hidden, supports).result

    assert np.array_equal(a.shear_force, b.shear_force)
    assert np.array_equal(a.bending_moment, b.bending_moment)
    assert a.reactions == b.reactions


@pytest.mark.parametrize("length", [0.0, -3.0, float("nan")])
def test_invalid_length_gives_no_result(length):
    out = analyze_beam(length, [PointLoad(position=0.0, magnitude=1.0)], SupportPair("pinned", "roller"))
    assert out.status == STATUS_INVALID
    assert out.result is None
    assert out.error


@pytest.mark.parametrize(
    "load",
    [
        PointLoad(position=12.0, magnitude=1.0),
        MomentLoad(position=-0.5, magnitude=1.0),
        DistributedLoad(position=8.0, length=4.0, magnitude=1.0),
        DistributedLoad(position=2.0, length=-1.0, magnitude=1.0),
        PointLoad(position=float("nan"), magnitude=5.0),
        PointLoad(position=5.0, magnitude=float("inf")),
        PointLoad(position=5.0, magnitude=5.0, angle_deg=float("nan")),
        DistributedLoad(position=2.0, length=float("nan"), magnitude=1.0),
        MomentLoad(position=5.0, magnitude=float("-inf")),
    ],
)
def test_loads_outside_the_beam_are_invalid(load):
    out = analyze_beam(10.0, [load], SupportPair("pinned", "roller"))
    assert out.status == STATUS_INVALID
    assert out.result is None


def test_hidden_out_of_range_load_does_not_invalidate():
    loads = [PointLoad(position=5.0, magnitude=1.0), PointLoad(position=50.0, magnitude=1.0, visible=False)]
    assert analyze_beam(10.0, loads, SupportPair("pinned", "roller")).ok


def test_unsupported_pair_gives_no_result():
    out = analyze_beam(10.0, [PointLoad(position=5.0, magnitude=1.0)], SupportPair("free", "free"))
    assert out.status == STATUS_UNSUPPORTED
    assert out.result is None
    assert out.support_class is SupportClass.UNSUPPORTED
    assert out.diagnostics[0].kind == UNSUPPORTED_CONFIGURATION
    assert out.notes()


def test_supports_can_be_given_as_a_tuple():
    out = analyze_beam(10.0, [PointLoad(position=4.0, magnitude=50.0)], ("pinned", "roller"))
    assert out.result.reactions.right.vertical == pytest.approx(20.0)


@pytest.mark.parametrize("supports", [("pinned", "none"), ("cantilever", "free"), ("fixed", "cantilever")])
def test_unknown_support_strings_give_no_result(supports):
    out = analyze_beam(10.0, [PointLoad(position=5.0, magnitude=5.0)], supports)
    assert out.status == STATUS_UNSUPPORTED
    assert out.result is None
    assert out.support_class is SupportClass.UNSUPPORTED
    assert out.diagnostics[0].kind == UNSUPPORTED_CONFIGURATION
    assert out.error


def test_no_loads_gives_zero_profile():
    out = analyze_beam(6.0, [], SupportPair("fixed", "fixed"))
    assert out.ok
    assert not np.any(out.result.shear_force)
    assert not np.any(out.result.bending_moment)


def test_identical_inputs_give_identical_outputs():
    loads = [PointLoad(position=2.0, magnitude=3.0, angle_deg=20.0), DistributedLoad(1.0, 5.0, 0.7)]
    a = analyze_beam(9.0, loads, SupportPair("fixed", "pinned")).result
    b = analyze_beam(9.0, loads, SupportPair("fixed", "pinned")).result
    for name in ("positions", "shear_force", "bending_moment", "axial_force"):
        assert np.array_equal(getattr(a, name), getattr(b, name))


def test_analyze_model_is_cached_by_value():
    m1 = BeamModel(beam_length=10.0).add_load(PointLoad(position=4.0, magnitude=50.0))
    m2 = BeamModel(beam_length=10.0).add_load(PointLoad(position=4.0, magnitude=50.0))

    out1 = analyze_model(m1)
    out2 = analyze_model(m2)
    assert out1 is out2

    out3 = analyze_model(m1.with_beam_length(12.0))
    assert out3 is not out1
    assert out3.result.beam_length == 12.0


def test_outcome_notes():
    ok = analyze_beam(10.0, [PointLoad(position=4.0, magnitude=50.0)], SupportPair("pinned", "roller"))
    assert outcome_notes(ok) == ["Equilibrio resuelto sin observaciones."]

    bad = analyze_beam(0.0, [], SupportPair("pinned", "roller"))
    assert outcome_notes(bad) == [bad.error]
