import numpy as np
import pytest

from beam_calc.domain.loads import DistributedLoad, HorizontalPointLoad, MomentLoad, PointLoad
from beam_calc.domain.results import Reactions, SupportReaction
from beam_calc.domain.supports import SupportPair
from beam_calc.engine.profile import (
    DIAGRAM_STATIONS,
    integrate_moment,
    profile_internal_forces,
    station_positions,
    superpose_forces,
)
from beam_calc.engine.reactions import solve_reactions

SIMPLE = SupportPair("pinned", "roller")


def _profile(L, loads, supports):
    sol = solve_reactions(L, loads, supports)
    return profile_internal_forces(L, loads, supports, sol.reactions)


@pytest.mark.parametrize("L", [1.0, 7.3, 10.0, 123.456])
def test_station_positions(L):
    x = station_positions(L)
    assert x.size == DIAGRAM_STATIONS + 1 == 101
    assert x[0] == 0.0
    assert x[-1] == L
    assert np.all(np.diff(x) > 0)
    assert np.allclose(np.diff(x), L / DIAGRAM_STATIONS)


def test_simple_beam_shear_steps_at_load():
    res = _profile(10.0, [PointLoad(position=4.0, magnitude=50.0)], SIMPLE)

    assert res.positions[40] == 4.0
    assert res.shear_force[0] == 0.0          # la reacción izquierda entra en x > 0
    assert res.shear_force[1] == pytest.approx(30.0)
    assert res.shear_force[40] == pytest.approx(30.0)
    assert res.shear_force[41] == pytest.approx(-20.0)
    assert res.shear_force[100] == pytest.approx(-20.0)   # la reacción derecha no entra al muestreo
    assert np.all(res.axial_force == 0.0)


def test_moment_is_trapezoidal_integral_of_shear():
    loads = [
        PointLoad(position=2.5, magnitude=8.0),
        DistributedLoad(position=3.0, length=4.0, magnitude=1.5),
        MomentLoad(position=6.0, magnitude=12.0),
    ]
    res = _profile(10.0, loads, SupportPair("fixed", "roller"))
    x, V, M = res.positions, res.shear_force, res.bending_moment

    for i in range(1, x.size):
        trap = (V[i] + V[i - 1]) * (x[i] - x[i - 1]) / 2.0
        assert M[i] - M[i - 1] == pytest.approx(trap, abs=1e-9)


def test_moment_seeded_from_superposition_at_first_station():
    # carga en x<0 (no validada en esta capa): aporta momento ya en x=0
    supports = SupportPair("pinned", "roller")
    loads = [MomentLoad(position=-1.0, magnitude=4.0)]
    res = profile_internal_forces(10.0, loads, supports, Reactions())
    assert res.bending_moment[0] == pytest.approx(-4.0)
    assert np.allclose(res.bending_moment, -4.0)


def test_cantilever_left_profile():
    res = _profile(5.0, [PointLoad(position=5.0, magnitude=10.0)], SupportPair("fixed", "free"))

    assert res.shear_force[0] == 0.0
    assert np.allclose(res.shear_force[1:], 10.0)
    # M integrado desde M[0]=0; el primer tramo promedia V[0]=0 y V[1]=10
    assert res.bending_moment[0] == 0.0
    assert res.bending_moment[1] == pytest.approx(0.25)
    assert res.bending_moment[-1] == pytest.approx(49.75)


def test_free_left_end_reaction_is_ignored():
    reactions = Reactions(left=SupportReaction(vertical=5.0, horizontal=2.0, moment=3.0))
    res = profile_internal_forces(5.0, [], SupportPair("free", "fixed"), reactions)
    assert np.all(res.shear_force == 0.0)
    assert np.all(res.axial_force == 0.0)
    assert np.all(res.bending_moment == 0.0)


def test_right_end_reaction_never_reaches_the_stations():
    reactions = Reactions(right=SupportReaction(vertical=5.0, horizontal=2.0, moment=3.0))
    res = profile_internal_forces(5.0, [], SupportPair("free", "fixed"), reactions)
    assert np.all(res.shear_force == 0.0)
    assert np.all(res.axial_force == 0.0)
    assert np.all(res.bending_moment == 0.0)


def test_horizontal_component_only_changes_axial_force():
    res = _profile(10.0, [HorizontalPointLoad(position=5.0, magnitude=10.0)], SIMPLE)

    assert np.all(res.shear_force == 0.0)
    assert np.all(res.bending_moment == 0.0)
    assert res.axial_force[0] == 0.0
    assert res.axial_force[50] == pytest.approx(10.0)
    assert res.axial_force[51] == pytest.approx(20.0)


def test_uniform_load_shear_is_linear():
    res = _profile(10.0, [DistributedLoad(position=0.0, length=10.0, magnitude=2.0)], SIMPLE)

    assert res.reactions.left.vertical == pytest.approx(10.0)
    assert res.reactions.right.vertical == pytest.approx(10.0)
    assert res.shear_force[25] == pytest.approx(5.0)
    assert res.shear_force[50] == pytest.approx(0.0, abs=1e-12)
    assert res.shear_force[100] == pytest.approx(-10.0)


def test_partial_distributed_load_applies_full_resultant_after_span():
    x, V, M, N = superpose_forces(
        10.0, [DistributedLoad(position=2.0, length=2.0, magnitude=3.0)], SIMPLE, Reactions(),
    )
    assert V[20] == 0.0
    assert V[30] == pytest.approx(-3.0)
    assert M[30] == pytest.approx(-3.0 * 1.0 * 1.0 / 2.0)
    assert V[60] == pytest.approx(-6.0)
    assert M[60] == pytest.approx(-6.0 * (6.0 - 3.0))


def test_moment_load_is_a_step_in_superposed_moment_only():
    x, V, M, N = superpose_forces(10.0, [MomentLoad(position=5.0, magnitude=7.0)], SIMPLE, Reactions())
    assert M[50] == 0.0
    assert M[51] == pytest.approx(-7.0)
    assert np.all(V == 0.0)
    assert np.all(N == 0.0)


def test_profile_scales_linearly():
    base = [
        PointLoad(position=3.0, magnitude=4.0),
        DistributedLoad(position=5.0, length=3.0, magnitude=1.0),
        HorizontalPointLoad(position=2.0, magnitude=2.0),
    ]
    k = -2.5
    scaled = [
        PointLoad(position=3.0, magnitude=4.0 * k),
        DistributedLoad(position=5.0, length=3.0, magnitude=1.0 * k),
        HorizontalPointLoad(position=2.0, magnitude=2.0 * k),
    ]
    supports = SupportPair("pinned", "fixed")
    a = _profile(8.0, base, supports)
    b = _profile(8.0, scaled, supports)

    assert np.allclose(b.shear_force, k * a.shear_force)
    assert np.allclose(b.bending_moment, k * a.bending_moment)
    assert np.allclose(b.axial_force, k * a.axial_force)


def test_integrate_moment():
    x = np.array([0.0, 1.0, 2.0, 3.0])
    V = np.array([0.0, 2.0, 2.0, -2.0])
    M = integrate_moment(x, V, 1.0)
    assert M.tolist() == [1.0, 2.0, 4.0, 4.0]


def test_result_arrays_are_read_only():
    res = _profile(10.0, [PointLoad(position=4.0, magnitude=50.0)], SIMPLE)
    with pytest.raises(ValueError):
        res.shear_force[0] = 1.0
    assert res.n_stations == 101
    assert res.beam_length == 10.0
