from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from beam_calc.domain.loads import DistributedLoad, HorizontalPointLoad, MomentLoad, PointLoad
from beam_calc.domain.results import BeamResult, Reactions
from beam_calc.domain.supports import SupportPair

# Cantidad de tramos del muestreo (N tramos => N+1 estaciones)
DIAGRAM_STATIONS = 100


def station_positions(beam_length: float, n: int = DIAGRAM_STATIONS) -> np.ndarray:
    """N+1 estaciones uniformes en [0, L]; la última es exactamente L."""
    L = float(beam_length)
    x = (np.arange(n + 1, dtype=float) / float(n)) * L
    x[-1] = L
    return x


def _apply_reactions(
    x: np.ndarray,
    V: np.ndarray,
    M: np.ndarray,
    N: np.ndarray,
    beam_length: float,
    supports: SupportPair,
    reactions: Reactions,
) -> None:
    """
    Reacciones como funciones escalón:
      - izquierda: suma en x > 0 (salvo que sea el extremo libre de un voladizo)
      - derecha: resta en x > L (nunca ocurre: la última estación es L)
    """
    if supports.free_end != "left":
        H = x > 0.0
        V[H] += reactions.left.vertical
        N[H] += reactions.left.horizontal
        M[H] += reactions.left.moment

    H = x > float(beam_length)
    V[H] -= reactions.right.vertical
    N[H] -= reactions.right.horizontal
    M[H] -= reactions.right.moment


def _apply_loads(x: np.ndarray, V: np.ndarray, M: np.ndarray, N: np.ndarray, loads: Iterable) -> None:
    for ld in loads:
        a = float(ld.position)
        past = x > a

        if isinstance(ld, HorizontalPointLoad):
            N[past] += float(ld.magnitude)

        elif isinstance(ld, PointLoad):
            P = float(ld.magnitude)
            V[past] -= P
            M[past] -= P * (x[past] - a)

        elif isinstance(ld, DistributedLoad):
            w = float(ld.magnitude)
            b = a + float(ld.length)

            # dentro del tramo: área parcial y su momento
            inside = past & (x <= b)
            d = x[inside] - a
            V[inside] -= w * d
            M[inside] -= w * d * d * 0.5

            # pasado el tramo: resultante concentrada en el centroide
            after = past & (x > b)
            F_res = ld.resultant
            V[after] -= F_res
            M[after] -= F_res * (x[after] - ld.centroid)

        elif isinstance(ld, MomentLoad):
            M[past] -= float(ld.magnitude)

        else:
            raise TypeError(f"Tipo de carga no soportado: {type(ld).__name__}")


def integrate_moment(x: np.ndarray, V: np.ndarray, M0: float) -> np.ndarray:
    """
    M[i] = M[i-1] + (V[i] + V[i-1]) * (x[i] - x[i-1]) / 2   (trapecios), con M[0] = M0.
    """
    M = np.empty_like(V, dtype=float)
    M[0] = float(M0)
    for i in range(1, len(x)):
        M[i] = M[i - 1] + (V[i] + V[i - 1]) * (x[i] - x[i - 1]) / 2.0
    return M


def superpose_forces(
    beam_length: float,
    loads: Iterable,
    supports: SupportPair,
    reactions: Reactions,
    n: int = DIAGRAM_STATIONS,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """(x, V, M, N) por superposición, antes de reintegrar M."""
    x = station_positions(beam_length, n)
    V = np.zeros_like(x)
    M = np.zeros_like(x)
    N = np.zeros_like(x)

    _apply_reactions(x, V, M, N, beam_length, supports, reactions)
    _apply_loads(x, V, M, N, loads)
    return x, V, M, N


def profile_internal_forces(
    beam_length: float,
    loads: Iterable,
    supports: SupportPair,
    reactions: Reactions,
    n: int = DIAGRAM_STATIONS,
) -> BeamResult:
    """
    Corte, momento y axial en N+1 estaciones.

    El momento de la superposición solo se usa en la primera estación; el resto se
    reemplaza por la integral (trapecios) del corte, así M es siempre consistente con V.
    No valida cargas: eso lo hace quien arma la lista.
    """
    x, V, M_sup, N = superpose_forces(beam_length, loads, supports, reactions, n)
    M = integrate_moment(x, V, M_sup[0])

    return BeamResult(
        positions=x,
        shear_force=V,
        bending_moment=M,
        axial_force=N,
        reactions=reactions,
    )
