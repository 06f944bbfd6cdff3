from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from beam_calc.domain.results import BeamResult, Reactions


@dataclass(frozen=True)
class ForceExtreme:
    value: float      # con signo
    position: float
    index: int


@dataclass(frozen=True)
class ResultSummary:
    max_shear: ForceExtreme
    max_moment: ForceExtreme
    max_axial: ForceExtreme
    reactions: Reactions


def find_max_abs(values: Sequence[float], positions: Sequence[float]) -> ForceExtreme:
    """Máximo |valor| (primer índice en caso de empate); devuelve el valor con signo."""
    y = np.asarray(values, dtype=float)
    x = np.asarray(positions, dtype=float)
    if y.size == 0:
        raise ValueError("Serie vacía: no hay máximo.")
    i = int(np.argmax(np.abs(y)))
    return ForceExtreme(value=float(y[i]), position=float(x[i]), index=i)


def summarize_result(result: BeamResult) -> ResultSummary:
    x = result.positions
    return ResultSummary(
        max_shear=find_max_abs(result.shear_force, x),
        max_moment=find_max_abs(result.bending_moment, x),
        max_axial=find_max_abs(result.axial_force, x),
        reactions=result.reactions,
    )


# -------------------------
# Extremos locales (para anotar diagramas)
# -------------------------
def _find_local_extrema_indices(y: np.ndarray, *, tol_slope: float) -> List[Tuple[str, int]]:
    """
    Extremos locales por cambio de signo de la pendiente, IGNORANDO mesetas (dy≈0).
    Devuelve [("max"/"min", idx)].
    """
    if len(y) < 5:
        return []

    dy = np.diff(y)
    s = np.zeros_like(dy, dtype=int)
    s[dy > +tol_slope] = +1
    s[dy < -tol_slope] = -1

    nz = np.nonzero(s)[0]
    if nz.size < 2:
        return []

    s_nz = s[nz]
    out: List[Tuple[str, int]] = []
    for k in range(1, len(s_nz)):
        if s_nz[k - 1] > 0 and s_nz[k] < 0:
            out.append(("max", int(nz[k - 1] + 1)))
        elif s_nz[k - 1] < 0 and s_nz[k] > 0:
            out.append(("min", int(nz[k - 1] + 1)))
    return out


def _select_with_spacing(
    x: np.ndarray,
    y: np.ndarray,
    candidates: List[Tuple[str, int]],
    *,
    y_abs_min: float,
    min_dx: float,
) -> List[Tuple[str, int]]:
    """Descarta |y| chicos y extremos demasiado juntos en x (prioriza |y| mayor)."""
    cand = [(k, i) for (k, i) in candidates if abs(float(y[i])) >= y_abs_min]
    cand.sort(key=lambda ki: abs(float(y[ki[1]])), reverse=True)

    picked: List[Tuple[str, int]] = []
    picked_x: List[float] = []
    for kind, i in cand:
        xi = float(x[i])
        if all(abs(xi - xj) >= min_dx for xj in picked_x):
            picked.append((kind, i))
            picked_x.append(xi)

    picked.sort(key=lambda ki: float(x[ki[1]]))
    return picked


def local_extrema(
    values: Sequence[float],
    positions: Sequence[float],
    *,
    rel_amplitude: float = 0.01,
    rel_spacing: float = 0.03,
) -> List[Tuple[str, float, float]]:
    """
    Extremos relevantes de una serie: locales + globales, sin marcar la línea base.
    Devuelve [(tipo, x, valor)] ordenado por x.
    """
    y = np.asarray(values, dtype=float)
    x = np.asarray(positions, dtype=float)
    if y.size == 0:
        return []

    max_abs = float(np.max(np.abs(y)))
    if max_abs <= 0.0:
        return []

    cands = _find_local_extrema_indices(y, tol_slope=1e-9 * max_abs)
    cands.extend([("max", int(np.argmax(y))), ("min", int(np.argmin(y)))])

    seen = set()
    uniq: List[Tuple[str, int]] = []
    for kind, i in cands:
        if i in seen:
            continue
        seen.add(i)
        uniq.append((kind, i))

    span = float(x[-1] - x[0]) if x.size > 1 else 0.0
    picked = _select_with_spacing(
        x, y, uniq,
        y_abs_min=rel_amplitude * max_abs,
        min_dx=rel_spacing * span,
    )
    return [(kind, float(x[i]), float(y[i])) for kind, i in picked]
