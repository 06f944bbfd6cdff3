from __future__ import annotations

import math
from typing import Iterable, List

from beam_calc.domain.errors import (
    Diagnostic,
    InvalidConfiguration,
    UNSATISFIED_EQUILIBRIUM,
    UNSUPPORTED_CONFIGURATION,
)
from beam_calc.domain.loads import DistributedLoad, HorizontalPointLoad, MomentLoad, PointLoad
from beam_calc.domain.results import LoadTotals, ReactionSolution, Reactions, SupportReaction
from beam_calc.domain.supports import SupportClass, SupportEnd, SupportPair, classify_supports

# |ΣFx| por debajo de esto se considera nulo
HORIZONTAL_TOL = 1e-12


def check_beam_length(beam_length: float) -> float:
    L = float(beam_length)
    if not math.isfinite(L) or L <= 0:
        raise InvalidConfiguration(f"Longitud de viga inválida: L={beam_length!r} (debe ser finita y > 0).")
    return L


def sum_load_totals(loads: Iterable) -> LoadTotals:
    """
    Suma de cargas ya descompuestas:
      vertical: puntuales verticales + resultantes de distribuidas (+ abajo)
      horizontal: componentes horizontales (+ derecha)
      moment_about_left: momentos respecto a x=0; los momentos puntuales suman directo
    """
    Fy = 0.0
    Fx = 0.0
    M0 = 0.0

    for ld in loads:
        if isinstance(ld, HorizontalPointLoad):
            Fx += float(ld.magnitude)
        elif isinstance(ld, PointLoad):
            P = float(ld.magnitude)
            Fy += P
            M0 += P * float(ld.position)
        elif isinstance(ld, DistributedLoad):
            F_res = float(ld.magnitude) * float(ld.length)
            Fy += F_res
            M0 += F_res * (float(ld.position) + 0.5 * float(ld.length))
        elif isinstance(ld, MomentLoad):
            M0 += float(ld.magnitude)
        else:
            raise TypeError(f"Tipo de carga no soportado: {type(ld).__name__}")

    return LoadTotals(vertical=Fy, horizontal=Fx, moment_about_left=M0)


def solve_reactions(beam_length: float, loads: Iterable, supports: SupportPair) -> ReactionSolution:
    """
    Reacciones en ambos extremos a partir de cargas DESCOMPUESTAS.

    Ecuaciones:
      ΣFy = 0, ΣFx = 0, ΣM0 = 0 (respecto al extremo izquierdo)

    Biempotrada: reparto simplificado mitad/mitad (no es la solución elástica).
    Par de apoyos no contemplado: reacciones en cero + diagnóstico.
    """
    L = check_beam_length(beam_length)
    totals = sum_load_totals(loads)
    V = totals.vertical
    H = totals.horizontal
    M0 = totals.moment_about_left

    cls = classify_supports(supports)
    diagnostics: List[Diagnostic] = []

    left = SupportReaction()
    right = SupportReaction()

    if cls is SupportClass.CANTILEVER_LEFT:
        left = SupportReaction(vertical=V, horizontal=H, moment=M0)

    elif cls is SupportClass.CANTILEVER_RIGHT:
        right = SupportReaction(vertical=V, horizontal=H, moment=M0 - V * L)

    elif cls is SupportClass.FIXED_FIXED:
        Rv_right = V / 2.0
        Rv_left = V - Rv_right
        M_left = (M0 - Rv_right * L) / 2.0
        M_right = M0 - M_left - Rv_left * L
        left = SupportReaction(vertical=Rv_left, horizontal=H / 2.0, moment=M_left)
        right = SupportReaction(vertical=Rv_right, horizontal=H / 2.0, moment=M_right)

    elif cls is SupportClass.FIXED_HINGE:
        Rv_right = M0 / L
        Rv_left = V - Rv_right
        left = SupportReaction(vertical=Rv_left, horizontal=H, moment=M0 - Rv_right * L)
        right = SupportReaction(vertical=Rv_right)

    elif cls is SupportClass.HINGE_FIXED:
        Rv_left = (M0 - V * L) / (-L)
        Rv_right = V - Rv_left
        left = SupportReaction(vertical=Rv_left)
        right = SupportReaction(vertical=Rv_right, horizontal=H, moment=Rv_left * L - M0)

    elif cls is SupportClass.SIMPLE:
        Rv_right = M0 / L
        Rv_left = V - Rv_right

        # Fx solo lo toma un apoyo fijo (pinned); el móvil (roller) no resiste horizontal
        H_left = 0.0
        H_right = 0.0
        if supports.left is SupportEnd.PINNED:
            H_left = H
        elif supports.right is SupportEnd.PINNED:
            H_right = H
        elif abs(H) > HORIZONTAL_TOL:
            diagnostics.append(Diagnostic(
                kind=UNSATISFIED_EQUILIBRIUM,
                message=(
                    f"ΣFx = {H:g} sin equilibrar: ambos apoyos son móviles (roller) "
                    "y ninguno resiste carga horizontal."
                ),
                value=H,
            ))

        left = SupportReaction(vertical=Rv_left, horizontal=H_left)
        right = SupportReaction(vertical=Rv_right, horizontal=H_right)

    else:
        diagnostics.append(Diagnostic(
            kind=UNSUPPORTED_CONFIGURATION,
            message=(
                f"Combinación de apoyos no soportada: izquierda={supports.left.value}, "
                f"derecha={supports.right.value}. Reacciones en cero."
            ),
        ))

    return ReactionSolution(
        reactions=Reactions(left=left, right=right),
        support_class=cls,
        totals=totals,
        diagnostics=diagnostics,
    )
