from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, List

from beam_calc.domain.errors import UNSUPPORTED_CONFIGURATION, Diagnostic, InvalidConfiguration
from beam_calc.domain.loads import validate_loads, visible_loads
from beam_calc.domain.model import BeamModel
from beam_calc.domain.results import (
    AnalysisOutcome,
    STATUS_INVALID,
    STATUS_OK,
    STATUS_UNSUPPORTED,
)
from beam_calc.domain.supports import SupportClass, SupportPair
from beam_calc.engine.decompose import decompose_loads
from beam_calc.engine.profile import DIAGRAM_STATIONS, profile_internal_forces
from beam_calc.engine.reactions import check_beam_length, solve_reactions

logger = logging.getLogger(__name__)


def analyze_beam(
    beam_length: float,
    loads: Iterable,
    supports: SupportPair,
    n: int = DIAGRAM_STATIONS,
) -> AnalysisOutcome:
    """
    Pipeline completo: cargas visibles -> descomposición -> reacciones -> perfil.

    No lanza excepciones por configuración: devuelve AnalysisOutcome con el estado.
    Sin resultados parciales: si no es 'ok', result es None.
    """
    active = visible_loads(loads)

    try:
        if not isinstance(supports, SupportPair):
            supports = SupportPair(*supports)
    except (TypeError, ValueError) as exc:
        # extremo desconocido (p. ej. "none") o par mal formado
        msg = f"Combinación de apoyos no soportada: {exc}"
        logger.warning("%s", msg)
        return AnalysisOutcome(
            status=STATUS_UNSUPPORTED,
            error=msg,
            diagnostics=(Diagnostic(kind=UNSUPPORTED_CONFIGURATION, message=msg),),
            support_class=SupportClass.UNSUPPORTED,
        )

    try:
        L = check_beam_length(beam_length)
        validate_loads(L, active)
    except InvalidConfiguration as exc:
        logger.warning("Configuración inválida: %s", exc)
        return AnalysisOutcome(status=STATUS_INVALID, error=str(exc))

    decomposed = decompose_loads(active)
    solution = solve_reactions(L, decomposed, supports)

    if not solution.is_supported:
        msg = solution.diagnostics[0].message
        logger.warning("%s", msg)
        return AnalysisOutcome(
            status=STATUS_UNSUPPORTED,
            error=msg,
            diagnostics=tuple(solution.diagnostics),
            support_class=solution.support_class,
        )

    for d in solution.diagnostics:
        logger.warning("%s: %s", d.kind, d.message)

    result = profile_internal_forces(L, decomposed, supports, solution.reactions, n)
    logger.debug(
        "Viga L=%g (%s/%s), %d cargas -> R_izq=%s, R_der=%s",
        L, supports.left.value, supports.right.value, len(decomposed),
        solution.reactions.left, solution.reactions.right,
    )

    return AnalysisOutcome(
        status=STATUS_OK,
        result=result,
        diagnostics=tuple(solution.diagnostics),
        support_class=solution.support_class,
    )


@lru_cache(maxsize=64)
def analyze_model(model: BeamModel) -> AnalysisOutcome:
    """Igual que analyze_beam, cacheado por modelo (inmutable y hashable)."""
    return analyze_beam(model.beam_length, model.loads, model.supports)


def outcome_notes(outcome: AnalysisOutcome) -> List[str]:
    if outcome.ok and not outcome.diagnostics:
        return ["Equilibrio resuelto sin observaciones."]
    return outcome.notes()
