from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from beam_calc.domain.errors import Diagnostic
from beam_calc.domain.supports import SupportClass


@dataclass(frozen=True)
class SupportReaction:
    vertical: float = 0.0
    horizontal: float = 0.0
    moment: float = 0.0


@dataclass(frozen=True)
class Reactions:
    left: SupportReaction = SupportReaction()
    right: SupportReaction = SupportReaction()


@dataclass(frozen=True)
class LoadTotals:
    vertical: float = 0.0
    horizontal: float = 0.0
    moment_about_left: float = 0.0


@dataclass(frozen=True)
class ReactionSolution:
    reactions: Reactions
    support_class: SupportClass
    totals: LoadTotals
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def is_supported(self) -> bool:
        return self.support_class is not SupportClass.UNSUPPORTED


@dataclass(frozen=True, eq=False)
class BeamResult:
    """
    Snapshot inmutable de una corrida del motor.

    positions: N+1 estaciones uniformes en [0, L] (incluye ambos extremos)
    shear_force / bending_moment / axial_force: un valor por estación
    """
    positions: np.ndarray
    shear_force: np.ndarray
    bending_moment: np.ndarray
    axial_force: np.ndarray
    reactions: Reactions

    def __post_init__(self):
        for name in ("positions", "shear_force", "bending_moment", "axial_force"):
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    @property
    def n_stations(self) -> int:
        return int(self.positions.size)

    @property
    def beam_length(self) -> float:
        return float(self.positions[-1])


STATUS_OK = "ok"
STATUS_INVALID = "invalid_configuration"
STATUS_UNSUPPORTED = "unsupported_configuration"


@dataclass(frozen=True)
class AnalysisOutcome:
    """
    Resultado explícito del pipeline:
      - ok: result completo (puede traer diagnósticos no fatales)
      - invalid_configuration / unsupported_configuration: result=None y error con el mensaje
    """
    status: str
    result: Optional[BeamResult] = None
    error: str = ""
    diagnostics: Tuple[Diagnostic, ...] = ()
    support_class: Optional[SupportClass] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def notes(self) -> List[str]:
        out: List[str] = []
        if self.error:
            out.append(self.error)
        out.extend(d.message for d in self.diagnostics)
        return out
