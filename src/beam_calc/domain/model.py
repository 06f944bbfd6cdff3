from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Tuple

from beam_calc.domain.errors import InvalidConfiguration
from beam_calc.domain.loads import Load, validate_loads, visible_loads
from beam_calc.domain.supports import SupportEnd, SupportPair


@dataclass(frozen=True)
class BeamModel:
    """
    Estado completo de la viga que arma la UI (longitud, apoyos y lista de cargas).

    Inmutable: cada operación devuelve un modelo nuevo, que se pasa por valor al motor.
    Al ser hashable sirve como clave de cache del resultado (ver engine.pipeline.analyze_model).
    """
    beam_length: float = 10.0
    supports: SupportPair = SupportPair(SupportEnd.FIXED, SupportEnd.ROLLER)
    loads: Tuple[Load, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "beam_length", float(self.beam_length))
        object.__setattr__(self, "loads", tuple(self.loads))

    def with_beam_length(self, beam_length: float) -> "BeamModel":
        L = float(beam_length)
        if not math.isfinite(L) or L <= 0:
            raise InvalidConfiguration(f"Longitud de viga inválida: {beam_length!r} (debe ser > 0).")
        return replace(self, beam_length=L)

    def with_supports(self, left, right) -> "BeamModel":
        return replace(self, supports=SupportPair(left, right))

    def add_load(self, load: Load) -> "BeamModel":
        # mismo chequeo que el pipeline, aunque la carga esté oculta
        validate_loads(self.beam_length, [load])
        return replace(self, loads=self.loads + (load,))

    def remove_load(self, index: int) -> "BeamModel":
        self._check_index(index)
        loads = list(self.loads)
        del loads[index]
        return replace(self, loads=tuple(loads))

    def toggle_load_visibility(self, index: int) -> "BeamModel":
        self._check_index(index)
        loads = list(self.loads)
        ld = loads[index]
        loads[index] = replace(ld, visible=not ld.visible)
        return replace(self, loads=tuple(loads))

    def visible_loads(self) -> List[Load]:
        return visible_loads(self.loads)

    def _check_index(self, index: int) -> None:
        if not (-len(self.loads) <= index < len(self.loads)):
            raise IndexError(f"No existe la carga #{index} (hay {len(self.loads)}).")
