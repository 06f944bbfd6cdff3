from __future__ import annotations

from dataclasses import dataclass


class InvalidConfiguration(ValueError):
    """Configuración que no admite cálculo: L <= 0, L no finita, carga fuera de la viga."""


# Tipos de diagnóstico (no fatales o reportables sin excepción)
UNSATISFIED_EQUILIBRIUM = "unsatisfied_equilibrium"
UNSUPPORTED_CONFIGURATION = "unsupported_configuration"


@dataclass(frozen=True)
class Diagnostic:
    kind: str
    message: str
    value: float = 0.0   # p.ej. ΣFx no equilibrada
