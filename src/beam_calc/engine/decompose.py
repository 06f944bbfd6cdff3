from __future__ import annotations

import math
from typing import Iterable, List

from beam_calc.domain.loads import DecomposedLoad, HorizontalPointLoad, PointLoad


def decompose_point_load(load: PointLoad) -> List[DecomposedLoad]:
    """
    Puntual inclinada -> [vertical M·cos(θ), horizontal M·sin(θ)] en la misma posición.
    Ángulo 0 (o None): pasa sin cambios.
    """
    if not load.angle_deg:
        return [load]

    theta = math.radians(float(load.angle_deg))
    x = float(load.position)
    M = float(load.magnitude)

    return [
        PointLoad(position=x, magnitude=M * math.cos(theta)),
        HorizontalPointLoad(position=x, magnitude=M * math.sin(theta)),
    ]


def decompose_loads(loads: Iterable) -> List[DecomposedLoad]:
    """
    Descompone todas las puntuales inclinadas. Distribuidas, momentos y puntuales verticales
    pasan tal cual. No valida rangos de ángulo (eso es de la UI).
    """
    out: List[DecomposedLoad] = []
    for ld in loads:
        if isinstance(ld, PointLoad):
            out.extend(decompose_point_load(ld))
        else:
            out.append(ld)
    return out
