from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Union

from beam_calc.domain.errors import InvalidConfiguration

# tolerancia para posiciones en los bordes de la viga
POSITION_TOL = 1e-9


@dataclass(frozen=True)
class PointLoad:
    position: float
    magnitude: float         # + hacia abajo
    angle_deg: float = 0.0   # 0 = vertical hacia abajo; + gira hacia la horizontal
    visible: bool = True


@dataclass(frozen=True)
class DistributedLoad:
    position: float          # inicio del tramo
    length: float
    magnitude: float         # por unidad de longitud, + hacia abajo
    visible: bool = True

    @property
    def end(self) -> float:
        return self.position + self.length

    @property
    def resultant(self) -> float:
        return self.magnitude * self.length

    @property
    def centroid(self) -> float:
        return self.position + 0.5 * self.length


@dataclass(frozen=True)
class MomentLoad:
    position: float
    magnitude: float         # + sentido positivo del diagrama
    visible: bool = True


@dataclass(frozen=True)
class HorizontalPointLoad:
    """
    Componente horizontal de una puntual inclinada (+ hacia la derecha).
    Solo la produce el descomponedor: aporta a la fuerza axial, nunca a corte ni momento.
    """
    position: float
    magnitude: float
    visible: bool = True


# Cargas que ingresa el usuario
Load = Union[PointLoad, DistributedLoad, MomentLoad]

# Cargas ya descompuestas (entrada del solver y del perfilador)
DecomposedLoad = Union[PointLoad, HorizontalPointLoad, DistributedLoad, MomentLoad]


def visible_loads(loads: Iterable[Load]) -> List[Load]:
    return [ld for ld in loads if ld.visible is not False]


def validate_loads(beam_length: float, loads: Iterable) -> None:
    """
    Chequeo de borde (lo que normalmente haría la UI): toda carga dentro de [0, L]
    y con valores finitos. Distribuidas: longitud >= 0 y fin <= L.
    """
    L = float(beam_length)
    for i, ld in enumerate(loads):
        for campo in ("position", "magnitude", "length", "angle_deg"):
            v = getattr(ld, campo, None)
            if v is not None and not math.isfinite(float(v)):
                raise InvalidConfiguration(f"Carga #{i}: {campo} no finito ({v!r}).")

        x = float(ld.position)
        if x < -POSITION_TOL or x > L + POSITION_TOL:
            raise InvalidConfiguration(f"Carga #{i}: posición {x:g} fuera de la viga [0, {L:g}].")
        if isinstance(ld, DistributedLoad):
            if ld.length < 0:
                raise InvalidConfiguration(f"Carga #{i}: longitud distribuida negativa ({ld.length:g}).")
            if ld.end > L + POSITION_TOL:
                raise InvalidConfiguration(
                    f"Carga #{i}: la distribuida termina en {ld.end:g}, más allá de L={L:g}."
                )
