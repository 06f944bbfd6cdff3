from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SupportEnd(str, Enum):
    FIXED = "fixed"
    PINNED = "pinned"
    ROLLER = "roller"
    FREE = "free"

    @property
    def is_hinge(self) -> bool:
        """Apoyo articulado (pinned o roller): solo restringe desplazamiento vertical (+ horizontal si pinned)."""
        return self in (SupportEnd.PINNED, SupportEnd.ROLLER)


class SupportClass(str, Enum):
    CANTILEVER_LEFT = "cantilever_left"      # empotrado izq, libre der
    CANTILEVER_RIGHT = "cantilever_right"    # libre izq, empotrado der
    FIXED_FIXED = "fixed_fixed"
    FIXED_HINGE = "fixed_hinge"              # empotrado izq + pinned/roller der
    HINGE_FIXED = "hinge_fixed"              # pinned/roller izq + empotrado der
    SIMPLE = "simple"                        # pinned/roller en ambos extremos
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class SupportPair:
    left: SupportEnd = SupportEnd.FIXED
    right: SupportEnd = SupportEnd.ROLLER

    def __post_init__(self):
        # admite strings ("fixed", "roller", ...) desde la UI
        object.__setattr__(self, "left", SupportEnd(self.left))
        object.__setattr__(self, "right", SupportEnd(self.right))

    @property
    def is_cantilever(self) -> bool:
        return is_cantilever(self)

    @property
    def free_end(self) -> str | None:
        """'left' / 'right' si el par es un voladizo, None en otro caso."""
        if not is_cantilever(self):
            return None
        return "left" if self.left is SupportEnd.FREE else "right"


def is_cantilever(pair: SupportPair) -> bool:
    """
    Voladizo = exactamente un extremo empotrado y el otro libre.
    Se deriva SIEMPRE del par; no existe un estado "cantilever" almacenado.
    """
    ends = {pair.left, pair.right}
    return ends == {SupportEnd.FIXED, SupportEnd.FREE}


def classify_supports(pair: SupportPair) -> SupportClass:
    """Clasificación del par de apoyos (primera regla que coincide)."""
    left, right = pair.left, pair.right

    if left is SupportEnd.FIXED and right is SupportEnd.FREE:
        return SupportClass.CANTILEVER_LEFT
    if left is SupportEnd.FREE and right is SupportEnd.FIXED:
        return SupportClass.CANTILEVER_RIGHT
    if left is SupportEnd.FIXED and right is SupportEnd.FIXED:
        return SupportClass.FIXED_FIXED
    if left is SupportEnd.FIXED and right.is_hinge:
        return SupportClass.FIXED_HINGE
    if left.is_hinge and right is SupportEnd.FIXED:
        return SupportClass.HINGE_FIXED
    if left.is_hinge and right.is_hinge:
        return SupportClass.SIMPLE
    return SupportClass.UNSUPPORTED
