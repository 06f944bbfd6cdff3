from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderStyle:
    beam_lw: float = 3.0

    arrow_lw: float = 1.0
    arrow_scale: float = 11.0

    dist_rect_lw: float = 0.9
    dist_rect_alpha: float = 0.12

    moment_arc_lw: float = 1.0
    moment_arrow_scale: float = 11.0

    # Alturas relativas a L (%)
    arrow_height_pctL: float = 12.0
    dist_height_pctL: float = 8.0
    moment_radius_pctL: float = 4.0
    support_size_pctL: float = 4.0

    # cargas ocultas (visible=False)
    hidden_alpha: float = 0.25

    font_size: int = 9

    # unidades para etiquetas
    force_unit: str = "kN"
    length_unit: str = "m"


@dataclass(frozen=True)
class DiagramStyle:
    line_lw: float = 1.5
    fill_alpha: float = 0.2
    pad: float = 1.15
    annotate_extrema: bool = True

    shear_color: str = "tab:blue"
    moment_color: str = "tab:purple"
    axial_color: str = "tab:orange"
