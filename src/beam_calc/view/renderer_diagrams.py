from __future__ import annotations

import os
from typing import Dict, Optional

import numpy as np
from matplotlib.figure import Figure

from beam_calc.domain.model import BeamModel
from beam_calc.domain.results import BeamResult
from beam_calc.engine.summary import local_extrema
from beam_calc.view.renderer_beam import render_beam
from beam_calc.view.style import DiagramStyle, RenderStyle

# Tipos de diagrama (como en la UI: SFD / BMD / AFD)
DIAGRAM_KINDS = {
    "SFD": ("shear_force", "Diagrama de Corte V(x)", "V [kN]", "shear_color"),
    "BMD": ("bending_moment", "Diagrama de Momento Flector M(x)", "M [kN·m]", "moment_color"),
    "AFD": ("axial_force", "Diagrama de Esfuerzo Axial N(x)", "N [kN]", "axial_color"),
}


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _annotate_extrema(ax, x: np.ndarray, y: np.ndarray, color: str):
    """Marca extremos relevantes y anota el valor (el texto queda dentro del recuadro)."""
    picked = local_extrema(y, x)
    if not picked:
        return

    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = 0.03 * max(1e-9, float(x_max - x_min))
    my = 0.03 * max(1e-9, float(y_max - y_min))

    for kind, xi, yi in picked:
        ax.scatter([xi], [yi], s=18, zorder=6, color=color)
        if kind == "max":
            ty, va = yi + my, "bottom"
        else:
            ty, va = yi - my, "top"
        tx = _clamp(xi, x_min + mx, x_max - mx)
        ty = _clamp(ty, y_min + my, y_max - my)
        ax.text(tx, ty, _fmt_plain(yi, 2), ha="center", va=va, fontsize=8, zorder=7)


# -------------------------
# Render
# -------------------------
def render_diagram(ax, result: BeamResult, kind: str = "SFD", style: DiagramStyle = DiagramStyle()):
    try:
        attr, title, ylabel, color_attr = DIAGRAM_KINDS[kind]
    except KeyError:
        raise ValueError(f"Diagrama desconocido: {kind!r} (usar {', '.join(DIAGRAM_KINDS)})") from None

    ax.clear()
    x = np.asarray(result.positions, dtype=float)
    y = np.asarray(getattr(result, attr), dtype=float)
    color = getattr(style, color_attr)

    ax.plot(x, y, lw=style.line_lw, color=color)
    ax.fill_between(x, y, 0.0, alpha=style.fill_alpha, color=color)
    ax.axhline(0.0, linewidth=1.0, color="black")

    ax.set_xlim(float(x[0]), float(x[-1]))
    ymax = float(np.max(np.abs(y))) if y.size else 0.0
    ymax = ymax if ymax > 0 else 1.0
    ax.set_ylim(-ymax * style.pad, ymax * style.pad)

    if style.annotate_extrema:
        _annotate_extrema(ax, x, y, color)

    ax.set_ylabel(ylabel)
    ax.set_xlabel("x [m]")
    ax.set_title(title)
    ax.grid(True, alpha=0.25)


def render_shear(ax, result: BeamResult, style: DiagramStyle = DiagramStyle()):
    render_diagram(ax, result, "SFD", style)


def render_moment(ax, result: BeamResult, style: DiagramStyle = DiagramStyle()):
    render_diagram(ax, result, "BMD", style)


def render_axial(ax, result: BeamResult, style: DiagramStyle = DiagramStyle()):
    render_diagram(ax, result, "AFD", style)


def save_figures(
    result: BeamResult,
    out_dir: str,
    model: Optional[BeamModel] = None,
    dpi: int = 120,
) -> Dict[str, str]:
    """
    Exporta PNGs (sin depender de pyplot / backend interactivo).
    Devuelve {clave: path} con claves 'beam' (si hay modelo), 'sfd', 'bmd', 'afd'.
    """
    os.makedirs(out_dir, exist_ok=True)
    out: Dict[str, str] = {}

    if model is not None:
        fig = Figure(figsize=(9, 3.2))
        render_beam(fig.add_subplot(111), model, RenderStyle())
        fig.tight_layout()
        path = os.path.join(out_dir, "beam.png")
        fig.savefig(path, dpi=dpi)
        out["beam"] = path

    for kind in DIAGRAM_KINDS:
        fig = Figure(figsize=(9, 3.2))
        render_diagram(fig.add_subplot(111), result, kind)
        fig.tight_layout()
        path = os.path.join(out_dir, f"{kind.lower()}.png")
        fig.savefig(path, dpi=dpi)
        out[kind.lower()] = path

    return out
