from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from matplotlib.patches import FancyArrowPatch, PathPatch, Polygon, Circle, Rectangle
from matplotlib.path import Path
from matplotlib.transforms import IdentityTransform

from beam_calc.domain.loads import DistributedLoad, MomentLoad, PointLoad
from beam_calc.domain.model import BeamModel
from beam_calc.domain.supports import SupportEnd
from beam_calc.view.style import RenderStyle


# -------------------------
# Helpers generales
# -------------------------
def _alpha(load, style: RenderStyle) -> float:
    return 1.0 if load.visible is not False else float(style.hidden_alpha)


def _draw_arrow(ax, x0: float, y0: float, x1: float, y1: float, style: RenderStyle, alpha: float = 1.0):
    ax.annotate(
        "",
        xy=(x1, y1),
        xytext=(x0, y0),
        arrowprops=dict(
            arrowstyle="-|>",
            lw=style.arrow_lw,
            mutation_scale=style.arrow_scale,
            color="red",
            alpha=alpha,
            shrinkA=0,
            shrinkB=0,
        ),
    )


# -------------------------
# Apoyos
# -------------------------
def _draw_support(ax, x: float, kind: SupportEnd, side: str, size: float):
    """side: 'left' / 'right' (el empotramiento se dibuja hacia afuera de la viga)."""
    if kind is SupportEnd.FREE:
        return

    if kind is SupportEnd.FIXED:
        out = -1.0 if side == "left" else 1.0
        ax.plot([x, x], [-size, size], color="black", lw=2.0)
        for y in np.linspace(-size, size, 6):
            ax.plot([x, x + out * 0.4 * size], [y, y - 0.4 * size], color="black", lw=0.8)
        return

    # articulado / móvil: triángulo bajo la viga
    tri = Polygon(
        [(x, 0.0), (x - 0.6 * size, -size), (x + 0.6 * size, -size)],
        closed=True,
        facecolor="white",
        edgecolor="black",
        lw=1.2,
        zorder=5,
    )
    ax.add_patch(tri)

    if kind is SupportEnd.ROLLER:
        r = 0.18 * size
        for dx in (-0.3 * size, 0.3 * size):
            ax.add_patch(Circle((x + dx, -size - r), r, facecolor="white", edgecolor="black", lw=1.0, zorder=5))
        ax.plot([x - 0.8 * size, x + 0.8 * size], [-size - 2 * r, -size - 2 * r], color="black", lw=1.0)
    else:
        ax.plot([x - 0.8 * size, x + 0.8 * size], [-size, -size], color="black", lw=1.0)


# -------------------------
# Momento circular (en pixeles)
# -------------------------
def _draw_moment_px(ax, x: float, M: float, r_px: float, style: RenderStyle, alpha: float = 1.0):
    """
    Arco de momento SIEMPRE circular (en pixeles), radio fijo r_px.
    IMPORTANTE: llamar SOLO después de set_xlim/set_ylim.
    """
    cx, cy = ax.transData.transform((x, 0.0))

    theta1, theta2 = 30.0, 330.0
    n = 120
    ang = np.deg2rad(np.linspace(theta1, theta2, n))
    verts = np.column_stack([cx + r_px * np.cos(ang), cy + r_px * np.sin(ang)])
    codes = np.full(n, Path.LINETO, dtype=int)
    codes[0] = Path.MOVETO

    arc = PathPatch(
        Path(verts, codes),
        fill=False,
        lw=style.moment_arc_lw,
        edgecolor="red",
        alpha=alpha,
        transform=IdentityTransform(),
        zorder=10,
    )
    ax.add_patch(arc)

    delta = 18.0
    if M >= 0:
        a0, a1 = np.deg2rad(theta2 - delta), np.deg2rad(theta2)
    else:
        a0, a1 = np.deg2rad(theta1 + delta), np.deg2rad(theta1)

    head = FancyArrowPatch(
        posA=(cx + r_px * np.cos(a0), cy + r_px * np.sin(a0)),
        posB=(cx + r_px * np.cos(a1), cy + r_px * np.sin(a1)),
        arrowstyle="-|>",
        mutation_scale=style.moment_arrow_scale,
        lw=style.moment_arc_lw,
        color="red",
        alpha=alpha,
        shrinkA=0,
        shrinkB=0,
        transform=IdentityTransform(),
        zorder=11,
    )
    ax.add_patch(head)

    lx, ly = ax.transData.inverted().transform((cx - 0.9 * r_px, cy + 1.1 * r_px))
    return float(lx), float(ly)


# -------------------------
# Render principal
# -------------------------
def render_beam(ax, model: BeamModel, style: RenderStyle = RenderStyle()):
    """
    Viga, apoyos y cargas (todas, las ocultas atenuadas).
    Convención de dibujo: carga + hacia abajo => flecha desde arriba.
    """
    L = float(model.beam_length)
    ax.clear()

    arrow_h = (style.arrow_height_pctL / 100.0) * L
    dist_h = (style.dist_height_pctL / 100.0) * L
    sup = (style.support_size_pctL / 100.0) * L
    fu, lu = style.force_unit, style.length_unit

    ax.plot([0, L], [0, 0], linewidth=style.beam_lw, color="blue", zorder=4)
    _draw_support(ax, 0.0, model.supports.left, "left", sup)
    _draw_support(ax, L, model.supports.right, "right", sup)

    moments: List[Tuple[MomentLoad, float]] = []

    for ld in model.loads:
        alpha = _alpha(ld, style)

        if isinstance(ld, DistributedLoad):
            x1, x2 = float(ld.position), float(ld.end)
            sgn = 1.0 if ld.magnitude >= 0 else -1.0
            h = sgn * dist_h

            ax.add_patch(Rectangle(
                (x1, min(0.0, h)), x2 - x1, abs(h),
                facecolor="red",
                alpha=style.dist_rect_alpha * alpha,
                edgecolor="red",
                linewidth=style.dist_rect_lw,
            ))
            n_lines = max(3, int(abs(x2 - x1) / (max(L, 1e-9) / 30.0)))
            for xi in np.linspace(x1, x2, n_lines):
                _draw_arrow(ax, float(xi), h, float(xi), 0.0, style, alpha)

            ax.text(
                0.5 * (x1 + x2), h + sgn * 0.03 * L,
                f"w={ld.magnitude:g} {fu}/{lu}",
                ha="center", va="bottom" if sgn > 0 else "top",
                fontsize=style.font_size, color="red", alpha=alpha,
            )

        elif isinstance(ld, PointLoad):
            x = float(ld.position)
            theta = math.radians(float(ld.angle_deg or 0.0))
            sgn = 1.0 if ld.magnitude >= 0 else -1.0
            # dirección de la fuerza: (sin θ, -cos θ) para carga + (abajo, girando a la derecha)
            dx, dy = math.sin(theta) * sgn, -math.cos(theta) * sgn
            x0, y0 = x - dx * arrow_h, -dy * arrow_h
            _draw_arrow(ax, x0, y0, x, 0.0, style, alpha)

            label = f"P={ld.magnitude:g} {fu}"
            if ld.angle_deg:
                label += f" @ {ld.angle_deg:g}°"
            ax.text(
                x0, y0 + (0.02 * L if y0 >= 0 else -0.02 * L), label,
                ha="center", va="bottom" if y0 >= 0 else "top",
                fontsize=style.font_size, color="red", alpha=alpha,
            )

        elif isinstance(ld, MomentLoad):
            moments.append((ld, alpha))

    max_y = 1.9 * max(arrow_h, dist_h, sup)
    ax.set_xlim(-0.08 * L, 1.08 * L)
    ax.set_ylim(-max_y, max_y)
    ax.set_aspect("auto", adjustable="box")

    # momentos: en px, después de fijar los límites
    r_px = float(max(14.0, 12.0 * float(style.moment_radius_pctL) / 4.0))
    for ld, alpha in moments:
        lx, ly = _draw_moment_px(ax, float(ld.position), float(ld.magnitude), r_px, style, alpha)
        ax.text(
            lx, ly, f"M={ld.magnitude:g} {fu}·{lu}",
            ha="left", va="bottom", fontsize=style.font_size, color="red", alpha=alpha,
        )

    ax.set_xlabel(f"x [{lu}]")
    ax.set_yticks([])
    ax.set_title(
        f"Viga L={L:g} {lu} | apoyos: {model.supports.left.value} / {model.supports.right.value}"
    )
    ax.grid(True, axis="x", alpha=0.25)
