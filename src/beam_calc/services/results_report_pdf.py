# path: src/beam_calc/services/results_report_pdf.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from beam_calc.domain.formulas import get_relevant_formulas
from beam_calc.domain.loads import DistributedLoad, MomentLoad, PointLoad
from beam_calc.domain.model import BeamModel
from beam_calc.domain.results import AnalysisOutcome
from beam_calc.engine.pipeline import outcome_notes
from beam_calc.engine.summary import summarize_result

# Nota: este módulo NO depende de matplotlib. Acepta paths a imágenes ya generadas
# (viga, SFD, BMD, AFD) y el resultado ya calculado por el motor.


@dataclass(frozen=True)
class ReportHeader:
    titulo: str = "Memoria de cálculo de viga"
    cliente_proyecto: str = ""
    autor: str = ""
    fecha: Optional[datetime] = None
    revision: str = "A"


def export_results_pdf(
    out_pdf_path: str,
    header: ReportHeader,
    model: BeamModel,
    outcome: AnalysisOutcome,
    imagenes: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera la memoria de cálculo en PDF (A4): datos, reacciones, máximos, observaciones,
    fórmulas aplicadas y figuras.

    Si el análisis no fue 'ok' se documenta el error y se omiten reacciones y figuras.
    """
    imgs = _normalize_images_dict(imagenes)

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))
    styles.add(ParagraphStyle(name="MonoSmall", parent=styles["BodyText"], fontName="Courier", fontSize=8, leading=10))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.titulo,
    )

    story: List[object] = []

    # ----------------- Portada -----------------
    story.append(Paragraph(escape(header.titulo), styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    fecha = header.fecha or datetime.now()
    meta_rows = [
        ["Proyecto / Cliente:", header.cliente_proyecto or "-"],
        ["Autor:", header.autor or "-"],
        ["Fecha:", fecha.strftime("%Y-%m-%d %H:%M")],
        ["Revisión:", header.revision],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    # ----------------- Supuestos -----------------
    story.append(Paragraph("Supuestos", styles["Heading2"]))
    base = [
        "Viga recta de un solo tramo, análisis estático lineal.",
        "Convención: cargas puntuales y distribuidas positivas hacia abajo; componente horizontal positiva hacia la derecha.",
        "Puntuales inclinadas: vertical = P·cos(θ), horizontal = P·sin(θ), con θ = 0 vertical hacia abajo.",
        "Equilibrio: ΣFy = 0, ΣFx = 0 y ΣM = 0 respecto al extremo izquierdo.",
        "Biempotrada: reparto simplificado mitad/mitad (no es la solución elástica exacta).",
        "Diagramas: 101 estaciones; M(x) se obtiene integrando V(x) por trapecios.",
    ]
    story.extend(_bullets(base, styles))
    story.append(Spacer(1, 3 * mm))

    # ----------------- Datos -----------------
    story.append(Paragraph("Datos del caso", styles["Heading2"]))
    dims = [
        ["L viga [m]", _f(model.beam_length, 3)],
        ["Apoyo izquierdo", model.supports.left.value],
        ["Apoyo derecho", model.supports.right.value],
    ]
    t = Table(dims, colWidths=[55 * mm, 125 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    story.append(Paragraph("Cargas aplicadas", styles["Heading3"]))
    crows = [["#", "Tipo", "Detalle", "Activa"]]
    for i, ld in enumerate(model.loads, start=1):
        crows.append([str(i), _load_kind(ld), _load_detail(ld), "sí" if ld.visible is not False else "no"])
    if len(crows) == 1:
        crows.append(["-", "-", "Sin cargas", "-"])
    t = Table(crows, colWidths=[10 * mm, 30 * mm, 120 * mm, 20 * mm])
    t.setStyle(_grid_table_style(header_rows=1))
    story.append(t)
    story.append(Spacer(1, 4 * mm))

    # ----------------- Resultados -----------------
    story.append(Paragraph("Resultados", styles["Heading2"]))

    if outcome.ok and outcome.result is not None:
        r = outcome.result.reactions
        rrows = [
            ["Apoyo", "Vertical [kN]", "Horizontal [kN]", "Momento [kN·m]"],
            ["Izquierdo", _f(r.left.vertical, 3), _f(r.left.horizontal, 3), _f(r.left.moment, 3)],
            ["Derecho", _f(r.right.vertical, 3), _f(r.right.horizontal, 3), _f(r.right.moment, 3)],
        ]
        t = Table(rrows, colWidths=[40 * mm, 45 * mm, 45 * mm, 50 * mm])
        t.setStyle(_grid_table_style(header_rows=1))
        story.append(t)
        story.append(Spacer(1, 3 * mm))

        s = summarize_result(outcome.result)
        mrows = [
            ["Esfuerzo", "Máximo |valor|", "x [m]"],
            ["Corte V [kN]", _f(s.max_shear.value, 3), _f(s.max_shear.position, 3)],
            ["Momento M [kN·m]", _f(s.max_moment.value, 3), _f(s.max_moment.position, 3)],
            ["Axial N [kN]", _f(s.max_axial.value, 3), _f(s.max_axial.position, 3)],
        ]
        t = Table(mrows, colWidths=[60 * mm, 60 * mm, 60 * mm])
        t.setStyle(_grid_table_style(header_rows=1))
        story.append(t)
        story.append(Spacer(1, 3 * mm))

    story.append(Paragraph("Observaciones", styles["Heading3"]))
    story.extend(_bullets(outcome_notes(outcome), styles))
    story.append(Spacer(1, 3 * mm))

    # ----------------- Fórmulas -----------------
    story.append(Paragraph("Fórmulas aplicadas", styles["Heading2"]))
    for fd in get_relevant_formulas(model.supports, model.loads):
        story.append(Paragraph(escape(fd.name), styles["Heading3"]))
        story.extend(_mono_block([fd.formula], styles))
        story.append(Paragraph(escape(fd.description), styles["Small"]))
        for sym, meaning in fd.variables:
            story.append(Paragraph(escape(f"{sym}: {meaning}"), styles["Small"]))
        story.append(Spacer(1, 2 * mm))

    # ----------------- Figuras -----------------
    if outcome.ok and imgs:
        story.append(PageBreak())
        story.append(Paragraph("Figuras", styles["Heading2"]))
        _append_figure(story, styles, "beam", "Viga, apoyos y cargas", imgs, max_w=180 * mm, max_h=70 * mm)
        _append_figure(story, styles, "sfd", "Diagrama de corte V(x)", imgs, max_w=180 * mm, max_h=70 * mm)
        _append_figure(story, styles, "bmd", "Diagrama de momento M(x)", imgs, max_w=180 * mm, max_h=70 * mm)
        _append_figure(story, styles, "afd", "Diagrama de axial N(x)", imgs, max_w=180 * mm, max_h=70 * mm)

    doc.build(story)


# ----------------- helpers -----------------

def _load_kind(ld) -> str:
    if isinstance(ld, PointLoad):
        return "Puntual"
    if isinstance(ld, DistributedLoad):
        return "Distribuida"
    if isinstance(ld, MomentLoad):
        return "Momento"
    return type(ld).__name__


def _load_detail(ld) -> str:
    if isinstance(ld, PointLoad):
        s = f"x={_f(ld.position, 3)} m; P={_f(ld.magnitude, 3)} kN"
        if ld.angle_deg:
            s += f"; θ={_f(ld.angle_deg, 2)}°"
        return s
    if isinstance(ld, DistributedLoad):
        return f"x={_f(ld.position, 3)} m; l={_f(ld.length, 3)} m; w={_f(ld.magnitude, 3)} kN/m"
    return f"x={_f(ld.position, 3)} m; M={_f(ld.magnitude, 3)} kN·m"


def _normalize_images_dict(imagenes: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not imagenes:
        return {}
    out: Dict[str, str] = {}
    for k, v in imagenes.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if not kk or not vv:
            continue
        out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    story.append(Paragraph(title, styles["Heading3"]))
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        # Dejar evidencia en el PDF si no se insertó la imagen
        story.append(Paragraph(f"(Sin imagen: '{key}' no disponible o no existe en disco)", styles["Small"]))
    story.append(Spacer(1, 3 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def _bullets(items: List[str], styles):
    out: List[object] = []
    for it in items:
        out.append(Paragraph(f"• {escape(it)}", styles["BodyText"]))
        out.append(Spacer(1, 1.2 * mm))
    return out


def _mono_block(lines: List[str], styles):
    out: List[object] = []
    for ln in lines:
        out.append(Paragraph(escape(ln).replace(" ", "&nbsp;"), styles["MonoSmall"]))
    return out


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _grid_table_style(header_rows: int = 1, font_size: int = 9):
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
