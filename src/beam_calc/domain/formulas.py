from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from beam_calc.domain.loads import DistributedLoad, MomentLoad, PointLoad, visible_loads
from beam_calc.domain.supports import SupportClass, SupportPair, classify_supports


@dataclass(frozen=True)
class FormulaDescription:
    name: str
    formula: str
    description: str
    variables: Tuple[Tuple[str, str], ...]  # (símbolo, significado)


# Tabla estática de referencia (solo descriptiva: no interviene en el cálculo)
BEAM_FORMULAS: Dict[str, FormulaDescription] = {
    "equilibrium": FormulaDescription(
        name="Ecuaciones de equilibrio",
        formula="ΣF_y = 0, ΣF_x = 0, ΣM = 0",
        description="El equilibrio estático exige que la suma de fuerzas y de momentos sea nula.",
        variables=(
            ("ΣF_y", "Suma de fuerzas verticales"),
            ("ΣF_x", "Suma de fuerzas horizontales"),
            ("ΣM", "Suma de momentos respecto a un punto"),
        ),
    ),
    "shearForce": FormulaDescription(
        name="Esfuerzo de corte",
        formula="V(x) = ∫w(x)dx",
        description="El corte es la integral de la función de carga distribuida.",
        variables=(
            ("V(x)", "Corte en la posición x"),
            ("w(x)", "Función de carga distribuida"),
        ),
    ),
    "bendingMoment": FormulaDescription(
        name="Momento flector",
        formula="M(x) = ∫V(x)dx",
        description="El momento flector es la integral del corte.",
        variables=(
            ("M(x)", "Momento flector en la posición x"),
            ("V(x)", "Corte en la posición x"),
        ),
    ),
    "pointLoad": FormulaDescription(
        name="Efecto de carga puntual",
        formula="V(x) = P · H(x - a)",
        description="Una carga puntual P en a produce un salto en el diagrama de corte.",
        variables=(
            ("P", "Magnitud de la carga puntual"),
            ("a", "Posición de la carga puntual"),
            ("H(x - a)", "Función escalón de Heaviside (0 si x < a, 1 si x ≥ a)"),
        ),
    ),
    "distributedLoad": FormulaDescription(
        name="Efecto de carga distribuida",
        formula="V(x) = ∫_a^b w(x) dx",
        description="Una carga distribuida w(x) entre a y b modifica el corte en forma gradual.",
        variables=(
            ("w(x)", "Función de carga distribuida"),
            ("a", "Inicio de la carga distribuida"),
            ("b", "Fin de la carga distribuida"),
        ),
    ),
    "momentLoad": FormulaDescription(
        name="Efecto de momento puntual",
        formula="M(x) = M₀ · H(x - a)",
        description="Un momento concentrado M₀ en a produce un salto en el diagrama de momento.",
        variables=(
            ("M₀", "Magnitud del momento aplicado"),
            ("a", "Posición del momento aplicado"),
            ("H(x - a)", "Función escalón de Heaviside (0 si x < a, 1 si x ≥ a)"),
        ),
    ),
    "cantilever": FormulaDescription(
        name="Viga en voladizo",
        formula="R_A = P, M_A = P·L",
        description="Voladizo empotrado en A con una carga puntual P en el extremo libre.",
        variables=(
            ("R_A", "Reacción en el empotramiento A"),
            ("M_A", "Momento de empotramiento en A"),
            ("P", "Carga aplicada"),
            ("L", "Distancia del apoyo a la carga"),
        ),
    ),
    "simpleBeam": FormulaDescription(
        name="Viga simplemente apoyada (articulado-móvil)",
        formula="R_A = P·(L-a)/L, R_B = P·a/L",
        description="Viga con apoyos en A y B y una carga puntual P a distancia a de A.",
        variables=(
            ("R_A", "Reacción en el apoyo A"),
            ("R_B", "Reacción en el apoyo B"),
            ("P", "Carga aplicada"),
            ("a", "Distancia de A a la carga P"),
            ("L", "Longitud total de la viga"),
        ),
    ),
    "fixedBeam": FormulaDescription(
        name="Viga biempotrada",
        formula="M_A = P·a·b²/L², M_B = P·a²·b/L²",
        description="Viga empotrada en ambos extremos con una carga puntual P a distancia a del extremo izquierdo.",
        variables=(
            ("M_A", "Momento en el apoyo izquierdo"),
            ("M_B", "Momento en el apoyo derecho"),
            ("P", "Carga aplicada"),
            ("a", "Distancia del apoyo izquierdo a la carga"),
            ("b", "Distancia de la carga al apoyo derecho (L-a)"),
            ("L", "Longitud total de la viga"),
        ),
    ),
    "axialForce": FormulaDescription(
        name="Esfuerzo axial",
        formula="N(x) = ∫q_x(x)dx",
        description="El esfuerzo axial es la integral de la carga horizontal.",
        variables=(
            ("N(x)", "Esfuerzo axial en la posición x"),
            ("q_x(x)", "Función de carga horizontal"),
        ),
    ),
}


def get_relevant_formulas(supports: SupportPair, loads: Iterable) -> List[FormulaDescription]:
    """
    Selección por tipo de apoyo y tipos de carga presentes (solo cargas visibles).
    Búsqueda pura: no depende de los resultados calculados.
    """
    loads = visible_loads(loads)
    out: List[FormulaDescription] = [
        BEAM_FORMULAS["equilibrium"],
        BEAM_FORMULAS["shearForce"],
        BEAM_FORMULAS["bendingMoment"],
    ]

    cls = classify_supports(supports)
    if supports.is_cantilever:
        out.append(BEAM_FORMULAS["cantilever"])
    elif cls is SupportClass.SIMPLE:
        out.append(BEAM_FORMULAS["simpleBeam"])
    elif cls is SupportClass.FIXED_FIXED:
        out.append(BEAM_FORMULAS["fixedBeam"])

    if any(isinstance(ld, PointLoad) for ld in loads):
        out.append(BEAM_FORMULAS["pointLoad"])
    if any(isinstance(ld, DistributedLoad) for ld in loads):
        out.append(BEAM_FORMULAS["distributedLoad"])
    if any(isinstance(ld, MomentLoad) for ld in loads):
        out.append(BEAM_FORMULAS["momentLoad"])

    # componentes horizontales => axial. Solo ángulos positivos agregan la fórmula;
    # uno negativo también genera axial en el diagrama pero no la suma aquí.
    if any(isinstance(ld, PointLoad) and ld.angle_deg and ld.angle_deg > 0 for ld in loads):
        out.append(BEAM_FORMULAS["axialForce"])

    return out
