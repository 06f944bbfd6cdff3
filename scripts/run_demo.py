# path: scripts/run_demo.py
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_calc.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

from beam_calc.domain.loads import PointLoad, DistributedLoad, MomentLoad
from beam_calc.domain.model import BeamModel
from beam_calc.engine.pipeline import analyze_model, outcome_notes
from beam_calc.engine.summary import summarize_result
from beam_calc.services.results_report_pdf import ReportHeader, export_results_pdf
from beam_calc.view.renderer_diagrams import save_figures


def main(out_dir: str = "out"):
    model = (
        BeamModel(beam_length=10.0)
        .with_supports("pinned", "roller")
        .add_load(PointLoad(position=4.0, magnitude=50.0))
        .add_load(PointLoad(position=7.0, magnitude=20.0, angle_deg=30.0))   # componente horizontal
        .add_load(DistributedLoad(position=0.0, length=5.0, magnitude=2.0))
        .add_load(MomentLoad(position=8.0, magnitude=15.0, visible=False))  # oculta: no entra al cálculo
    )

    outcome = analyze_model(model)
    for note in outcome_notes(outcome):
        logger.info(note)

    imgs = {}
    if outcome.ok:
        r = outcome.result.reactions
        logger.info("R izq: V=%.3f H=%.3f M=%.3f", r.left.vertical, r.left.horizontal, r.left.moment)
        logger.info("R der: V=%.3f H=%.3f M=%.3f", r.right.vertical, r.right.horizontal, r.right.moment)

        s = summarize_result(outcome.result)
        logger.info("Vmax=%.3f @ x=%.2f", s.max_shear.value, s.max_shear.position)
        logger.info("Mmax=%.3f @ x=%.2f", s.max_moment.value, s.max_moment.position)
        logger.info("Nmax=%.3f @ x=%.2f", s.max_axial.value, s.max_axial.position)

        imgs = save_figures(outcome.result, out_dir, model=model)

    pdf_path = os.path.join(out_dir, "memoria_viga.pdf")
    os.makedirs(out_dir, exist_ok=True)
    export_results_pdf(pdf_path, ReportHeader(titulo="Viga de ejemplo"), model, outcome, imagenes=imgs)
    logger.info("Memoria exportada: %s", pdf_path)


if __name__ == "__main__":
    main(*sys.argv[1:2])
