import logging

from beam_calc.services.logging_setup import setup_logging


def test_setup_logging_writes_file_and_is_idempotent(tmp_path):
    logger = logging.getLogger("beam_calc")
    previous = list(logger.handlers)
    for h in previous:
        logger.removeHandler(h)

    try:
        log_dir = tmp_path / "logs"
        lg = setup_logging(log_dir=str(log_dir), log_name="prueba.log")
        assert lg is logger
        n_handlers = len(lg.handlers)
        assert n_handlers == 2

        # segunda llamada: no duplica handlers
        setup_logging(log_dir=str(log_dir), log_name="prueba.log")
        assert len(lg.handlers) == n_handlers

        logging.getLogger("beam_calc.engine.pipeline").info("mensaje de prueba")
        for h in lg.handlers:
            h.flush()

        contenido = (log_dir / "prueba.log").read_text(encoding="utf-8")
        assert "Logging inicializado" in contenido
        assert "mensaje de prueba" in contenido
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
        for h in previous:
            logger.addHandler(h)
