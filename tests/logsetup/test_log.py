import logging
from pathlib import Path

from patternlab.logging.log import init_logging


def test_init_logging_writes_run_file(tmp_path: Path):
    logger, run_id, log_path = init_logging(base_dir=tmp_path, name="patternlab")

    logger.info("hello from test")
    for h in logger.handlers:
        h.flush()

    assert log_path.parent == tmp_path
    assert run_id in log_path.name
    text = log_path.read_text()
    assert "hello from test" in text
    assert f"run_id={run_id}" in text


def test_init_logging_replaces_handlers_and_honours_verbose(tmp_path: Path):
    init_logging(base_dir=tmp_path)
    logger, _, _ = init_logging(base_dir=tmp_path, verbose=True)

    assert len(logger.handlers) == 2
    assert logger.propagate is False
    console = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]
    assert console[0].level == logging.DEBUG
