"""Unit tests for session logger setup."""

import pytest
from loguru import logger

from atscope import __version__
from atscope.contexts.targeting.logger import _log_debug, setup_targeting_logger


@pytest.mark.unit
def test_session_log_has_header_and_prefixed_messages(tmp_path):
    log_file = setup_targeting_logger(tmp_path / "session", catalog_path="custom.yaml", console=False)
    _log_debug("3 keyword(s)")
    logger.remove()

    assert log_file == tmp_path / "session" / "target.log"
    text = log_file.read_text(encoding="utf-8")
    assert f"atscope: {__version__}" in text
    assert "Keyword catalog: custom.yaml" in text
    assert "[target] 3 keyword(s)" in text


@pytest.mark.unit
def test_file_only_logging_keeps_stderr_clean(tmp_path, capsys):
    setup_targeting_logger(tmp_path, console=False)
    logger.info("not on the console")
    logger.remove()

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""
