import logging

from rich.logging import RichHandler

from entity_codegen.logging_config import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger("entity_codegen.utils").name == "entity_codegen.utils"
    assert get_logger("plugins.extra").name == "entity_codegen.plugins.extra"


def test_configure_logging_adds_one_handler():
    root = logging.getLogger(ROOT_LOGGER_NAME)

    configure_logging("debug")
    configure_logging(logging.INFO)

    handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
    assert root.level == logging.INFO


def test_records_reach_caplog(caplog):
    configure_logging(logging.DEBUG)

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        get_logger(__name__).debug("hello from tests")

    assert "hello from tests" in caplog.text
