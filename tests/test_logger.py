import logging

from tienda.utils.logger import logger, resolve_level


def test_known_level_names():
    assert resolve_level("DEBUG") == logging.DEBUG
    assert resolve_level(" warning ") == logging.WARNING


def test_unknown_level_falls_back_to_info():
    assert resolve_level("verbose") == logging.INFO
    assert resolve_level("") == logging.INFO


def test_single_handler_with_project_format():
    assert logger.name == "tienda"
    assert len(logger.handlers) == 1
    assert "%(name)s" in logger.handlers[0].formatter._fmt
