import logging

import pytest

from lazyview.log import create_view_logger
from lazyview.log import logged
from lazyview.log import null_logger
from lazyview.log import PrependPathAdapter


def test_view_logger_defaults_to_null_logger():
    logger = create_view_logger("LoginView")
    assert isinstance(logger, PrependPathAdapter)
    assert logger.logger is null_logger
    assert logger.view_path == "LoginView"


def test_child_and_item_paths():
    base = logging.getLogger("lazyview_paths")
    rows = create_view_logger("LoginView", base).child("rows")
    assert rows.logger is base
    assert rows.view_path == "LoginView/rows"
    assert rows.item(2).view_path == "LoginView/rows[2]"


def test_view_logger_reuses_underlying_logger():
    base = logging.getLogger("lazyview_paths")
    adapter = create_view_logger("Old", base)
    assert create_view_logger("New", adapter).logger is base


def test_path_is_prepended(caplog):
    logger = create_view_logger("V", logging.getLogger("lazyview_prepend")).child("e")
    with caplog.at_level(logging.INFO, logger="lazyview_prepend"):
        logger.info("hello %s", "there")
    assert "[V/e]: hello there" in caplog.text


def test_percent_in_path_is_escaped():
    msg, _ = create_view_logger("100%").process("done", {})
    assert msg == "[100%%]: done"


class Thing:
    def __init__(self):
        self.logger = create_view_logger("Thing", logging.getLogger("lazyview_logged"))

    @logged
    def add(self, a, b=0):
        return a + b

    @logged
    def explode(self):
        raise ValueError("boom")


def test_logged_call(caplog):
    with caplog.at_level(logging.DEBUG, logger="lazyview_logged"):
        assert Thing().add(1, b=2) == 3
    assert "[Thing]: add(1) started" in caplog.text
    assert "[Thing]: add(1) took" in caplog.text


def test_logged_reraises(caplog):
    with caplog.at_level(logging.DEBUG, logger="lazyview_logged"):
        with pytest.raises(ValueError):
            Thing().explode()
    failure = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert "explode() failed after" in failure[0].getMessage()
    assert failure[0].exc_info[0] is ValueError


def test_logged_keeps_name():
    assert Thing.add.__name__ == "add"
    assert Thing.add.__wrapped__.__name__ == "add"
