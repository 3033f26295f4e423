import logging

from connect_four import config
from connect_four.debug import LOGGER_NAME, TRACE, DebugLevel, DebugManager, debug


def test_levels():
    debug.configure(level=DebugLevel.INFO)
    assert debug.is_enabled_for(DebugLevel.WARNING)
    assert debug.is_enabled_for(DebugLevel.INFO)
    assert not debug.is_enabled_for(DebugLevel.DEBUG)
    assert debug.logger.level == logging.INFO

    debug.configure(level=DebugLevel.TRACE)
    assert debug.is_enabled_for(DebugLevel.TRACE)
    assert debug.logger.level == TRACE

    debug.configure(level=DebugLevel.NONE)
    assert not debug.is_enabled_for(DebugLevel.ERROR)


def test_component_filter():
    debug.configure(level=DebugLevel.DEBUG, components=["search"])
    assert debug.is_enabled_for(DebugLevel.DEBUG, "search")
    assert not debug.is_enabled_for(DebugLevel.DEBUG, "wire")
    assert debug.is_enabled_for(DebugLevel.DEBUG)


def test_set_from_string():
    assert debug.set_from_string(" Debug ")
    assert debug.level is DebugLevel.DEBUG
    assert not debug.set_from_string("loud")
    assert debug.level is DebugLevel.DEBUG


def test_log_file(tmp_path):
    path = tmp_path / "engine.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(path))
    try:
        debug.info("chose column 3", "search")
        debug.debug("not written", "search")
    finally:
        debug.configure(log_file="")

    text = path.read_text()
    assert "INFO - [search] chose column 3" in text
    assert "not written" not in text
    assert not any(isinstance(h, logging.FileHandler) for h in debug.logger.handlers)


def test_configure_from_env(tmp_path):
    path = tmp_path / "env.log"
    debug.configure_from_env({"CONNECT_FOUR_DEBUG_LEVEL": "trace",
                              "CONNECT_FOUR_LOG_FILE": str(path)})
    try:
        assert debug.level is DebugLevel.TRACE
        debug.trace("deep", "state")
    finally:
        debug.configure(log_file="")
    assert "TRACE - [state] deep" in path.read_text()


def test_one_console_handler_per_logger():
    DebugManager()
    DebugManager()
    logger = logging.getLogger(LOGGER_NAME)
    consoles = [h for h in logger.handlers if getattr(h, "_connect_four_console", False)]
    assert len(consoles) == 1
    assert logger.propagate is False


def test_depth_from_env(monkeypatch):
    monkeypatch.delenv("CONNECT_FOUR_TEST_DEPTH", raising=False)
    assert config._depth_from_env("CONNECT_FOUR_TEST_DEPTH", 3) == 3

    monkeypatch.setenv("CONNECT_FOUR_TEST_DEPTH", "7")
    assert config._depth_from_env("CONNECT_FOUR_TEST_DEPTH", 3) == 7

    for bad in ("deep", "0", "-2"):
        monkeypatch.setenv("CONNECT_FOUR_TEST_DEPTH", bad)
        assert config._depth_from_env("CONNECT_FOUR_TEST_DEPTH", 3) == 3
