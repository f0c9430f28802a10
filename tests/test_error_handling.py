"""
错误处理测试
Error Handling Tests
"""
import logging

from guess_phrase.utils.error_handler import ErrorHandler
from guess_phrase.utils.exceptions import (
    ConfigurationException, DeviceException, GameException, PermissionDenied,
    SensorUnavailable, SettingsException, ValidationError
)
from guess_phrase.utils.logger import get_log_level, set_global_level, setup_logger


def test_exception_hierarchy():
    assert issubclass(ValidationError, GameException)
    assert issubclass(SensorUnavailable, DeviceException)
    assert issubclass(PermissionDenied, DeviceException)
    assert SensorUnavailable("no beta", field="beta").device_type == "orientation_sensor"
    assert PermissionDenied("denied").device_type == "motion_permission"


def test_known_errors_are_handled():
    handler = ErrorHandler()
    assert handler.handle(ValidationError("empty", field="deck"), "start")
    assert handler.handle(PermissionDenied("denied"))
    assert handler.handle(SettingsException("disk full", path="/tmp/x"))
    assert handler.handle(ConfigurationException("bad", config_key="game"))
    assert not handler.handle(RuntimeError("unexpected"))


def test_subclass_handler_wins():
    handler = ErrorHandler()
    seen = []
    handler.register_handler(SensorUnavailable, lambda exc, ctx: seen.append((exc.field, ctx)))
    assert handler.handle(SensorUnavailable("missing", field="beta"), "tilt")
    assert seen == [("beta", "tilt")]


def test_failing_handler_reports_false():
    handler = ErrorHandler()

    def broken(exc, ctx):
        raise RuntimeError("handler failed")

    handler.register_handler(GameException, broken)
    assert not handler.handle(GameException("oops"))


def test_logger_helpers():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("loud") == logging.INFO

    logger = setup_logger("GTP.TestLogger")
    assert setup_logger("GTP.TestLogger") is logger
    assert len(logger.handlers) == 1

    set_global_level("WARNING")
    assert logger.level == logging.WARNING
    set_global_level("INFO")
