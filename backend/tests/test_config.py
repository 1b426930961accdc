import logging
from contextlib import contextmanager

from app.core.config import Settings
from app.core.logging import setup_logging


def test_cors_origins_accept_comma_separated_and_json():
    assert Settings(cors_origins="http://a.test, http://b.test").cors_origins == ["http://a.test", "http://b.test"]
    assert Settings(cors_origins='["http://c.test"]').cors_origins == ["http://c.test"]


def test_log_level_is_normalized():
    assert Settings(log_level=" warning ").log_level == "WARNING"
    assert Settings(log_level="").log_level is None


@contextmanager
def bare_root_logger():
    # pytest attaches its capture handlers to the root logger for each test phase.
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        yield root
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_levels():
    with bare_root_logger() as root:
        setup_logging(environment="production")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

        setup_logging(environment="development")
        assert root.level == logging.INFO
        assert len(root.handlers) == 1


def test_setup_logging_explicit_level_wins():
    with bare_root_logger() as root:
        setup_logging(environment="development", level="WARNING")
        assert root.level == logging.WARNING
