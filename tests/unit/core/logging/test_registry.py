"""
Tests for the global logger registry.
"""

from http_logger.core.logging import registry as registry_module
from http_logger.core.logging.config import LogLevel
from http_logger.core.logging.logger import Logger
from http_logger.core.logging.registry import (
    LoggerRegistry,
    get_logger,
    get_registry,
    initialize_logger,
    reset_logger,
    set_logger,
)


class TestLoggerRegistry:
    """Tests for a standalone LoggerRegistry."""

    def setup_method(self):
        self.registry = LoggerRegistry()

    def test_starts_empty(self):
        assert self.registry.is_initialized is False

    def test_get_creates_default(self):
        logger = self.registry.get()

        assert isinstance(logger, Logger)
        assert logger.level == LogLevel.INFO
        assert self.registry.get() is logger

    def test_initialize_replaces(self):
        first = self.registry.initialize(level="debug")
        second = self.registry.initialize({"level": "error"})

        assert first is not second
        assert self.registry.get() is second
        assert second.level == LogLevel.ERROR

    def test_initialize_does_not_merge(self):
        self.registry.initialize(level="debug", format="{message}")
        logger = self.registry.initialize(level="warn")

        assert logger.options.format != "{message}"

    def test_replaced_logger_left_open(self, capsys):
        first = self.registry.initialize(format="{message}", color=False)
        self.registry.initialize()

        first.info("still usable")

        assert capsys.readouterr().out == "still usable\n"

    def test_set_and_reset(self):
        logger = Logger(console=False)

        assert self.registry.set(logger) is logger
        assert self.registry.get() is logger

        self.registry.reset()
        assert self.registry.is_initialized is False


class TestGlobalFunctions:
    """Module-level helpers operate on the default registry."""

    def test_get_registry_is_default(self):
        assert get_registry() is registry_module._default_registry

    def test_get_logger_lazily_creates(self):
        assert get_registry().is_initialized is False

        logger = get_logger()

        assert get_logger() is logger
        assert get_registry().is_initialized is True

    def test_initialize_logger(self):
        logger = initialize_logger(level="debug")

        assert get_logger() is logger
        assert logger.level == LogLevel.DEBUG

    def test_set_logger(self):
        logger = Logger(console=False)
        set_logger(logger)

        assert get_logger() is logger

    def test_reset_logger(self):
        first = get_logger()
        reset_logger()

        assert get_logger() is not first

    def test_shortcuts_delegate(self, capsys):
        initialize_logger(level="debug", format="{level}|{message}", color=False)

        registry_module.debug("d")
        registry_module.info("i")
        registry_module.warn("w")
        registry_module.error("e", status_code=500)

        assert capsys.readouterr().out.splitlines() == ["DEBUG|d", "INFO |i", "WARN |w", "ERROR|e"]

    def test_shortcuts_respect_level(self, capsys):
        initialize_logger(level="error", format="{message}", color=False)

        registry_module.info("hidden")

        assert capsys.readouterr().out == ""
