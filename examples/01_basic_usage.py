"""
Basic Logger Usage Examples

Demonstrates leveled logging, record input, custom templates and file output.
"""

from http_logger import Logger, LoggerOptions, initialize_logger, info, warn


def plain_messages():
    """Plain string messages at every level."""
    print("\n=== Plain Messages ===")

    logger = Logger(level="debug")
    logger.debug("Loading configuration")
    logger.info("Server started")
    logger.warn("Cache is cold")
    logger.error("Payment provider unreachable")


def record_input():
    """Partial records fill the method/path/status/duration columns."""
    print("\n=== Record Input ===")

    logger = Logger()
    logger.info({"method": "CUSTOM", "path": "/import", "duration": 150, "message": "Import finished"})
    logger.warn("Slow upstream", path="/orders", duration=5000)
    logger.error("Upstream rejected the request", status_code=502)


def custom_template():
    """A shorter line template."""
    print("\n=== Custom Template ===")

    logger = Logger(format="{timestamp} {level} {message}", color=False)
    logger.info("Only timestamp, level and message")


def file_output():
    """Console and file at once."""
    print("\n=== File Output ===")

    options = LoggerOptions.create(
        level="info",
        file=True,
        file_path="./logs/example.log",
    )
    with Logger(options) as logger:
        logger.info("Written to stdout and ./logs/example.log")


def global_logger():
    """Log from anywhere through the global logger."""
    print("\n=== Global Logger ===")

    initialize_logger(level="debug", format="[{level}] {message}")
    info("Fetching users")
    warn("Retrying request")


if __name__ == "__main__":
    plain_messages()
    record_input()
    custom_template()
    file_output()
    global_logger()
