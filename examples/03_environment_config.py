"""
Environment Configuration Examples.

Demonstrates loading logger options from environment variables, .env files
and YAML/JSON config files.
"""

import os

from http_logger import ConfigFileLoader, Logger, load_from_env
from http_logger.core.env_config import format_options_summary


def example_1_load_from_env_file():
    """Example 1: Load from a .env file."""
    print("\n" + "="*60)
    print("EXAMPLE 1: Load from .env")
    print("="*60 + "\n")

    with open('.env.logging', 'w') as f:
        f.write("HTTP_LOGGER_LEVEL=debug\n")
        f.write("HTTP_LOGGER_SKIP=/health,/metrics\n")
        f.write("HTTP_LOGGER_INCLUDE_IP=true\n")

    options = load_from_env(env_file='.env.logging')
    print(format_options_summary(options))

    Logger(options).debug("Configured from .env.logging")

    os.remove('.env.logging')


def example_2_overrides():
    """Example 2: Explicit overrides beat the environment."""
    print("\n" + "="*60)
    print("EXAMPLE 2: Overrides")
    print("="*60 + "\n")

    os.environ["HTTP_LOGGER_LEVEL"] = "error"
    options = load_from_env(level="info")
    print(f"Level: {options.level.value}")  # info

    del os.environ["HTTP_LOGGER_LEVEL"]


def example_3_yaml_file():
    """Example 3: Options from a YAML file section."""
    print("\n" + "="*60)
    print("EXAMPLE 3: YAML config file")
    print("="*60 + "\n")

    with open('logging.yaml', 'w') as f:
        f.write(
            "http_logger:\n"
            "  level: warn\n"
            "  format: '[{level}] {method} {path} {message}'\n"
            "  ipHeaders: [cf-connecting-ip, x-forwarded-for]\n"
        )

    options = ConfigFileLoader.from_file('logging.yaml')
    print(format_options_summary(options))

    Logger(options).warn("Configured from logging.yaml")

    os.remove('logging.yaml')


if __name__ == "__main__":
    example_1_load_from_env_file()
    example_2_overrides()
    example_3_yaml_file()
