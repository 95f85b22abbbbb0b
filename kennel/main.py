"""Composition root for Kennel.

This module is the ONLY location that imports both the core domain
model and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Output adapter selection
- Dog construction with the sink injected
- Entry point with exit codes
"""

import logging
import sys

from kennel.adapters.output.null import NullOutputAdapter
from kennel.adapters.output.stdout import StdoutOutputAdapter
from kennel.config import Settings, load_settings
from kennel.core.models import Dog
from kennel.core.ports import OutputPort


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Log records go to stderr; stdout carries only the echoed names.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.WARNING)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_output(settings: Settings) -> OutputPort:
    """Instantiate the output adapter named by the settings.

    Raises:
        ValueError: If the output backend is not recognized.
    """
    logger = logging.getLogger(__name__)

    if settings.output_backend == "stdout":
        logger.info("Output adapter: Stdout")
        return StdoutOutputAdapter()
    if settings.output_backend == "null":
        logger.info("Output adapter: Null")
        return NullOutputAdapter()

    raise ValueError(f"Unknown output backend: {settings.output_backend}")


def build_dog(settings: Settings, output: OutputPort | None = None) -> Dog:
    """Create a dog wired according to the settings.

    Args:
        settings: Loaded application settings.
        output: Sink to inject. If None, one is built from settings.
            Ignored when echo_on_read is disabled.

    Returns:
        A Dog named settings.dog_name (empty if unset).
    """
    sink = None
    if settings.echo_on_read:
        sink = output if output is not None else build_output(settings)

    dog = Dog(output=sink)
    if settings.dog_name:
        dog.set_name(settings.dog_name)
    return dog


def run(settings: Settings, output: OutputPort | None = None) -> str:
    """Build the configured dog and read its name back once."""
    dog = build_dog(settings, output)
    return dog.get_name()


def main() -> None:
    """Entry point for the kennel command.

    Exit codes:
        0: Success
        1: Fatal configuration or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        run(settings)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
