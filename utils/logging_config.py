# utils/logging_config.py
import logging
import os
import sys

DEFAULT_LEVEL = "INFO"


def _resolve_level(level):
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        return logging.INFO, name
    return resolved, None


def setup_logging(level=None, stream=None):
    """Configure root logging for the volume finder.

    Logs go to stdout unless another stream is given; the CLI sends them to
    stderr so that its own output stays parseable.
    """
    root = logging.getLogger()

    # Remove existing handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    resolved, invalid = _resolve_level(level)
    root.setLevel(resolved)
    if invalid:
        root.warning(f"Invalid log level {invalid}, using INFO")

    return root
