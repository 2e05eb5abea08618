# fxcli/core/logging.py
import logging
import sys

from fxcli.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """Configura el logging raíz hacia stderr; stdout queda para el resultado."""
    if level is None:
        level = settings.LOG_LEVEL

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
