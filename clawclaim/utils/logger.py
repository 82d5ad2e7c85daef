import os
import sys
from pathlib import Path

from loguru import logger


def setup_logger(
    *,
    json_logs: bool = False,
    level: str = "INFO",
    log_dir: str | Path = "logs",
    file_prefix: str = "clawclaim",
) -> None:
    """Route scan logs to stdout for the scheduler and to a dated file.

    Each scheduled scan appends to `<log_dir>/<file_prefix>_<date>.log`, so
    one day of runs (every skip, claim and tx hash at DEBUG) sits in one file.
    Operator scripts pass their own prefix to keep manual casts out of it.
    LOG_LEVEL in the environment overrides the console level only.
    """
    console_level = os.getenv("LOG_LEVEL", level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=True,
        )

    logger.add(
        Path(log_dir) / f"{file_prefix}_{{time:YYYY-MM-DD}}.log",
        rotation="10 MB",
        retention="14 days",
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )
