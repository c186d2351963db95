import logging
import sys

logger = logging.getLogger("stepwise")


def build_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Configures and returns the stepwise logger.

    The logger is configured to write to stdout. Handlers attached by previous calls are
    dropped, so calling this function repeatedly never duplicates records.

    Args:
        level: Minimum severity of records that are emitted.

    Returns:
        The configured logging.Logger instance.
    """

    logger.setLevel(level)
    logger.handlers.clear()
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    formatter = logging.Formatter(
        "[stepwise] %(asctime)s - %(levelname)s - %(message)s"
    )
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger
