import logging
from pathlib import Path

from .config import config


LOGGER_NAME = "ecdh_suite.audit"


def get_audit_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(config.log_level)
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if config.log_dir:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "ecdh_audit.log", encoding="utf-8")
        file_handler.setLevel(config.log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if config.log_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Library default: silent unless a sink is configured.
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
