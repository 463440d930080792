import logging
import logging.handlers
import os
import sys
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from heroviz.config.schemas import EngineConfig

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ---------------- Logging ----------------


ROOT_LOGGER = "heroviz"


def get_logger(name=ROOT_LOGGER, log_file=None):
    # Module loggers ("heroviz.<module>") carry no handlers of their own and
    # inherit level and handlers from the package logger.
    if name.startswith(ROOT_LOGGER + "."):
        get_logger(ROOT_LOGGER, log_file)
        return logging.getLogger(name)
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    fmt = logging.Formatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
    )
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=5_000_000, backupCount=5
        )
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger


log = get_logger(ROOT_LOGGER)


def configure_logging(cfg: EngineConfig) -> logging.Logger:
    """Apply the configured level (and optional file) to the heroviz logger tree."""
    logger = get_logger(ROOT_LOGGER)
    if cfg.logging.log_file and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        log_dir = os.path.dirname(cfg.logging.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            cfg.logging.log_file, maxBytes=5_000_000, backupCount=5
        )
        fh.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(fh)
    logger.setLevel(getattr(logging, cfg.logging.level, logging.INFO))
    return logger


# ---------------- Env + Config ----------------


def load_env(env_path: Optional[str] = None) -> None:
    """Load a .env file (repo root by default) without overriding real env vars."""
    load_dotenv(env_path or os.path.join(BASE, ".env"), override=False)


def load_config(
    path: Optional[str] = None,
    *,
    profile: Optional[str] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> EngineConfig:
    from heroviz.utils.config import load_engine_config

    load_env()
    try:
        cfg = load_engine_config(path, profile=profile, cli_overrides=cli_overrides)
    except ValidationError as e:
        log.error(f"Engine config invalid: {e.error_count()} error(s)")
        raise
    log.debug(f"Engine config loaded (profile={cfg.profile})")
    return cfg
