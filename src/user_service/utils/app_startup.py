import logging
import sys
from pathlib import Path

from loguru import logger

from src.user_service.runtime.config.config_data import ConfigData
from src.user_service.runtime.context import get_config

_PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard ``logging`` records (SQLAlchemy, etc.) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging(config: ConfigData | None = None, level: str | None = None) -> None:
    """Reset Loguru sinks from the logging section and route stdlib logging into it.

    ``level`` overrides the configured level, e.g. for a verbose CLI run.
    """
    main_config = config or get_config()
    cfg = main_config.logging
    if level is not None:
        cfg = cfg.model_copy(update={"level": level})
    env = main_config.app.environment

    logger.remove()

    backtrace_on = env != "production"
    diagnose_on = env != "production"
    is_json = cfg.format == "json"

    # Console: JSON lines or colorized plain text
    logger.add(
        sys.stderr,
        level=cfg.level,
        format="{message}" if is_json else _PLAIN_FORMAT,
        colorize=not is_json,
        serialize=is_json,
        backtrace=backtrace_on,
        diagnose=diagnose_on,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=cfg.level,
            format="{message}" if is_json else _PLAIN_FORMAT,
            serialize=is_json,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            enqueue=True,
            backtrace=backtrace_on,
            diagnose=diagnose_on,
        )

    # 'force=True' clears existing handlers; level=0 lets all records through
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict.keys()):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if main_config.database.echo else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    logger.info(
        "Logging configured for {} ({}, level {})", main_config.app.name, env, cfg.level
    )
