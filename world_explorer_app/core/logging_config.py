"""
Logging setup for World Explorer.

One package logger, ``world_explorer_app``, receives everything the modules
log through ``logging.getLogger(__name__)``. It writes to the console and to a
rotating ``world_explorer.log`` under ``LOG_DIR``. With ``LOG_JSON`` set, each
record is a single JSON object per line.
"""

import json
import logging
import logging.handlers
import os

ROOT_LOGGER_NAME = 'world_explorer_app'
LOG_FILE_NAME = 'world_explorer.log'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON line; exceptions go in ``exc_info``."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'time': self.formatTime(record, DATE_FORMAT),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _default_log_dir() -> str:
    return os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), 'logs')


def setup_logging(app) -> logging.Logger:
    """
    Configure the package logger from the app's ``LOG_*`` keys.

    Handlers from an earlier call (a previous app in the same process) are
    closed and replaced.
    """
    config = app.config
    level = getattr(logging, str(config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    log_dir = config.get('LOG_DIR') or _default_log_dir()
    os.makedirs(log_dir, exist_ok=True)

    if config.get('LOG_JSON'):
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    file_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=config.get('LOG_MAX_BYTES', 10 * 1024 * 1024),
        backupCount=config.get('LOG_BACKUP_COUNT', 5),
        encoding='utf-8',
    )

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in (logging.StreamHandler(), file_handler):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # app.logger is the package logger whenever the app is named after the package
    if app.logger is not logger:
        app.logger.handlers = list(logger.handlers)
        app.logger.setLevel(level)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, dir=%s", logging.getLevelName(level), log_dir)
    return logger
