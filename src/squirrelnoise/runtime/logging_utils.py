"""
Run logging helpers.

Each run gets its own timestamped log file. The run settings are written as
the first record so a log can be read without the command line that made it.
"""

import logging
from datetime import datetime
from pathlib import Path

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(message)s"


def _resolve_log_dir(log_dir):
    default_log_dir = Path.cwd() / "logs"
    if log_dir is None:
        return default_log_dir
    text = str(log_dir).strip()
    return Path(text).expanduser() if text else default_log_dir


def _detach_handlers(logger):
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        try:
            handler.close()
        except Exception:
            pass


def format_settings(settings):
    """Render a settings mapping as sorted ``key=value`` pairs."""
    return " ".join(f"{key}={settings[key]}" for key in sorted(settings))


def setup_run_logger(
    log_dir=None,
    name="squirrelnoise",
    prefix="run",
    settings=None,
    console_level=logging.WARNING,
):
    """Attach a fresh file + console handler pair to ``name``.

    The file receives INFO and above, the console ``console_level`` and
    above. Existing handlers are detached first so repeated runs do not
    duplicate output. When ``settings`` is given it is logged once as a
    ``settings ...`` record.

    Returns:
        ``(logger, log_path)`` with ``log_path`` as a string.
    """
    resolved_log_dir = _resolve_log_dir(log_dir)
    resolved_log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = resolved_log_dir / f"{prefix}_{timestamp}.log"

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    _detach_handlers(logger)

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if settings:
        logger.info("settings %s", format_settings(settings))

    return logger, str(log_path)
