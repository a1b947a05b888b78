import logging
import os
from pathlib import Path

_logging_configured = False
_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None, log_dir: str | Path | None = None):
    """
    Setup logging for applications embedding the validation engine.

    The engine itself only emits `logging.debug` records (tagged `[VALIDATOR]`,
    `[LOCALE]`); this routes them to `log/<file>` and, when `ENV=debug`, to the console.

    Log levels:
    - CRITICAL
    - ERROR
    - WARNING
    - INFO
    - DEBUG
    - NOTSET
    """
    global _logging_configured, _log_file_path

    log_dir = Path(log_dir) if log_dir is not None else Path(os.getcwd()) / "log"
    file_name = log_file_name if log_file_name else os.getenv('LOG_FILE_NAME', 'validation.log')
    log_file = log_dir / file_name

    # If already configured and path matches, skip reconfiguration
    if _logging_configured and _log_file_path == log_file:
        return

    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv('LOG_LEVEL', 'INFO').upper())

    # Drop handlers installed by a previous call
    for handler in list(root_logger.handlers):
        if getattr(handler, "_fast_rules", False):
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = logging.FileHandler(str(log_file), mode='a')
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    file_handler._fast_rules = True
    root_logger.addHandler(file_handler)

    if os.getenv('ENV') == 'debug':
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        console_handler._fast_rules = True
        root_logger.addHandler(console_handler)

    _log_file_path = log_file
    _logging_configured = True
    logging.info("Logging configured successfully")


def get_log_file_path() -> Path | None:
    return _log_file_path
