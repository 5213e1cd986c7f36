# logging_setup.py
from __future__ import annotations
import logging, os
from pathlib import Path
from datetime import datetime
from typing import Final


LOG_DIR: Final = Path(os.getenv("QODER_LOG_DIR", "logs"))   # where log files live
LOG_FORMAT: Final = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT:  Final = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_to_file: bool = False, level: int = logging.DEBUG,
                  log_dir: Path | None = None) -> Path | None:
    """Configure the root logger to write to stderr and, optionally, a file.

    stdout is never touched: it carries the command's JSON result.

    Returns
    -------
    Path | None
        The path of the log file that was created, or None when
        ``log_to_file`` is false.
    """
    console_handler = logging.StreamHandler()        # defaults to stderr
    handlers: list[logging.Handler] = [console_handler]

    log_path = None
    if log_to_file:
        # unique file name once per run
        target_dir = log_dir or LOG_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp  = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path   = target_dir / f"run_{timestamp}.log"
        handlers.append(logging.FileHandler(log_path, mode="w", encoding="utf-8"))

    for h in handlers:
        h.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True                      # clobber any earlier basicConfig()
    )
    return log_path
