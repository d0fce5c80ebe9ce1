import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from shimekiri.util.dirs import DEFAULT_HOME, ensure_dirs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_mode(*, is_debug: bool) -> None:
    if is_debug:
        logging.getLogger("shimekiri").setLevel(logging.DEBUG)
    else:
        logging.getLogger("shimekiri").setLevel(logging.INFO)


def setup_logger(
    name: str,
    *,
    is_stream: bool = True,
    is_file: bool = True,
) -> logging.Logger:
    logger = logging.getLogger(name)
    # 同名のloggerに何度もhandlerを積まない
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)

    if is_stream or not is_file:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream_handler)

    if is_file:
        ensure_dirs()
        time_rotate_file_handler = TimedRotatingFileHandler(
            (Path(DEFAULT_HOME) / f"{name.lower()}.log").as_posix(),
            when="MIDNIGHT",
            interval=1,
            backupCount=7,
            encoding="utf-8",
            delay=True,
        )
        time_rotate_file_handler.setLevel(logging.DEBUG)
        time_rotate_file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(time_rotate_file_handler)

    return logger
