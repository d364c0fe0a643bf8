"""
Logging setup. The session owns stdout/stderr, so logs only ever go to files.
"""
import os

from loguru import logger


def setup_logging(log_dir: str = "logs", level: str = "INFO", rotation: str = "1 day", retention: str = "30 days"):
    """
    Replace loguru's default stderr sink with a dated file sink under `log_dir`.
    """
    os.makedirs(log_dir, exist_ok=True)

    logger.remove()
    logger.add(
        sink=os.path.join(log_dir, "engine_{time:YYYY-MM-DD}.log"),
        rotation=rotation,
        retention=retention,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
        enqueue=True,
        backtrace=True,
        diagnose=False,
        # input lines may carry lone surrogates from undecodable bytes
        encoding="utf-8",
        errors="backslashreplace",
    )
    logger.info("-----------Logger initialized-----------")
    return logger
