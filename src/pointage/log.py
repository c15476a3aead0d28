import sys
from pathlib import Path

from loguru import logger


def setup_logger(level: str = 'INFO', log_file: str | None = None, rotation: str = '10 MB', retention: str = '7 days') -> None:
    '''
    Replaces loguru's default handler with a stderr sink and, when log_file is given, a rotating file sink.
    '''
    logger.remove()
    logger.add(
        sys.stderr,
        format='<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>',
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format='{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}',
            level=level,
            rotation=rotation,
            retention=retention,
        )

    logger.info(f'Logger initialized with level={level}')
