import logging
from typing import Optional
from colorama import Fore, Style, init

# Initialize colorama
init()

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ('joblib', 'sklearn')


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to log messages"""

    COLORS = {
        'DEBUG': Fore.BLUE,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT
    }

    def format(self, record):
        # Color a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def setup_logging(log_level: str = 'INFO') -> None:
    """Configure logging with the specified level and colors"""
    numeric_level = getattr(logging, str(log_level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level}')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Calling twice must not duplicate every line
    for handler in root_logger.handlers:
        if isinstance(handler.formatter, ColoredFormatter):
            break
    else:
        console_handler = logging.StreamHandler()
        colored_formatter = ColoredFormatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(colored_formatter)
        root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger for the specified module"""
    return logging.getLogger(name)
