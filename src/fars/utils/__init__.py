from .convert import to_int
from .logging import JsonFormatter, configure_logging

__all__ = [
    'to_int',
    'JsonFormatter',
    'configure_logging',
]
