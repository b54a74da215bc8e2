from .logging_config import setup_logging
from .parsing import format_currency, format_percent, parse_number

__all__ = [
    "setup_logging",
    "format_currency",
    "format_percent",
    "parse_number",
]
