from .validator import validate_wordlist, pretty_summary
from .io import read_lines, read_stream, write_lines
from .dictionary import Dictionary
from .frequency import REFERENCE_ORDER, letter_frequency_order, validate_order

__all__ = [
    "validate_wordlist", "pretty_summary",
    "read_lines", "read_stream", "write_lines",
    "Dictionary",
    "REFERENCE_ORDER", "letter_frequency_order", "validate_order",
]
