from .factory import get_parser, known_entry_types, parse_entry
from .patient import parse_new_patient

__all__ = ["get_parser", "known_entry_types", "parse_entry", "parse_new_patient"]
