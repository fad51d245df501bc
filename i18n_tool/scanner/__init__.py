from .patterns import CALL_RULES, ERROR_CODE_CONSTANTS, match_call, match_constant
from .go_source import scan_file, scan_source
from .walker import ScanStats, add_dynamically_generated_ids, extract_strings

__all__ = [
    "CALL_RULES",
    "ERROR_CODE_CONSTANTS",
    "match_call",
    "match_constant",
    "scan_file",
    "scan_source",
    "ScanStats",
    "add_dynamically_generated_ids",
    "extract_strings",
]
