"""Gateway error-code table and response annotation."""

from .annotator import ERROR_CODE_PATTERN, annotate_error_codes, extract_error_code
from .codes import MSU_ERROR_CODES, lookup


__all__ = [
    "ERROR_CODE_PATTERN",
    "MSU_ERROR_CODES",
    "annotate_error_codes",
    "extract_error_code",
    "lookup",
]
