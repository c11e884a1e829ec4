"""Adds human-readable explanations next to error codes in gateway responses."""

import re
from typing import Any, Mapping

from .codes import MSU_ERROR_CODES, lookup


ERROR_CODE_PATTERN = re.compile(r"ERR[0-9]{5}(?![0-9])")
EXPLANATION_SUFFIX = "_explanation"


def extract_error_code(value: str) -> str | None:
    """Return the first error code embedded in ``value``, if any."""
    match = ERROR_CODE_PATTERN.search(value)
    return match.group(0) if match else None


def _explain_object(obj: dict[str, Any], table: Mapping[str, str]) -> list[Any]:
    """Add explanation keys to a single object and return its child containers."""
    children: list[Any] = []
    # Snapshot so keys added below are not scanned again
    for key, value in list(obj.items()):
        if isinstance(value, str):
            code = extract_error_code(value)
            if code is None:
                continue
            explanation = lookup(code, table)
            new_key = f"{key}{EXPLANATION_SUFFIX}"
            if explanation is not None and new_key not in obj:
                obj[new_key] = f"{code}: {explanation}"
        elif isinstance(value, (dict, list)):
            children.append(value)
    return children


def annotate_error_codes(data: Any, table: Mapping[str, str] = MSU_ERROR_CODES) -> Any:
    """Annotate error codes found anywhere in a parsed JSON value.
    
    For every string value under an object key that contains ``ERR`` followed
    by five digits and a known explanation, a sibling key
    ``<key>_explanation`` is added with ``"<code>: <explanation>"``. Existing
    keys and values are left untouched. Arrays are walked but never receive
    keys themselves.
    
    The structure is modified in place and returned. Each container is visited
    once, so shared sub-structures are safe. Cyclic input is not supported.
    
    Args:
        data: Parsed JSON value (dict, list or scalar).
        table: Error-code to explanation mapping.
        
    Returns:
        The same value, annotated.
    """
    visited: set[int] = set()
    stack: list[Any] = [data]

    while stack:
        node = stack.pop()
        if not isinstance(node, (dict, list)) or id(node) in visited:
            continue
        visited.add(id(node))

        if isinstance(node, dict):
            children = _explain_object(node, table)
        else:
            children = [item for item in node if isinstance(item, (dict, list))]

        # Reversed keeps depth-first, document order traversal
        stack.extend(reversed(children))

    return data
