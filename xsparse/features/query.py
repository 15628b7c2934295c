"""
URL-encoded form codec for query strings and form bodies.

Values for a key that appears once are strings; keys that repeat collect
their values into a list in order of appearance. Key order follows first
appearance, so stringify_query(parse_query(q)) keeps order and multiplicity.
"""

"""
Copyright 2025 Chris Bunting
File: query.py | Purpose: Query string and form body decoding
@author Chris Bunting | @version 1.0.0

CHANGELOG:
2026-10-19 - Chris Bunting: Initial implementation
"""

from typing import Dict, List, Mapping, Union
from urllib.parse import parse_qsl, urlencode

QueryValue = Union[str, List[str]]


def parse_query(text: str) -> Dict[str, QueryValue]:
    """Decode an ``application/x-www-form-urlencoded`` string.

    Args:
        text: Query string without the leading ``?``, or a form body

    Returns:
        Ordered dict of decoded keys to a string, or a list of strings for
        repeated keys. An empty input yields an empty dict.

    ``+`` decodes to a space and a pair without ``=`` decodes to an empty
    value. Empty segments (``a=1&&b=2``) are skipped.
    """
    result: Dict[str, QueryValue] = {}
    if not text:
        return result

    for key, value in parse_qsl(text, keep_blank_values=True):
        if key not in result:
            result[key] = value
        elif isinstance(result[key], list):
            result[key].append(value)
        else:
            result[key] = [result[key], value]
    return result


def stringify_query(params: Mapping[str, QueryValue]) -> str:
    """Encode a mapping produced by parse_query back into a query string.

    List values emit one ``key=value`` pair per item, in order.
    """
    return urlencode(list(_iter_pairs(params)))


def _iter_pairs(params):
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, item
        else:
            yield key, value
