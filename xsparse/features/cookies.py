"""
Cookie header decoding.
"""

from typing import Dict
from urllib.parse import unquote


def _decode(value: str) -> str:
    if "%" not in value:
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


def parse_cookies(header: str) -> Dict[str, str]:
    """Decode a ``Cookie`` header value into a name/value mapping.

    Args:
        header: Raw header value, e.g. ``"a=1; b=2"``

    Returns:
        Dict of cookie name to decoded value

    Pairs are separated by ``;`` and split at the first ``=``. Pairs without
    ``=`` are skipped, names and values are trimmed, surrounding double
    quotes are removed and values are percent-decoded (kept raw when they do
    not decode). The first occurrence of a name wins.
    """
    cookies: Dict[str, str] = {}
    for pair in header.split(";"):
        name, sep, value = pair.partition("=")
        if not sep:
            continue
        name = name.strip()
        if not name or name in cookies:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        cookies[name] = _decode(value)
    return cookies
