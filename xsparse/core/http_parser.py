"""
Header-section parser using httptools.

The request parser hands over only the text between the request line and
the blank line. This module frames that text behind a synthetic request line
so httptools can tokenize it, and collects the headers into a mapping with
lower-cased names. The body is never passed to httptools.
"""

import logging
from typing import Dict, List, Optional

import httptools

from .errors import MalformedRequestError
from .parser_utils import DEFAULT_CONFIG, ParserConfig

logger = logging.getLogger(__name__)

CRLF = "\r\n"
_FRAME_LINE = b"GET / HTTP/1.1\r\n"


class HeaderSectionParser:
    """Collects headers from httptools.HttpRequestParser callbacks.

    Repeated header names are folded into one value: ``cookie`` values are
    joined with ``"; "``, everything else with ``", "``.
    """
    JOIN_SEPARATORS = {"cookie": "; "}
    DEFAULT_SEPARATOR = ", "

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._values: Dict[str, List[str]] = {}
        self._headers_count = 0
        self._headers_complete = False

    def reset(self) -> None:
        """Clear collected headers so the instance can parse another section."""
        self._values = {}
        self._headers_count = 0
        self._headers_complete = False

    def on_header(self, name: bytes, value: bytes) -> None:
        """Store one header; called by httptools once per complete header."""
        key = name.decode("utf-8").lower()
        self._values.setdefault(key, []).append(value.decode("utf-8"))
        self._headers_count += 1

    def on_headers_complete(self) -> None:
        self._headers_complete = True

    def parse(self, section: str) -> Dict[str, str]:
        """Parse a header section into a mapping of lower-cased names.

        Args:
            section: Header lines separated by CRLF, without the terminating
                blank line

        Returns:
            Dict of lower-cased header name to header value

        Raises:
            MalformedRequestError: If httptools rejects the section or the
                header limit is exceeded
        """
        self.reset()
        if not section:
            return {}

        parser = httptools.HttpRequestParser(self)
        # Body framing is not interpreted here and lines may end in a bare LF
        parser.set_dangerous_leniencies(
            lenient_chunked_length=True,
            lenient_optional_cr_before_lf=True,
        )
        data = _FRAME_LINE + section.encode("utf-8") + (CRLF + CRLF).encode("ascii")
        try:
            parser.feed_data(data)
        except httptools.HttpParserUpgrade:
            # Upgrade/CONNECT headers stop httptools after the header block
            pass
        except httptools.HttpParserError as e:
            logger.warning("Rejected header section: %s", e)
            raise MalformedRequestError(
                f"HTTP request parser: invalid header section: {e}"
            ) from e

        if not self._headers_complete:
            raise MalformedRequestError(
                "HTTP request parser: header section is incomplete"
            )
        if self._headers_count > self.config.max_headers:
            raise MalformedRequestError(
                f"HTTP request parser: too many headers "
                f"({self._headers_count} > {self.config.max_headers})"
            )
        return self._fold()

    def _fold(self) -> Dict[str, str]:
        headers = {}
        for name, values in self._values.items():
            separator = self.JOIN_SEPARATORS.get(name, self.DEFAULT_SEPARATOR)
            headers[name] = separator.join(values)
        return headers


def parse_headers(section: str, config: Optional[ParserConfig] = None) -> Dict[str, str]:
    """Parse a header section with a fresh HeaderSectionParser."""
    return HeaderSectionParser(config).parse(section)
