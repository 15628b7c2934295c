"""
Raw HTTP/1.x request parser.

This module turns a complete request message held in memory into a
ParsedRequest:
- Request line split into method, path and decoded query parameters
- Header section delegated to HeaderSectionParser
- Cookies decoded from the ``cookie`` header when present
- Body taken verbatim after the blank line
- Form fields decoded from the body for url-encoded form posts

The line terminator is the literal two-character CRLF sequence.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import MalformedRequestError
from .http_parser import CRLF, HeaderSectionParser
from .parser_utils import DEFAULT_CONFIG, ParserConfig
from ..features.cookies import parse_cookies
from ..features.query import QueryValue, parse_query

logger = logging.getLogger(__name__)

BLANK_LINE = CRLF + CRLF


@dataclass
class ParsedRequest:
    """Structured view of a raw HTTP request.

    ``cookies`` is None when the request has no cookie header and
    ``form_fields`` is None unless the content type is url-encoded form
    data; both are omitted from to_dict() in that case.
    """
    method: str
    path: str
    query: Dict[str, QueryValue] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""
    cookies: Optional[Dict[str, str]] = None
    form_fields: Optional[Dict[str, QueryValue]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the request as a plain mapping, omitting absent fields."""
        result: Dict[str, Any] = {
            "method": self.method,
            "path": self.path,
            "query": self.query,
            "headers": self.headers,
        }
        if self.cookies is not None:
            result["cookies"] = self.cookies
        result["body"] = self.body
        if self.form_fields is not None:
            result["form-urlencoded"] = self.form_fields
        return result


class RequestMessageParser:
    """Parses one complete HTTP request string.

    Instances hold no state between calls; a single instance may parse any
    number of messages one at a time.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._header_parser = HeaderSectionParser(self.config)

    def parse(self, request_string: str) -> ParsedRequest:
        """Parse a raw request message.

        Args:
            request_string: Complete request with CRLF line terminators

        Returns:
            ParsedRequest describing the message

        Raises:
            MalformedRequestError: If the request line does not have exactly
                three components, there is no blank line after the headers,
                the header section is invalid, or the message is too large
        """
        if not isinstance(request_string, str):
            raise MalformedRequestError(
                f"HTTP request parser: request must be str, "
                f"got {type(request_string).__name__}"
            )
        if len(request_string) > self.config.max_request_size:
            raise MalformedRequestError(
                f"HTTP request parser: request too large "
                f"({len(request_string)} > {self.config.max_request_size})"
            )

        method, target = self._parse_request_line(request_string)
        path, query = split_target(target)

        header_end = self._find_blank_line(request_string)
        headers = self._header_parser.parse(
            self._extract_header_section(request_string, header_end)
        )

        request = ParsedRequest(
            method=method,
            path=path,
            query=query,
            headers=headers,
            body=request_string[header_end + len(BLANK_LINE):],
        )

        cookie_header = headers.get("cookie")
        if cookie_header:
            request.cookies = parse_cookies(cookie_header)

        if headers.get("content-type") == self.config.form_content_type:
            request.form_fields = parse_query(request.body)

        logger.debug("Parsed %s %s (%d headers, %d body chars)",
                     method, path, len(headers), len(request.body))
        return request

    @staticmethod
    def _request_line_end(request_string: str) -> int:
        # Without any CRLF the request line is empty
        return max(request_string.find(CRLF), 0)

    def _parse_request_line(self, request_string: str):
        request_line = request_string[:self._request_line_end(request_string)]
        components = request_line.split(" ")
        if len(components) != 3:
            logger.warning("Rejected request line: %r", request_line)
            raise MalformedRequestError(
                "HTTP request parser: request line should contain 3 components: "
                f'Method, URI and protocol version. Actual: "{request_line}"'
            )
        return components[0], components[1]

    def _find_blank_line(self, request_string: str) -> int:
        end = request_string.find(BLANK_LINE, self._request_line_end(request_string))
        if end < 0:
            raise MalformedRequestError(
                "HTTP request parser: message is not valid - "
                "there should be a blank line after the headers"
            )
        return end

    def _extract_header_section(self, request_string: str, header_end: int) -> str:
        start = self._request_line_end(request_string) + len(CRLF)
        # An empty header section puts the blank line right after the request line
        return request_string[start:header_end] if start <= header_end else ""


def split_target(target: str):
    """Split a request-target into its path and decoded query parameters."""
    path, sep, query_string = target.partition("?")
    return path, parse_query(query_string) if sep else {}


def parse_request(request_string: str, config: Optional[ParserConfig] = None) -> ParsedRequest:
    """Parse a raw request message with a RequestMessageParser."""
    return RequestMessageParser(config).parse(request_string)
