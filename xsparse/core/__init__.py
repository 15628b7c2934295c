"""
Core request parsing components
"""

from .errors import (
    XSParseError, MalformedRequestError, UnsupportedEncodingError,
    UnsupportedInputTypeError, InvalidHandlerError, NotSupportedError,
    AlreadyStartedError, MarkupSyntaxError, ForbiddenMarkupError,
)
from .http_parser import HeaderSectionParser, parse_headers
from .parser_utils import ParserConfig, configure_logging
from .request_parser import ParsedRequest, RequestMessageParser, parse_request

# Expose public interface
__all__ = [
    "XSParseError", "MalformedRequestError", "UnsupportedEncodingError",
    "UnsupportedInputTypeError", "InvalidHandlerError", "NotSupportedError",
    "AlreadyStartedError", "MarkupSyntaxError", "ForbiddenMarkupError",
    "HeaderSectionParser", "parse_headers", "ParserConfig", "configure_logging",
    "ParsedRequest", "RequestMessageParser", "parse_request",
]
