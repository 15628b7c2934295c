from .core import (
    RequestMessageParser, ParsedRequest, parse_request, ParserConfig,
    XSParseError, MalformedRequestError, UnsupportedEncodingError,
    UnsupportedInputTypeError, InvalidHandlerError, NotSupportedError,
    AlreadyStartedError, MarkupSyntaxError, ForbiddenMarkupError,
)
from .features import (
    SAXParser, MarkupEventParser, WebBody, WebEntityRequest, TupleList,
    parse_query, stringify_query, parse_cookies,
)

__version__ = '1.0.0'

__all__ = [
    # Request parsing
    'RequestMessageParser',
    'ParsedRequest',
    'parse_request',
    'ParserConfig',

    # Markup parsing
    'SAXParser',
    'MarkupEventParser',

    # Entities and codecs
    'WebBody',
    'WebEntityRequest',
    'TupleList',
    'parse_query',
    'stringify_query',
    'parse_cookies',

    # Errors
    'XSParseError',
    'MalformedRequestError',
    'UnsupportedEncodingError',
    'UnsupportedInputTypeError',
    'InvalidHandlerError',
    'NotSupportedError',
    'AlreadyStartedError',
    'MarkupSyntaxError',
    'ForbiddenMarkupError',
]
