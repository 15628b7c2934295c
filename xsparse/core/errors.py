"""
Exception hierarchy shared by the request and markup parsers.

Every error is raised at the point of detection and is fatal for the current
parse attempt; none of them are retried internally.
"""

from typing import Optional


class XSParseError(Exception):
    """Base class for all parser errors"""
    pass


class MalformedRequestError(XSParseError):
    """Raised when a raw HTTP request violates the request-line or
    header/body separator grammar."""
    pass


class UnsupportedEncodingError(XSParseError):
    """Raised when a named text encoding is not recognized"""

    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Encoding {encoding} not supported")


class UnsupportedInputTypeError(XSParseError, TypeError):
    """Raised when markup input is not str, bytes-like or a web body"""

    def __init__(self, value: object = None):
        self.value_type = type(value).__name__
        super().__init__(
            f"xml must be str, bytes-like or WebBody, got {self.value_type}"
        )


class InvalidHandlerError(XSParseError):
    """Raised when a handler is not callable or has the wrong arity"""

    def __init__(self, handler_name: str, arity: int):
        self.handler_name = handler_name
        self.arity = arity
        super().__init__(
            f'Expected "{handler_name}" to be a function with {arity} arguments'
        )


class NotSupportedError(XSParseError):
    """Raised for permanently disabled handlers, properties and operations"""

    def __init__(self, item: str):
        self.item = item
        super().__init__(f"{item} not supported")


class UnsupportedPropertyError(NotSupportedError, AttributeError):
    """NotSupportedError raised from an attribute read, so hasattr() is False"""
    pass


class AlreadyStartedError(XSParseError):
    """Raised when parse() is called twice without an intervening reset()"""

    def __init__(self, message: str = "SAXParser.parse already started"):
        super().__init__(message)


class MarkupSyntaxError(XSParseError):
    """Raised when the XML tokenizer rejects a document as not well-formed"""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class ForbiddenMarkupError(XSParseError):
    """Raised when the hardened tokenizer refuses entities or external references"""
    pass
