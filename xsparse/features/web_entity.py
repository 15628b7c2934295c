"""
Web body capability and request entity built from a parsed request.

This module provides:
- WebBody, a payload holder exposing retrieve_content()
- TupleList, an ordered name/value list for parameters and headers
- WebEntityRequest, which combines query parameters and form fields
"""

"""
Copyright 2025 Chris Bunting
File: web_entity.py | Purpose: Request entity and body abstraction
@author Chris Bunting | @version 1.0.0

CHANGELOG:
2026-10-19 - Chris Bunting: Initial implementation
"""

from typing import Iterator, List, Mapping, Optional, Tuple, Union

from .buffer_utils import get_data, is_byte_buffer, to_buffer_encoding
from ..core.errors import UnsupportedEncodingError

Content = Union[str, bytes]


class WebBody:
    """Request or response payload held as str or bytes."""

    def __init__(self, content: Union[str, bytes, bytearray, memoryview] = ""):
        if not isinstance(content, str) and not is_byte_buffer(content):
            raise TypeError(
                f"WebBody content must be str or bytes-like, got {type(content).__name__}"
            )
        self._content = get_data(content)

    def retrieve_content(self) -> Content:
        """Return the raw content as stored."""
        return self._content

    def as_string(self, encoding: Optional[str] = None) -> str:
        """Return the content as text, decoding bytes with ``encoding``.

        Raises:
            UnsupportedEncodingError: If the encoding name is not recognized
        """
        if isinstance(self._content, str):
            return self._content
        codec = "utf-8"
        if encoding:
            codec = to_buffer_encoding(encoding)
            if codec is None:
                raise UnsupportedEncodingError(encoding)
        return self._content.decode(codec, errors="replace")

    def as_bytes(self) -> bytes:
        if isinstance(self._content, bytes):
            return self._content
        return self._content.encode("utf-8")

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"WebBody({self._content!r})"


def is_web_body(value: object) -> bool:
    """Check whether value exposes the web body content-retrieval operation."""
    return callable(getattr(value, "retrieve_content", None))


class TupleList:
    """Ordered list of (name, value) pairs with first-match lookup."""

    def __init__(self, data: Optional[Mapping] = None):
        self._items: List[Tuple[str, str]] = []
        if data:
            self.add_data(data)

    def add(self, name: str, value: str) -> None:
        self._items.append((name, value))

    def add_data(self, data: Optional[Mapping]) -> None:
        """Append every entry of a mapping; list values add one pair per item."""
        if not data:
            return
        for name, value in data.items():
            if isinstance(value, (list, tuple)):
                for item in value:
                    self.add(name, item)
            else:
                self.add(name, value)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self._items:
            if key == name:
                return value
        return default

    def get_all(self, name: str) -> List[str]:
        return [value for key, value in self._items if key == name]

    def __getitem__(self, index: int) -> Tuple[str, str]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._items)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._items)


class WebEntityRequest:
    """Request entity exposing headers, parameters and body to script code."""

    def __init__(self):
        self.headers = TupleList()
        self.parameters = TupleList()
        self.body: Optional[WebBody] = None

    def set_body(self, body: Union[None, Content, WebBody]) -> None:
        if body is None or isinstance(body, WebBody):
            self.body = body
        elif len(body) == 0:
            self.body = None
        else:
            self.body = WebBody(body)

    @classmethod
    def from_parsed(cls, parsed) -> "WebEntityRequest":
        """Build an entity from a ParsedRequest.

        Parameters hold the query parameters followed by the form fields.
        """
        entity = cls()
        entity.headers.add_data(parsed.headers)
        entity.parameters.add_data(parsed.query)
        entity.parameters.add_data(parsed.form_fields)
        entity.set_body(parsed.body)
        return entity

    @classmethod
    def create(cls, headers: Optional[Mapping] = None,
               parameters: Optional[Mapping] = None,
               body: Union[None, Content, WebBody] = None) -> "WebEntityRequest":
        entity = cls()
        entity.headers.add_data(headers)
        entity.parameters.add_data(parameters)
        entity.set_body(body)
        return entity
