"""
Markup parsing, codecs and request entity helpers
"""

from .cookies import parse_cookies
from .query import parse_query, stringify_query
from .buffer_utils import get_data, to_buffer_encoding
from .web_entity import TupleList, WebBody, WebEntityRequest
from .sax_parser import MarkupEventParser, SAXParser

__all__ = [
    "parse_cookies", "parse_query", "stringify_query", "get_data",
    "to_buffer_encoding", "TupleList", "WebBody", "WebEntityRequest",
    "MarkupEventParser", "SAXParser",
]
