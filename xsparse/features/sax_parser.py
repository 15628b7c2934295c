"""
Event-driven XML parser with a restricted handler-registration surface.

This module wraps the hardened expat SAX reader from defusedxml:
- Handlers are registered per named slot and checked against a fixed arity
- Namespace-declaration attributes are dropped from start-tag events
- A fixed set of handlers and properties always raise NotSupportedError
- parse() runs synchronously to the end of the document, once per reset()
"""

"""
Copyright 2025 Chris Bunting
File: sax_parser.py | Purpose: Restricted SAX parser facade
@author Chris Bunting | @version 1.0.0

CHANGELOG:
2026-10-19 - Chris Bunting: Initial implementation
"""

import inspect
import logging
from typing import Callable, Dict, List, Optional, Union
from xml.sax import SAXParseException
from xml.sax.handler import ContentHandler, property_lexical_handler

import defusedxml.sax
from defusedxml.common import DefusedXmlException

from .buffer_utils import get_data, is_byte_buffer, to_buffer_encoding
from .web_entity import is_web_body
from ..core.errors import (
    AlreadyStartedError, ForbiddenMarkupError, InvalidHandlerError,
    MarkupSyntaxError, NotSupportedError, UnsupportedEncodingError,
    UnsupportedInputTypeError, UnsupportedPropertyError,
)
from ..core.parser_utils import DEFAULT_CONFIG, ParserConfig

logger = logging.getLogger(__name__)

# Handler slot -> number of arguments the handler must accept
HANDLER_ARITY: Dict[str, int] = {
    "startElementHandler": 2,
    "endElementHandler": 1,
    "characterDataHandler": 1,
    "commentHandler": 1,
    "startCDataSectionHandler": 0,
    "endCDataSectionHandler": 0,
}

UNSUPPORTED_HANDLERS = frozenset([
    "attlistDeclHandler", "endDoctypeDeclHandler", "endNameSpaceDeclHandler",
    "entityDeclHandler", "externalEntityRefHandler", "notationDeclHandler",
    "processingInstructionHandler", "startDoctypeDeclHandler",
    "startNameSpaceDeclHandler", "xmlDeclHandler",
])

UNSUPPORTED_PROPERTIES = frozenset([
    "currentByteIndex", "currentColumnNumber", "currentLineNumber",
])

UNSUPPORTED = UNSUPPORTED_HANDLERS | UNSUPPORTED_PROPERTIES

XMLNS_PREFIX = "xmlns"


def count_arguments(handler: Callable) -> Optional[int]:
    """Number of required positional parameters, or None if not countable.

    Callables taking ``*args`` or required keyword-only parameters have no
    fixed positional arity.
    """
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return None
        if param.default is not param.empty:
            continue
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
        elif param.kind is param.KEYWORD_ONLY:
            return None
    return count


def check_handler(handler: Callable, handler_name: str, arity: int) -> None:
    if not callable(handler) or count_arguments(handler) != arity:
        raise InvalidHandlerError(handler_name, arity)


def is_namespace_declaration(name: str) -> bool:
    """True for ``xmlns`` and ``xmlns:<prefix>`` attributes."""
    prefix, _, _ = name.partition(":")
    return prefix == XMLNS_PREFIX


def normalize_attributes(attrs) -> Dict[str, str]:
    """Reduce SAX attributes to a name -> value dict without xmlns attributes."""
    return {
        name: attrs.getValue(name)
        for name in attrs.getNames()
        if not is_namespace_declaration(name)
    }


class _EventDispatcher(ContentHandler):
    """Routes SAX content and lexical events to the registered handlers.

    With ``coalesce`` set, character data is buffered and delivered as one
    call per text run, flushed before any other event. Text inside CDATA
    sections is not delivered; only the section boundaries are.
    """

    def __init__(self, handlers: Dict[str, Callable], coalesce: bool = True):
        super().__init__()
        self._handlers = handlers
        self._coalesce = coalesce
        self._text: List[str] = []
        self._in_cdata = False
        self.events = 0

    def _emit(self, slot: str, *args) -> None:
        handler = self._handlers.get(slot)
        if handler is not None:
            self.events += 1
            handler(*args)

    def _flush(self) -> None:
        if self._text:
            text = "".join(self._text)
            self._text = []
            self._emit("characterDataHandler", text)

    def startElement(self, name, attrs):
        self._flush()
        if "startElementHandler" in self._handlers:
            self._emit("startElementHandler", name, normalize_attributes(attrs))

    def endElement(self, name):
        self._flush()
        self._emit("endElementHandler", name)

    def characters(self, content):
        if self._in_cdata:
            return
        if self._coalesce:
            self._text.append(content)
        else:
            self._emit("characterDataHandler", content)

    def endDocument(self):
        self._flush()

    # Lexical handler interface

    def comment(self, content):
        self._flush()
        self._emit("commentHandler", content)

    def startCDATA(self):
        self._flush()
        self._in_cdata = True
        self._emit("startCDataSectionHandler")

    def endCDATA(self):
        self._in_cdata = False
        self._emit("endCDataSectionHandler")

    def startDTD(self, name, public_id, system_id):
        pass

    def endDTD(self):
        pass


class SAXParser:
    """Synchronous, single-pass XML parser with named handler slots.

    Handlers are registered with set_handler() or by assigning to the slot
    attribute (``parser.startElementHandler = fn``). Registered handlers are
    kept across reset(); the underlying tokenizer is not.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._handlers: Dict[str, Callable] = {}
        self._parse_started = False
        self._reader = self._new_reader()

    @staticmethod
    def _new_reader():
        return defusedxml.sax.make_parser()

    def __setattr__(self, name, value):
        if name in HANDLER_ARITY or name in UNSUPPORTED:
            self.set_handler(name, value)
        else:
            object.__setattr__(self, name, value)

    def __getattr__(self, name):
        # Only reached for names that are not regular attributes
        if name in HANDLER_ARITY:
            return self.__dict__.get("_handlers", {}).get(name)
        if name in UNSUPPORTED:
            raise UnsupportedPropertyError(name)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def set_handler(self, slot: str, handler: Callable) -> None:
        """Register ``handler`` for ``slot``.

        Raises:
            NotSupportedError: If the slot is disabled or unknown
            InvalidHandlerError: If handler is not callable or has the
                wrong number of arguments for the slot
        """
        if slot not in HANDLER_ARITY:
            raise NotSupportedError(slot)
        check_handler(handler, slot, HANDLER_ARITY[slot])
        self._handlers[slot] = handler

    def get_handler(self, slot: str) -> Optional[Callable]:
        if slot not in HANDLER_ARITY:
            raise NotSupportedError(slot)
        return self._handlers.get(slot)

    def parse(self, xml, encoding: Optional[str] = None) -> None:
        """Parse a complete document, invoking handlers in document order.

        Args:
            xml: str, bytes-like value, or web body exposing retrieve_content()
            encoding: Encoding name for byte input (default: utf-8)

        Raises:
            AlreadyStartedError: If parse was already called since the last reset
            UnsupportedInputTypeError: If xml has an unsupported type
            UnsupportedEncodingError: If encoding is not recognized
            MarkupSyntaxError: If the document is not well-formed
            ForbiddenMarkupError: If the document declares entities or
                references external resources
        """
        if self._parse_started:
            raise AlreadyStartedError()
        self._parse_started = True

        text = self._get_xml(xml, encoding)
        dispatcher = _EventDispatcher(self._handlers, self.config.coalesce_text)
        reader = self._reader
        reader.setContentHandler(dispatcher)
        reader.setProperty(property_lexical_handler, dispatcher)

        try:
            reader.feed(text)
            reader.close()
        except SAXParseException as e:
            logger.warning("XML document rejected: %s", e)
            raise MarkupSyntaxError(
                e.getMessage(), e.getLineNumber(), e.getColumnNumber()
            ) from e
        except DefusedXmlException as e:
            logger.warning("XML document rejected: %s", e)
            raise ForbiddenMarkupError(str(e)) from e

        logger.debug("Parsed XML document (%d events dispatched)", dispatcher.events)

    def reset(self) -> None:
        """Allow parse() to be called again with a fresh tokenizer."""
        self._parse_started = False
        self._reader = self._new_reader()

    def resume(self) -> None:
        raise NotSupportedError("resume")

    def stop(self, is_resumable: Optional[bool] = None) -> None:
        raise NotSupportedError("stop")

    def _get_xml(self, xml, encoding: Optional[str]) -> str:
        data = self._extract_content(xml)
        if isinstance(data, str):
            return data
        # Undecodable bytes become U+FFFD rather than failing the parse
        return data.decode(self._resolve_encoding(encoding), errors="replace")

    @staticmethod
    def _extract_content(xml) -> Union[str, bytes]:
        if isinstance(xml, str) or is_byte_buffer(xml):
            return get_data(xml)
        if is_web_body(xml):
            content = xml.retrieve_content()
            if isinstance(content, str) or is_byte_buffer(content):
                return get_data(content)
        raise UnsupportedInputTypeError(xml)

    def _resolve_encoding(self, encoding: Optional[str]) -> str:
        if not encoding:
            return self.config.default_encoding
        codec = to_buffer_encoding(encoding)
        if codec is None:
            raise UnsupportedEncodingError(encoding)
        return codec


MarkupEventParser = SAXParser
