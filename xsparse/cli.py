#!/usr/bin/env python3
"""
Command line entry point for inspecting raw requests and XML event streams.
"""

import argparse
import json
import logging
import re
import sys
from pathlib import Path

from .core.errors import XSParseError
from .core.parser_utils import configure_logging
from .core.request_parser import RequestMessageParser
from .features.sax_parser import SAXParser


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="xsparse", description="Parse raw HTTP requests and XML documents"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    request_parser = subparsers.add_parser("request", help="Parse a raw HTTP request")
    request_parser.add_argument("file", type=Path, help="File holding the request")
    request_parser.add_argument(
        "--fix-newlines",
        action="store_true",
        help="Convert bare LF line endings to CRLF before parsing",
    )

    xml_parser = subparsers.add_parser("xml", help="Print the events of an XML document")
    xml_parser.add_argument("file", type=Path, help="XML document")
    xml_parser.add_argument(
        "--encoding", default=None, help="Document encoding (default: utf-8)"
    )
    return parser.parse_args(argv)


def run_request(args, out):
    with open(args.file, "r", encoding="utf-8", errors="replace", newline="") as fh:
        text = fh.read()
    if args.fix_newlines:
        text = re.sub(r"(?<!\r)\n", "\r\n", text)
    parsed = RequestMessageParser().parse(text)
    json.dump(parsed.to_dict(), out, indent=2)
    out.write("\n")


def run_xml(args, out):
    def emit(event, *values):
        out.write(json.dumps([event, *values]) + "\n")

    parser = SAXParser()
    parser.startElementHandler = lambda name, attrs: emit("start", name, attrs)
    parser.endElementHandler = lambda name: emit("end", name)
    parser.characterDataHandler = lambda text: emit("text", text)
    parser.commentHandler = lambda text: emit("comment", text)
    parser.startCDataSectionHandler = lambda: emit("cdata-start")
    parser.endCDataSectionHandler = lambda: emit("cdata-end")
    parser.parse(args.file.read_bytes(), args.encoding)


def main(argv=None, out=None):
    args = parse_args(argv)
    out = out or sys.stdout
    logger = configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "request":
            run_request(args, out)
        else:
            run_xml(args, out)
    except XSParseError as e:
        logger.debug("Parse failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
