"""
Document query seam.

The parsers only need two capabilities from a loaded report: selecting
nodes with a path expression (optionally relative to another node) and
reading a node's text. ``HtmlDocument`` provides them on top of lxml's
HTML parser and XPath engine; anything else implementing ``Document`` can
be substituted.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Optional, Protocol

from lxml import etree, html

logger = logging.getLogger(__name__)

HTML_WHITESPACE = " \t\n\r\f"
# Indentation around line breaks comes from the exporter's formatting.
_LINE_BREAK_RUN = re.compile(r"[ \t\r\f]*[\r\n][ \t\n\r\f]*")


class Document(Protocol):
    def select(self, path: str, context: Optional[Any] = None) -> list[Any]: ...

    def text(self, node: Any) -> str: ...


def normalize_text(value: str) -> str:
    # Spaces within a line are data and stay, as do non-breaking spaces.
    return _LINE_BREAK_RUN.sub(" ", value).strip(HTML_WHITESPACE)


class HtmlDocument:
    def __init__(self, root: html.HtmlElement) -> None:
        self.root = root

    @classmethod
    def from_string(cls, text: str) -> "HtmlDocument":
        try:
            return cls(html.document_fromstring(text))
        except etree.ParserError as exc:
            raise ValueError(f"Unreadable report: {exc}") from exc

    def select(self, path: str, context: Optional[Any] = None) -> list[Any]:
        base = self.root if context is None else context
        try:
            result = base.xpath(path)
        except etree.XPathError as exc:
            raise ValueError(f"Invalid path expression {path!r}: {exc}") from exc
        if isinstance(result, list):
            return result
        return [result]

    def text(self, node: Any) -> str:
        if isinstance(node, str):
            return normalize_text(node)
        return normalize_text(node.text_content())


def load_document(path: Path, encoding: str = "utf-8") -> HtmlDocument:
    logger.debug("Loading report %s", path)
    text = path.read_text(encoding=encoding)
    return HtmlDocument.from_string(text)
