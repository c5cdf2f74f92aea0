"""HTML snippets built with lxml, so embedded text is always escaped."""

from __future__ import annotations

import re
from typing import Mapping

import lxml.html
from lxml import etree

# Characters libxml2 refuses to store in a text node
_XML_INCOMPATIBLE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _printable(text: str) -> str:
    return _XML_INCOMPATIBLE.sub(lambda match: f"\\u{ord(match.group()):04x}", text)


def html_element(
    tag: str,
    text: str | None = None,
    attributes: Mapping[str, str] | None = None,
) -> str:
    """Serialize a single element with escaped text and attributes.

    Args:
        tag: Element name, e.g. "span".
        text: Text content; "<", ">" and "&" are escaped.
        attributes: Attribute values; quotes and "&" are escaped.

    Returns:
        The element as an HTML string.
    """
    element = lxml.html.Element(tag)
    for name, value in (attributes or {}).items():
        element.set(name, _printable(value))
    if text:
        element.text = _printable(text)
    return etree.tostring(element, encoding="unicode", method="html")


def to_plain_text(fragment: str) -> str:
    """Strip the tags from an HTML fragment, unescaping its text."""
    if "<" not in fragment and "&" not in fragment:
        return fragment
    return str(lxml.html.fragment_fromstring(fragment, create_parent="div").text_content())
