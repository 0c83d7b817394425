"""
Field Extractor - tolerant tag lookup for FPDS feed fragments

This is NOT an XML parser. It scans a fragment for the first opening tag
with the requested name (optionally behind an ``nsN:`` namespace alias) and
returns the text up to the next ``<``. FPDS switches namespace prefixes
between feed revisions and sometimes serves malformed documents, so a
forgiving first-match scan recovers more data than a strict parse would.

Limitations:
- nesting is not tracked
- only the first occurrence of a tag is ever seen
- self-closing tags have no text
"""
import html
import re
from functools import lru_cache
from typing import Optional

_NAMESPACED = r"ns\d+:"

# Tag name must end here, so "agencyID" never matches "<agencyIDType>"
_TAG_END = r"(?=[\s/>])"


@lru_cache(maxsize=256)
def _text_pattern(tag: str, namespaced: bool) -> re.Pattern:
    prefix = _NAMESPACED if namespaced else ""
    return re.compile(
        rf"<{prefix}{re.escape(tag)}{_TAG_END}[^>]*(?<!/)>([^<]*)<",
        re.IGNORECASE
    )


@lru_cache(maxsize=256)
def _attribute_pattern(tag: str, attribute: str, namespaced: bool) -> re.Pattern:
    prefix = _NAMESPACED if namespaced else ""
    return re.compile(
        rf"<{prefix}{re.escape(tag)}{_TAG_END}[^>]*?\s{re.escape(attribute)}\s*=\s*"
        r"(?:\"([^\"]*)\"|'([^']*)')",
        re.IGNORECASE
    )


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = html.unescape(value).strip()
    return value or None


def extract_text(markup: str, tag: str) -> Optional[str]:
    """Text content of the first <tag> (namespaced form first), or None"""
    for namespaced in (True, False):
        match = _text_pattern(tag, namespaced).search(markup)
        if match:
            return _clean(match.group(1))
    return None


def extract_attribute(markup: str, tag: str, attribute: str) -> Optional[str]:
    """Value of attribute on the first <tag> (namespaced form first), or None"""
    for namespaced in (True, False):
        match = _attribute_pattern(tag, attribute, namespaced).search(markup)
        if match:
            value = match.group(1) if match.group(1) is not None else match.group(2)
            return _clean(value)
    return None


class FieldExtractor:
    """First-match lookups bound to a single markup fragment"""

    def __init__(self, markup: str):
        self.markup = markup or ""

    def find_first(self, tag: str) -> Optional[str]:
        return extract_text(self.markup, tag)

    def find_attribute(self, tag: str, attribute: str) -> Optional[str]:
        return extract_attribute(self.markup, tag, attribute)
