"""Parser for the XML document returned by the Bitext sentiment service.

The service answers with::

    <?xml version="1.0" encoding="ISO-8859-1"?>
    <RESULT>
      <BLOCK><ID>1</ID><GLOBAL_VALUE>2.5</GLOBAL_VALUE><TEXT>"Great phone"</TEXT></BLOCK>
      ...
    </RESULT>

Text nodes frequently come wrapped in an extra pair of double quotes, which
``normalize_payload`` collapses before the document reaches the XML parser.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from xml.etree import ElementTree

DEFAULT_ENCODING = "utf-8"
ENCODING_PATTERN = re.compile(r'(?<=\bencoding=")[^"]*')


class BitextPayloadError(ValueError):
    """Raised when a response body cannot be turned into block scores."""


@dataclass(slots=True, frozen=True)
class BitextBlock:
    id: str
    value: float
    text: str


@dataclass(slots=True, frozen=True)
class BitextSentiment:
    blocks: tuple[BitextBlock, ...]

    def mean_score(self) -> float:
        if not self.blocks:
            raise BitextPayloadError("RESULT contains no BLOCK elements")
        return sum(block.value for block in self.blocks) / len(self.blocks)


def normalize_payload(text: str) -> str:
    return (
        text.replace("\r", "")
        .replace("\n", "")
        .replace('>"', ">")
        .replace('"<', "<")
    )


def detect_encoding(text: str) -> str:
    match = ENCODING_PATTERN.search(text)
    if match and match.group(0).strip():
        return match.group(0).strip()
    return DEFAULT_ENCODING


def polarity_label(score: float) -> str:
    if score < 0:
        return "negative"
    if score > 0:
        return "positive"
    return "neutral"


def _child_text(block: ElementTree.Element, tag: str) -> str | None:
    node = block.find(tag)
    if node is None:
        return None
    return node.text or ""


def _parse_block(index: int, element: ElementTree.Element) -> BitextBlock:
    raw_value = _child_text(element, "GLOBAL_VALUE")
    if raw_value is None:
        raise BitextPayloadError(f"BLOCK[{index}] is missing GLOBAL_VALUE")
    try:
        value = float(raw_value)
    except ValueError:
        raise BitextPayloadError(f"BLOCK[{index}] has non-numeric GLOBAL_VALUE {raw_value!r}") from None
    if not math.isfinite(value):
        raise BitextPayloadError(f"BLOCK[{index}] has non-finite GLOBAL_VALUE {raw_value!r}")
    return BitextBlock(
        id=_child_text(element, "ID") or "",
        value=value,
        text=_child_text(element, "TEXT") or "",
    )


def parse_payload(text: str) -> BitextSentiment:
    """Normalize ``text`` and parse it into typed blocks.

    The cleaned text is re-encoded with the encoding declared in the XML
    prolog (UTF-8 when absent) so the parser sees bytes matching the
    declaration.
    """
    cleaned = normalize_payload(text)
    encoding = detect_encoding(cleaned)
    try:
        # Characters the declared encoding cannot hold survive as character references.
        data = cleaned.encode(encoding, errors="xmlcharrefreplace")
    except LookupError:
        raise BitextPayloadError(f"Unknown response encoding {encoding!r}") from None

    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as exc:
        raise BitextPayloadError(f"Malformed XML response: {exc}") from None
    if root.tag != "RESULT":
        raise BitextPayloadError(f"Unexpected root element <{root.tag}>, expected <RESULT>")

    blocks = tuple(_parse_block(index, element) for index, element in enumerate(root.findall("BLOCK")))
    return BitextSentiment(blocks=blocks)
