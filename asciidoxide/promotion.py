"""Style promotion: how a block's style and positionals change its final name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from asciidoxide.raw_block import RawBlock

_KNOWN_BLOCK_NAMES = frozenset(
    {
        "literal",
        "listing",
        "pass",
        "quote",
        "section",
        "example",
        "sidebar",
        "open",
        "list",
        "dlist",
        "listItem",
        "dlistItem",
        "break",
        "heading",
        "image",
        "verse",
        "stem",
    }
)

# Styles that only select a block kind and are not emitted on the block.
_CONSUMED_STYLES = frozenset({"source", "listing", "stem", "verse", "quote"})


@dataclass(frozen=True)
class StylePromotion:
    """The outcome of analysing a raw block's style and positional attributes."""

    name: str
    language: Optional[str] = None
    attribution: Optional[str] = None
    citetitle: Optional[str] = None
    emit_style: Optional[str] = None


def slugify(title: str) -> str:
    """Build a section ID from a title.

    ASCII letters and digits are kept in lower case; every run of other
    characters becomes a single ``_``. The result starts with ``_`` and
    has no trailing underscores.
    """
    parts = ["_"]
    prev_underscore = True
    for ch in title:
        if ch.isascii() and ch.isalnum():
            parts.append(ch.lower())
            prev_underscore = False
        elif not prev_underscore:
            parts.append("_")
            prev_underscore = True
    return "".join(parts).rstrip("_")


def static_block_name(name: str) -> str:
    """Return ``name`` if it is a known block name, otherwise ``"paragraph"``."""
    return name if name in _KNOWN_BLOCK_NAMES else "paragraph"


def _positional(raw: RawBlock, index: int) -> Optional[str]:
    """Return the positional at ``index`` if it exists and is not empty."""
    if len(raw.positionals) > index and raw.positionals[index]:
        return raw.positionals[index]
    return None


def analyze_style_promotion(raw: RawBlock) -> StylePromotion:
    """Work out the promoted block name and the attributes the style implies."""
    name = static_block_name(raw.name)
    language: Optional[str] = None
    style = raw.style
    positionals = raw.positionals

    if style == "source" and raw.name == "literal":
        name = "listing"
        language = _positional(raw, 1)
    elif style == "source" and raw.name == "listing":
        language = _positional(raw, 1)
    elif (
        style is None
        and raw.name == "listing"
        and len(positionals) > 1
        and not positionals[0]
    ):
        language = _positional(raw, 1)
    elif style == "stem" and raw.name == "pass":
        name = "stem"
    elif style == "verse" and raw.name == "quote":
        name = "verse"

    if (
        raw.name == "listing"
        and raw.delimiter is not None
        and raw.delimiter.startswith("`")
        and _positional(raw, 1) is not None
    ):
        language = _positional(raw, 1)

    attribution: Optional[str] = None
    citetitle: Optional[str] = None
    if name in ("quote", "verse"):
        first = _positional(raw, 1)
        second = _positional(raw, 2)
        attribution = first.strip() if first is not None else None
        citetitle = second.strip() if second is not None else None

    emit_style = None if style in _CONSUMED_STYLES else style

    return StylePromotion(
        name=name,
        language=language,
        attribution=attribution,
        citetitle=citetitle,
        emit_style=emit_style,
    )