"""Raw blocks: block structure with content kept as unparsed source spans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from asciidoxide.span import Location, SourceSpan


@dataclass
class RawBlock:
    """A block whose content is still held as source spans.

    Block boundary detection produces these; a later pass turns them into
    final blocks by parsing the inline content of the spans.
    """

    name: str
    form: Optional[str] = None
    delimiter: Optional[str] = None
    id: Optional[str] = None
    style: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    positionals: List[str] = field(default_factory=list)
    named_attributes: List[Tuple[str, str]] = field(default_factory=list)
    title_span: Optional[SourceSpan] = None
    content_span: Optional[SourceSpan] = None
    blocks: Optional[List[RawBlock]] = None
    items: Optional[List[RawBlock]] = None
    principal_span: Optional[SourceSpan] = None
    term_spans: List[SourceSpan] = field(default_factory=list)
    reftext_span: Optional[SourceSpan] = None
    level: Optional[int] = None
    variant: Optional[str] = None
    marker: Optional[str] = None
    target: Optional[str] = None
    heading_line_location: Optional[Location] = None
    location: Optional[Location] = None


@dataclass
class PendingMetadata:
    """Block metadata from attribute and title lines awaiting the next block."""

    title_span: Optional[SourceSpan] = None
    id: Optional[str] = None
    style: Optional[str] = None
    roles: List[str] = field(default_factory=list)
    options: List[str] = field(default_factory=list)
    positionals: List[str] = field(default_factory=list)
    named_attributes: List[Tuple[str, str]] = field(default_factory=list)
    reftext_span: Optional[SourceSpan] = None

    def is_comment(self) -> bool:
        """Return True if the metadata marks a comment block."""
        return self.style == "comment"

    def apply_to(self, block: RawBlock) -> None:
        """Fill in the block's unset fields and append roles, options and attributes."""
        if block.title_span is None:
            block.title_span = self.title_span
        if block.id is None:
            block.id = self.id
        if block.style is None:
            block.style = self.style
        if block.reftext_span is None:
            block.reftext_span = self.reftext_span
        block.roles.extend(self.roles)
        block.options.extend(self.options)
        if not block.positionals:
            block.positionals = list(self.positionals)
        block.named_attributes.extend(self.named_attributes)