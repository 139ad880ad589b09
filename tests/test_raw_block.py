from asciidoxide.raw_block import PendingMetadata, RawBlock
from asciidoxide.span import SourceSpan


def test_new_raw_block_is_empty():
    block = RawBlock("paragraph")
    assert block.name == "paragraph"
    assert block.roles == []
    assert block.positionals == []
    assert block.blocks is None
    assert block.content_span is None


def test_raw_blocks_do_not_share_lists():
    first = RawBlock("paragraph")
    second = RawBlock("paragraph")
    first.roles.append("lead")
    assert second.roles == []


def test_is_comment():
    assert PendingMetadata(style="comment").is_comment() is True
    assert PendingMetadata(style="source").is_comment() is False
    assert PendingMetadata().is_comment() is False


def test_apply_fills_unset_fields():
    title = SourceSpan(1, 6)
    reftext = SourceSpan(10, 14)
    meta = PendingMetadata(
        title_span=title, id="intro", style="source", reftext_span=reftext
    )
    block = RawBlock("listing")
    meta.apply_to(block)
    assert block.title_span == title
    assert block.id == "intro"
    assert block.style == "source"
    assert block.reftext_span == reftext


def test_apply_keeps_existing_fields():
    own_title = SourceSpan(0, 3)
    block = RawBlock("section", id="mine", style="discrete", title_span=own_title)
    meta = PendingMetadata(title_span=SourceSpan(5, 9), id="other", style="abstract")
    meta.apply_to(block)
    assert block.id == "mine"
    assert block.style == "discrete"
    assert block.title_span == own_title


def test_apply_appends_roles_and_options():
    block = RawBlock("paragraph", roles=["a"], options=["x"])
    meta = PendingMetadata(roles=["b", "c"], options=["y"])
    meta.apply_to(block)
    assert block.roles == ["a", "b", "c"]
    assert block.options == ["x", "y"]


def test_apply_positionals_only_when_empty():
    empty = RawBlock("listing")
    PendingMetadata(positionals=["source", "rust"]).apply_to(empty)
    assert empty.positionals == ["source", "rust"]

    filled = RawBlock("listing", positionals=["literal"])
    PendingMetadata(positionals=["source", "rust"]).apply_to(filled)
    assert filled.positionals == ["literal"]


def test_apply_named_attributes_extend():
    empty = RawBlock("image")
    PendingMetadata(named_attributes=[("alt", "cat")]).apply_to(empty)
    assert empty.named_attributes == [("alt", "cat")]

    filled = RawBlock("image", named_attributes=[("width", "100")])
    PendingMetadata(named_attributes=[("alt", "cat")]).apply_to(filled)
    assert filled.named_attributes == [("width", "100"), ("alt", "cat")]


def test_apply_does_not_alias_metadata_positionals():
    meta = PendingMetadata(positionals=["quote", "Someone"])
    block = RawBlock("quote")
    meta.apply_to(block)
    block.positionals.append("extra")
    assert meta.positionals == ["quote", "Someone"]