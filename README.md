# asciidoxide

Building blocks for reading AsciiDoc documents:

- **Preprocessing** of conditional directives: `ifdef::attr[]`, `ifndef::attr[]`,
  `ifeval::[expression]` and `endif::[]`. Both the block form and the single-line
  form (`ifdef::attr[content]`) are supported, as are escaped directives
  (`\ifdef::attr[]`), which are emitted without the backslash.
- **Source locations**: converting UTF-8 byte offsets into 1-based line and
  column positions.
- **Block style analysis**: section ID slugs, and style promotion such as
  `[source,lang]` on listings or `[verse]` on quotes.

## Installation

```
pip install .
```

## Preprocessing

```python
from asciidoxide.preprocess import preprocess

source = "ifdef::debug[]\nDebug mode enabled\nendif::[]"
result = preprocess(source, {"debug": "true"})
print(result.content)       # "Debug mode enabled\n"
print(result.diagnostics)   # []
```

Every emitted line ends with a newline. If the input contains no directive
pattern at all, `result.content` is the input string, unchanged.

Attribute lists combine with `,` (any of them set) or `+` (all of them set).
An attribute with an empty value still counts as set:

```python
preprocess("ifdef::a+b[]\nboth\nendif::[]", {"a": "", "b": ""}).content  # "both\n"
```

`ifeval` compares numbers, quoted strings, booleans and `nil`/`null`. An unset
attribute counts as `nil`:

```python
preprocess("ifeval::[{level} > 2]\ndeep\nendif::[]", {"level": "3"}).content  # "deep\n"
```

Problems are reported, not raised. `result.diagnostics` is a list of
`PreprocessDiagnostic` values, each with a `span` (a `SourceSpan`), a
`message` and a `severity` (`PreprocessSeverity.WARNING` or
`PreprocessSeverity.ERROR`):

- an unclosed conditional gives a warning naming the line it started on;
- an `endif` with no open conditional gives a warning;
- an `ifeval` expression that cannot be evaluated gives an error, and its
  block is skipped.

### Lower-level pieces

```python
from asciidoxide.directive import parse_directive
from asciidoxide.conditional import evaluate_ifdef
from asciidoxide.expression import evaluate_expression

parse_directive("ifdef::a,b[]")
# Ifdef(attributes=('a', 'b'), combinator=<Combinator.OR: 'or'>, inline_content=None)
parse_directive("just text")                   # None

evaluate_ifdef(["a", "b"], parse_directive("ifdef::a+b[]").combinator, {"a": ""})  # False
evaluate_expression("{x} == 5", {"x": "5"})     # True
```

`parse_directive` returns one of `Ifdef`, `Ifndef`, `Ifeval`, `Endif` or
`Escaped`, or `None` for an ordinary line. `evaluate_ifndef` is the
counterpart of `evaluate_ifdef`.

`evaluate_expression` raises a subclass of `ExprError`:
`InvalidSyntaxError` when no operator is found, and `TypeMismatchError` when
booleans or `nil` are ordered with `<`, `<=`, `>` or `>=`, or a boolean is
compared with a non-boolean. A string compared with a number is converted to
a number when it reads as one, and compared as text otherwise.

## Source locations

```python
from asciidoxide.span import SourceIndex, SourceSpan

index = SourceIndex("ab\ncd")
index.position(3)                  # Position(line=2, col=1)
index.location(SourceSpan(0, 4))   # (Position(line=1, col=1), Position(line=2, col=1))
str(SourceSpan(3, 10))             # "3..10"
SourceSpan.from_range(range(2, 8)).to_range()  # range(2, 8)
```

Offsets are byte offsets into the UTF-8 encoding of the source; columns count
characters, and an offset inside a multi-byte character snaps back to its
start. The end of a location is inclusive: it points at the last byte of the
span (an empty span gives its start twice).

## Block style analysis

```python
from asciidoxide.raw_block import RawBlock
from asciidoxide.promotion import slugify, analyze_style_promotion, static_block_name

slugify("Section Title")           # "_section_title"
static_block_name("whatever")      # "paragraph"

promo = analyze_style_promotion(
    RawBlock("literal", style="source", positionals=["source", "rust"])
)
promo.name, promo.language, promo.emit_style   # ("listing", "rust", None)
```

`RawBlock` holds a block whose content is still source spans.
`PendingMetadata` collects title, ID, style, roles, options and attributes
for the next block; `apply_to` fills in the block's unset fields and appends
the rest, and `is_comment` tells whether the style is `comment`.

`analyze_style_promotion` returns a `StylePromotion` with the final block
name plus any `language`, `attribution` and `citetitle` it found, and the
style to emit (styles such as `source` and `verse` that only choose the
block kind are dropped).

## What this package does not do

There is no lexer, inline parser or block parser here: the package does not
turn a document into a tree of blocks and inline nodes, does not find block
boundaries to produce `RawBlock` values, and has no command-line tool. It
provides the preprocessing step, the location lookup and the style analysis
that such a parser would use.

## Running the tests

```
pip install .[test]
pytest
```