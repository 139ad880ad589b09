"""AsciiDoc conditional preprocessing, source locations and block style analysis."""

__version__ = "0.1.0"