"""Evaluation of ``ifdef`` and ``ifndef`` attribute conditions."""

from __future__ import annotations

from typing import Iterable, Mapping

from asciidoxide.directive import Combinator


def evaluate_ifdef(
    attributes: Iterable[str],
    combinator: Combinator,
    doc_attributes: Mapping[str, str],
) -> bool:
    """Return True if the ``ifdef`` condition holds.

    With ``Combinator.OR`` any named attribute must be set; with
    ``Combinator.AND`` all of them must be.
    """
    present = (name in doc_attributes for name in attributes)
    return any(present) if combinator is Combinator.OR else all(present)


def evaluate_ifndef(
    attributes: Iterable[str],
    combinator: Combinator,
    doc_attributes: Mapping[str, str],
) -> bool:
    """Return True if the ``ifndef`` condition holds.

    With ``Combinator.OR`` any named attribute must be unset; with
    ``Combinator.AND`` all of them must be.
    """
    absent = (name not in doc_attributes for name in attributes)
    return any(absent) if combinator is Combinator.OR else all(absent)