"""
Item queries over a Document.

`find()` returns an ItemQuery: a lazy, re-iterable view that walks the
stored Document each time it is iterated. Nothing is copied or cached.
"""

import logging
from typing import Callable, Iterator, Optional

from .models import Document, Item

logger = logging.getLogger(__name__)

Predicate = Callable[[Item], bool]


class ItemQuery:
    """Items of a document matching every predicate, in document order."""

    def __init__(self, document: Document, predicates: tuple[Predicate, ...] = ()):
        self.document = document
        self.predicates = predicates

    def __iter__(self) -> Iterator[Item]:
        for chapter in self.document.chapters:
            for item in chapter.items:
                if all(p(item) for p in self.predicates):
                    yield item

    def where(self, predicate: Predicate) -> "ItemQuery":
        """Narrow the query; the original query is left unchanged."""
        return ItemQuery(self.document, self.predicates + (predicate,))

    def first(self) -> Optional[Item]:
        return next(iter(self), None)

    def count(self) -> int:
        return sum(1 for _ in self)

    def numbers(self) -> list[int]:
        return [item.number for item in self]

    def __repr__(self) -> str:
        return f"ItemQuery(predicates={len(self.predicates)})"


def find(document: Document, predicate: Optional[Predicate] = None) -> ItemQuery:
    """Items matching `predicate` (all items when omitted)."""
    query = ItemQuery(document)
    if predicate is not None:
        query = query.where(predicate)
    logger.debug(f"[FIND] {query!r} over {len(document.chapters)} chapters")
    return query


def title_contains(text: str) -> Predicate:
    """Case-insensitive substring match on the item title."""
    needle = text.lower()
    return lambda item: needle in item.title.lower()


def in_chapter(number: int) -> Predicate:
    return lambda item: item.chapter is not None and item.chapter.number == number


def number_between(low: Optional[int] = None, high: Optional[int] = None) -> Predicate:
    """Inclusive item-number range; either bound may be omitted."""
    def predicate(item: Item) -> bool:
        if low is not None and item.number < low:
            return False
        if high is not None and item.number > high:
            return False
        return True
    return predicate


def mentions(text: str) -> Predicate:
    """Case-insensitive substring match on the title or any block text."""
    needle = text.lower()

    def predicate(item: Item) -> bool:
        if needle in item.title.lower():
            return True
        return any(needle in t.lower() for t in item.texts())
    return predicate
