"""
Derived per-author views.

These are computed on every request from the records in the store and are
never persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Summary = Dict[str, Any]


@dataclass(frozen=True)
class Known:
    """An author value present on the record."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Unknown:
    """The shared key of every record without an author."""

    def __str__(self) -> str:
        return "Unknown author"


AuthorKey = Union[Known, Unknown]


def author_key(author: Optional[str]) -> AuthorKey:
    if author is None:
        return Unknown()
    return Known(author)


@dataclass
class AuthorGroup:
    author: AuthorKey
    item_count: int
    items: List[Summary] = field(default_factory=list)


@dataclass
class CombinedAuthorRecord:
    author: AuthorKey
    book_count: int = 0
    books: List[Summary] = field(default_factory=list)
    magazine_count: int = 0
    magazines: List[Summary] = field(default_factory=list)
