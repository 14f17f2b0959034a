from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Sequence
from bookstore.schemas.aggregate import AuthorGroup, AuthorKey, CombinedAuthorRecord, Summary, author_key

# Fields kept per item in each view
BOOK_GROUP_FIELDS = ("title", "isbn")
MAGAZINE_GROUP_FIELDS = ("title", "isbn")
COMBINED_BOOK_FIELDS = ("title", "isbn", "publish_date")
COMBINED_MAGAZINE_FIELDS = ("title", "issue", "publish_date")


def _value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def summarize(record: Any, summary_fields: Sequence[str]) -> Summary:
    return {name: _value(record, name) for name in summary_fields}


def group_by_author(records: Iterable[Any], summary_fields: Sequence[str]) -> List[AuthorGroup]:
    """
    Partition records by author and rank the partitions by size.

    Records without an author all land in the single ``Unknown`` group.
    Items keep the order the records were given in. Groups are sorted by
    item count, largest first; the relative order of equal-sized groups is
    not part of the contract.
    """
    groups: Dict[AuthorKey, AuthorGroup] = {}
    for record in records:
        key = author_key(_value(record, "author"))
        group = groups.get(key)
        if group is None:
            group = groups[key] = AuthorGroup(author=key, item_count=0)
        group.items.append(summarize(record, summary_fields))
        group.item_count += 1
    return sorted(groups.values(), key=lambda group: group.item_count, reverse=True)


def merge(book_groups: Sequence[AuthorGroup], magazine_groups: Sequence[AuthorGroup]) -> List[CombinedAuthorRecord]:
    """
    Combine per-author book and magazine groups into one record per author.

    Every author with books comes first, in the order of ``book_groups``,
    carrying its magazines when it has any. Authors with magazines only
    follow in the order of ``magazine_groups``. The result is therefore
    ranked by book count, not by combined count.
    """
    magazines_by_author: Dict[AuthorKey, AuthorGroup] = {}
    for group in magazine_groups:
        magazines_by_author.setdefault(group.author, group)

    combined: List[CombinedAuthorRecord] = []
    seen = set()
    for books in book_groups:
        magazines = magazines_by_author.get(books.author)
        combined.append(CombinedAuthorRecord(
            author=books.author,
            book_count=books.item_count,
            books=list(books.items),
            magazine_count=magazines.item_count if magazines else 0,
            magazines=list(magazines.items) if magazines else [],
        ))
        seen.add(books.author)

    for magazines in magazine_groups:
        if magazines.author in seen:
            continue
        combined.append(CombinedAuthorRecord(
            author=magazines.author,
            magazine_count=magazines.item_count,
            magazines=list(magazines.items),
        ))
        seen.add(magazines.author)
    return combined
