"""Association maps between streaming entities.

Relationships such as "artist has albums" or "song is liked by users" are
kept outside the entities, as ordered tables from an entity id to the list of
related entities. There are no back-references: going from a song to its
album means scanning the table with :meth:`AssociationMap.find_key`.
"""

from typing import Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')


class AssociationMap(Generic[T]):
    """Ordered mapping of entity id -> list of related entities.

    Membership tests use identity, matching how entities compare.
    """

    def __init__(self, name: str):
        self.name = name
        self._links: Dict[str, List[T]] = {}

    def link(self, key: str, item: T) -> None:
        """Append ``item`` to the list stored under ``key``."""
        self._links.setdefault(key, []).append(item)

    def put(self, key: str, items: Iterable[T]) -> None:
        """Replace the list stored under ``key``."""
        self._links[key] = list(items)

    def get(self, key: str) -> List[T]:
        """Get the related entities for ``key``, empty if none were linked."""
        return self._links.get(key, [])

    def contains(self, key: str, item: T) -> bool:
        """Check whether ``item`` is linked under ``key``."""
        return any(linked is item for linked in self._links.get(key, ()))

    def find_key(self, item: T) -> Optional[str]:
        """Find the first key whose list holds ``item``.

        Keys are scanned in insertion order.
        """
        for key, items in self._links.items():
            if any(linked is item for linked in items):
                return key
        return None

    def keys(self) -> List[str]:
        return list(self._links)

    def __contains__(self, key: object) -> bool:
        return key in self._links

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f"AssociationMap({self.name!r}, keys={len(self._links)})"
