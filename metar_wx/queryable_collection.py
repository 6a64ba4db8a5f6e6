"""
Queryable collection classes for fluent, composable queries.

A small, chainable wrapper around a list for filtering in-memory results.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Examples:
        # Basic filtering
        collection.filter(lambda x: x.ok).all()

        # Attribute matching
        collection.where(station='KTIK').first()

        # Sorting
        collection.order_by(lambda x: x.observed, reverse=True).first()
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Examples:
            weather.where(station='KTIK', source='avwx')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def last(self) -> Optional[T]:
        """Return the last item or None if collection is empty."""
        return self._items[-1] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        """Return the count of items in the collection."""
        return len(self._items)

    def group_by(self, key_func: Callable[[T], str]) -> Dict[str, List[T]]:
        """
        Group items by a key function.

        Args:
            key_func: Function that returns a grouping key for each item

        Returns:
            Dictionary mapping keys to lists of items
        """
        result: Dict[str, List[T]] = {}
        for item in self._items:
            result.setdefault(key_func(item), []).append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        Args:
            key_func: Function that returns a sort key for each item
            reverse: If True, sort in descending order
        """
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    # Make the collection behave like a list
    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        class_name = self.__class__.__name__
        count = len(self._items)
        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'station'):
                preview_items.append(repr(item.station))
            else:
                preview_items.append(f"<{type(item).__name__}>")
        if count > 3:
            preview_items.append('...')
        return f"{class_name}([{', '.join(preview_items)}], count={count})"
