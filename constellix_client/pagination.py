#
#
#

"""Pagination of list responses.

A list call against the API fetches exactly one page. The page's items,
the total item count reported by the API and the requested page window are
handed to a paginator factory, which decides what the caller gets back. By
default that's a :class:`Paginator`, loosely modelled on Laravel's
LengthAwarePaginator.
"""

from typing import (
    Generic,
    Iterator,
    List,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from .exceptions import InvalidArgument

T = TypeVar('T')
P = TypeVar('P', covariant=True)


class Paginator(Generic[T]):
    """One page of a larger, already fetched result set.

    Can be iterated over, indexed and measured with ``len``. The page window
    (``total``, ``per_page``, ``current_page``) is fixed at construction,
    only the items themselves may be replaced or removed afterwards.
    """

    def __init__(
        self,
        items: Sequence[T],
        total_items: int,
        per_page: int,
        current_page: int = 1,
    ):
        if per_page < 1:
            raise InvalidArgument(
                f'per_page must be at least 1, not {per_page}'
            )
        if total_items < 0:
            raise InvalidArgument(
                f'total_items must not be negative, not {total_items}'
            )
        if current_page < 1:
            raise InvalidArgument(
                f'current_page must be at least 1, not {current_page}'
            )

        self._items: List[T] = list(items)
        self._total_items = total_items
        self._per_page = per_page
        self._current_page = current_page
        # ceiling division, never less than one page
        self._last_page = max(-(-total_items // per_page), 1)

    def __repr__(self):
        return (
            f'<Paginator page={self._current_page}/{self._last_page} '
            f'count={len(self._items)} total={self._total_items}>'
        )

    # --- Indexed access ---------------------------------------------------

    def has_offset(self, offset: int) -> bool:
        return 0 <= offset < len(self._items)

    def __getitem__(self, offset: int) -> T:
        if not self.has_offset(offset):
            raise IndexError(f'page offset {offset} out of range')
        return self._items[offset]

    def __setitem__(self, offset: int, value: T) -> None:
        if self.has_offset(offset):
            self._items[offset] = value
        elif offset >= 0:
            # offsets stay contiguous, so an absent slot lands at the end
            self._items.append(value)
        else:
            raise IndexError(f'page offset {offset} out of range')

    def __delitem__(self, offset: int) -> None:
        if self.has_offset(offset):
            del self._items[offset]

    # --- Size & iteration -------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def count(self) -> int:
        """Number of items on the current page."""
        return len(self._items)

    def items(self) -> List[T]:
        """The items on the current page."""
        return list(self._items)

    # --- Page window ------------------------------------------------------

    def first_item(self) -> Optional[int]:
        """1-based index of the first item on this page across all pages."""
        if self._items:
            return (self._current_page - 1) * self._per_page + 1
        return None

    def last_item(self) -> Optional[int]:
        """1-based index of the last item on this page across all pages."""
        if self._items:
            return self.first_item() + self.count() - 1
        return None

    def per_page(self) -> int:
        return self._per_page

    def total(self) -> int:
        return self._total_items

    def last_page(self) -> int:
        return self._last_page

    def current_page(self) -> int:
        return self._current_page

    def on_first_page(self) -> bool:
        return self.current_page() <= 1

    def has_more_pages(self) -> bool:
        return self.current_page() < self.last_page()


class PaginatorFactoryInterface(Protocol[P]):
    """Protocol for objects that turn one fetched page into a result.

    The client hands every list response to its factory, so a substitute
    factory changes what ``manager.paginate()`` returns.
    """

    def paginate(
        self,
        items: Sequence,
        total_items: int,
        per_page: int,
        current_page: int = 1,
    ) -> P:
        """Build a page representation.

        Args:
            items: Already hydrated models for this page
            total_items: Total number of items across all pages
            per_page: Page size used for the request
            current_page: 1-indexed page number of ``items``

        Returns:
            The page representation
        """
        ...


class PaginatorFactory:
    """Default factory, produces :class:`Paginator` instances."""

    def paginate(
        self,
        items: Sequence[T],
        total_items: int,
        per_page: int,
        current_page: int = 1,
    ) -> Paginator[T]:
        return Paginator(items, total_items, per_page, current_page)
