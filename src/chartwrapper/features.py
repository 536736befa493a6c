"""Feature fragments and the sources contributing them to a chart url."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Iterator, Protocol, TypeVar, runtime_checkable

from .constants import DEFAULT_SEPARATOR


@dataclass(frozen=True, slots=True)
class Fragment:
    """One prefixed piece of url data, e.g. ``chco`` / ``ff0000``."""
    prefix: str
    data: str


@runtime_checkable
class FeatureSource(Protocol):
    """Anything contributing fragments to a chart."""

    def fragments(self) -> Iterable[Fragment]:
        ...


ItemT = TypeVar("ItemT")


class StaticSource:
    """Source always contributing the same fragments."""

    def __init__(self, *fragments: Fragment):
        self._fragments = tuple(fragments)

    def fragments(self) -> Iterator[Fragment]:
        return iter(self._fragments)


class GenericAppender(Generic[ItemT]):
    """
    Ordered list of items sharing one url prefix.

    Items provide a ``to_url_data()`` method. All items are rendered into a
    single fragment, joined by the appender's separator. An empty appender
    contributes nothing.
    """

    def __init__(self, prefix: str, separator: str = DEFAULT_SEPARATOR):
        """
        Initialize the appender.

        Args:
            prefix: Url parameter name of the fragment, e.g. ``chco``
            separator: String placed between the items' data
        """
        if separator is None:
            raise ValueError("separator can not be None")
        self.prefix = prefix
        self.separator = separator
        self._items: list[ItemT] = []

    @property
    def items(self) -> tuple[ItemT, ...]:
        return tuple(self._items)

    def add(self, item: ItemT) -> None:
        if item is None:
            raise ValueError("item can not be None")
        self._items.append(item)

    def extend(self, items: Iterable[ItemT]) -> None:
        if items is None:
            raise ValueError("items can not be None")
        item_list = list(items)
        if any(item is None for item in item_list):
            raise ValueError("items can not contain None")
        for item in item_list:
            self.add(item)

    def remove(self, item: ItemT) -> bool:
        """Remove ``item``; return whether it was present."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def remove_at(self, index: int) -> ItemT:
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def fragments(self) -> Iterator[Fragment]:
        if not self._items:
            return
        yield Fragment(
            self.prefix, self.separator.join(item.to_url_data() for item in self._items)
        )

    def __len__(self) -> int:
        return len(self._items)


class UpperLimitReaction(Enum):
    """What an :class:`UpperLimitAppender` does when it is full."""
    RAISE = "raise"
    REMOVE_FIRST = "remove_first"


class UpperLimitAppender(GenericAppender[ItemT]):
    """A :class:`GenericAppender` holding at most ``limit`` items."""

    def __init__(
        self,
        prefix: str,
        limit: int,
        reaction: UpperLimitReaction = UpperLimitReaction.RAISE,
        separator: str = DEFAULT_SEPARATOR,
    ):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        super().__init__(prefix, separator)
        self.limit = limit
        self.reaction = reaction

    def add(self, item: ItemT) -> None:
        if item is None:
            raise ValueError("item can not be None")
        if len(self._items) >= self.limit:
            if self.reaction is UpperLimitReaction.RAISE:
                raise ValueError(f"'{self.prefix}' accepts at most {self.limit} item(s)")
            self._items.pop(0)
        self._items.append(item)
