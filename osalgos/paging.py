"""Page replacement simulations: FIFO, LRU and optimal replacement."""

from __future__ import annotations

from collections import OrderedDict, deque
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterable, Sequence


class PageAction(Enum):
    """What happened to a page during an access."""

    ADDED = "added"
    REMOVED = "removed"
    HIT = "hit"
    ACCESSED = "accessed"


@dataclass(frozen=True)
class PageEvent:
    """A single step of a page replacement simulation."""

    action: PageAction
    page: Hashable


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"capacity must be at least 1: {capacity}")
    return capacity


class FifoMemory:
    """Page frames that evict the page loaded earliest."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._order: deque[Hashable] = deque()
        self._resident: set[Hashable] = set()

    def access(self, page: Hashable) -> list[PageEvent]:
        """Request a page and return what the memory did."""
        if page in self._resident:
            return [PageEvent(PageAction.HIT, page)]
        events = []
        if len(self._order) == self.capacity:
            oldest = self._order.popleft()
            self._resident.discard(oldest)
            events.append(PageEvent(PageAction.REMOVED, oldest))
        self._order.append(page)
        self._resident.add(page)
        events.append(PageEvent(PageAction.ADDED, page))
        return events

    def contents(self) -> list[Hashable]:
        """Resident pages, oldest first."""
        return list(self._order)


class LruMemory:
    """Page frames that evict the least recently used page."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        # Most recently used page is kept at the end.
        self._pages: OrderedDict[Hashable, None] = OrderedDict()

    def access(self, page: Hashable) -> list[PageEvent]:
        """Request a page, making it the most recently used one."""
        events = []
        if page in self._pages:
            self._pages.move_to_end(page)
        else:
            if len(self._pages) == self.capacity:
                victim, _ = self._pages.popitem(last=False)
                events.append(PageEvent(PageAction.REMOVED, victim))
            self._pages[page] = None
        events.append(PageEvent(PageAction.ADDED, page))
        return events

    def contents(self) -> list[Hashable]:
        """Resident pages, most recently used first."""
        return list(reversed(self._pages))


@dataclass(frozen=True)
class OptimalResult:
    """Outcome of an optimal replacement run."""

    events: tuple[PageEvent, ...]
    faults: int
    resident: tuple[Hashable, ...]


def _choose_victim(
    requests: Sequence[Hashable], memory: Iterable[Hashable], start: int
) -> Hashable:
    resident = list(memory)
    wanted = set(resident)
    last_use: dict[Hashable, int] = {}
    for index, page in enumerate(requests[start:], start):
        if page in wanted:
            last_use[page] = index
    for page in resident:
        if page not in last_use:
            return page
    return max(resident, key=last_use.__getitem__)


def optimal_replacement(requests: Sequence[Hashable], capacity: int) -> OptimalResult:
    """Replay requests, evicting a page never requested again if there is one,
    otherwise the page whose last future request comes latest."""
    _check_capacity(capacity)
    memory: dict[Hashable, None] = {}
    events: list[PageEvent] = []
    faults = 0
    for index, page in enumerate(requests):
        if page not in memory:
            if len(memory) == capacity:
                victim = _choose_victim(requests, memory, index + 1)
                del memory[victim]
                events.append(PageEvent(PageAction.REMOVED, victim))
            memory[page] = None
            events.append(PageEvent(PageAction.ADDED, page))
            faults += 1
        events.append(PageEvent(PageAction.ACCESSED, page))
    return OptimalResult(tuple(events), faults, tuple(memory))


_MESSAGES = {
    PageAction.ADDED: "Added page {} to memory.",
    PageAction.REMOVED: "Removed page {} from memory.",
    PageAction.HIT: "Page {} already in memory.",
    PageAction.ACCESSED: "Accessed page {}.",
}


def format_events(events: Iterable[PageEvent]) -> str:
    """Describe each event on its own line."""
    return "".join(_MESSAGES[event.action].format(event.page) + "\n" for event in events)


def format_contents(pages: Iterable[Hashable]) -> str:
    """Describe the resident pages on one line."""
    return "Memory contents: " + ", ".join(f"Page {page}" for page in pages)