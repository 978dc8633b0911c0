"""
Filter entries - post-processing steps over report rows.
A filter is either a registered filter name or a callable, with parameters
and a priority flag.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple, Union

from models.errors import InvalidFilterError


@dataclass(frozen=True)
class NamedFilter:
    """Filter looked up by name in the filter registry."""

    name: str
    parameters: Tuple[Any, ...] = ()
    priority: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'parameters', tuple(self.parameters))

    @property
    def target(self) -> str:
        return self.name


@dataclass(frozen=True)
class CallableFilter:
    """Filter given as a callable taking the rows followed by the parameters."""

    func: Callable
    parameters: Tuple[Any, ...] = ()
    priority: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'parameters', tuple(self.parameters))

    @property
    def target(self) -> Callable:
        return self.func


Filter = Union[NamedFilter, CallableFilter]

# (name or callable, parameters) pair as handed to the filter runner
FilterToRun = Tuple[Union[str, Callable], List[Any]]


def make_filter(name_or_callable: Union[str, Callable], parameters=None,
                priority: bool = False) -> Filter:
    """
    Build the filter variant matching a name or a callable.

    Args:
        name_or_callable: Registered filter name or callable
        parameters: Filter parameters
        priority: Whether the filter runs before generic filters

    Returns:
        NamedFilter or CallableFilter
    """
    parameters = tuple(parameters or ())
    if isinstance(name_or_callable, str):
        return NamedFilter(name_or_callable, parameters, priority)
    if callable(name_or_callable):
        return CallableFilter(name_or_callable, parameters, priority)
    raise InvalidFilterError(
        f"Filter must be a name or a callable, got {type(name_or_callable).__name__}"
    )


def normalize_filter(entry: Any) -> Filter:
    """
    Normalize a filter list entry.

    Entries are filters, bare callables (non-priority, without parameters) or
    (name or callable, parameters, priority) triples.

    Raises:
        InvalidFilterError: If the entry has none of these shapes
    """
    if isinstance(entry, (NamedFilter, CallableFilter)):
        return entry
    if callable(entry):
        return CallableFilter(entry)
    if _is_filter_triple(entry):
        return make_filter(*entry)
    raise InvalidFilterError(f"Invalid filter entry: {entry!r}")


def _is_filter_triple(entry: Any) -> bool:
    if not isinstance(entry, (list, tuple)) or len(entry) != 3:
        return False
    _, parameters, priority = entry
    return isinstance(parameters, Sequence) and not isinstance(parameters, str) \
        and isinstance(priority, bool)


def split_filters(entries: List[Any]) -> Tuple[List[FilterToRun], List[FilterToRun]]:
    """
    Partition filters into priority and queued filters, keeping declaration order.

    Returns:
        (priority filters, queued filters), each as (name or callable, parameters)
    """
    priority_filters: List[FilterToRun] = []
    queued_filters: List[FilterToRun] = []

    for entry in entries:
        filter_entry = normalize_filter(entry)
        pair = (filter_entry.target, list(filter_entry.parameters))
        if filter_entry.priority:
            priority_filters.append(pair)
        else:
            queued_filters.append(pair)

    return priority_filters, queued_filters
