from collections.abc import Callable, Iterable
from functools import reduce
from typing import TypeVar

from returns.io import IOResultE

_T = TypeVar("_T")
_R = TypeVar("_R")


def sequence(
    items: Iterable[_T], func: Callable[[_T], IOResultE[_R]]
) -> IOResultE[tuple[_R, ...]]:
    """Applies 'func' to every item in order and collects the results.

    Stops at the first failure: items after it are never passed to 'func'.
    """
    return reduce(
        lambda acc, item: acc.bind(
            lambda done: func(item).map(lambda res: (*done, res))
        ),
        items,
        IOResultE.from_value(()),
    )


def flatten(results: Iterable[tuple[_T, ...]]) -> tuple[_T, ...]:
    return sum(results, ())
