from typing import Callable, List, Tuple, TypeVar, Union

from . import maybe

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        builds,
        composite,
        floats,
        integers,
        just,
        lists as lists_,
        one_of,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use pmaybe.hypothesis_strategies, '
        'install pmaybe with \n\n\tpip install pmaybe[test]'
    )

A = TypeVar('A')


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.
    Never produces ``None``

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2
    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw: Callable[[SearchStrategy[A]], A]) -> Callable[[object], A]:
        a = draw(return_strategy)
        return lambda _: a

    return _()


def presents(value_strategy: SearchStrategy[A]
             ) -> SearchStrategy[maybe.Maybe[A]]:
    """
    Create a search strategy that produces `pmaybe.maybe.Present` values

    Example:
        >>> presents(integers()).example()
        Present(1)
    Args:
        value_strategy: search strategy to draw values from
    Return:
        search strategy that produces `pmaybe.maybe.Present` values
    """
    return builds(maybe.present, value_strategy)


def maybes(value_strategy: SearchStrategy[A],
           present_none: bool = True) -> SearchStrategy[maybe.Maybe[A]]:
    """
    Create a search strategy that produces `pmaybe.maybe.Maybe` values,
    including `present(None)` unless ``present_none`` is False

    Example:
        >>> maybes(integers()).example()
        Present(1)
    Args:
        value_strategy: search strategy to draw values from
        present_none: whether to produce `Present` values holding ``None``
    Return:
        search strategy that produces `pmaybe.maybe.Maybe` values
    """
    strategies = [presents(value_strategy), just(maybe.Absent())]
    if present_none:
        strategies.append(just(maybe.present(None)))
    return one_of(*strategies)


def lists(elements: SearchStrategy[A],
          min_size: int = 0,
          max_size: int = 10) -> SearchStrategy[List[A]]:
    """
    Create a search strategy that produces lists

    Args:
        elements: strategy used to draw list elements
        min_size: minimum list length
        max_size: maximum list length
    Return:
        search strategy that produces lists
    """
    return lists_(elements, min_size=min_size, max_size=max_size)


__all__ = ['anything', 'unaries', 'presents', 'maybes', 'lists']
