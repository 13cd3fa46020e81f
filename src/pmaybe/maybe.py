import logging
from abc import ABC, abstractmethod
from functools import reduce, wraps
from typing import (Any, Callable, Generic, Iterable, Optional, Tuple,
                    TypeVar, Union, cast)

from .functions import curry, identity
from .immutable import Immutable

logger = logging.getLogger(__name__)

A = TypeVar('A', covariant=True)
B = TypeVar('B')
C = TypeVar('C')
F = TypeVar('F', bound=Callable[..., Any])


class EmptyValueAccessError(Exception):
    """
    Raised when the value of an `Absent` container is accessed
    with `get`
    """


class Maybe_(Immutable, ABC):
    """
    Abstract super class for containers that hold zero or one value.
    Should not be instantiated directly.
    Use `wrap`, `present` or `absent` instead.

    """
    @abstractmethod
    def is_absent(self) -> bool:
        """
        Test whether this container holds no value

        Example:
            >>> wrap(None).is_absent()
            True
            >>> wrap(0).is_absent()
            False

        Return:
            True if the held value is ``None``, False otherwise
        """
        raise NotImplementedError()

    def is_present(self) -> bool:
        """
        Test whether this container holds a value

        Example:
            >>> wrap('value').is_present()
            True

        Return:
            The negation of `is_absent`
        """
        return not self.is_absent()

    @abstractmethod
    def map(self, f: Callable) -> Any:
        """
        Apply ``f`` to the held value and wrap the result.
        A result of ``None`` collapses to `Absent`

        Example:
            >>> present(2).map(str)
            Present('2')
            >>> present(2).map(lambda _: None)
            Absent
            >>> absent().map(str)
            Absent

        Args:
            f: Function to apply to the held value
        Return:
            ``wrap(f(value))`` if this is a `Present`, `Absent` otherwise
        """
        raise NotImplementedError()

    @abstractmethod
    def flat_map(self, f: Callable) -> Any:
        """
        Chain together functions that return containers

        Example:
            >>> f = lambda i: present(1 / i) if i != 0 else absent()
            >>> present(2).flat_map(f)
            Present(0.5)
            >>> present(0).flat_map(f)
            Absent

        Args:
            f: the function to call with the held value
        Return:
            ``f(value)`` unchanged if this is a `Present`, `Absent` otherwise
        """
        raise NotImplementedError()

    def and_then(self, f: Callable) -> Any:
        """
        Alias of `flat_map`
        """
        return self.flat_map(f)

    @abstractmethod
    def apply(self, f: Any) -> Any:
        """
        Apply a function held in a container to the value held in this one.
        When this container is absent, ``f`` is never inspected

        Example:
            >>> present(2).apply(present(str))
            Present('2')
            >>> present(2).apply(absent())
            Absent
            >>> absent().apply(present(str))
            Absent

        Args:
            f: container holding a function of one argument
        Return:
            `Present` with the result if both containers are present, \
            `Absent` otherwise
        """
        raise NotImplementedError()

    @abstractmethod
    def equals(self, other: 'Maybe[Any]') -> bool:
        """
        Compare with another container. Two absent containers are equal,
        two present containers are equal when their values compare
        equal with ``==``

        Args:
            other: container to compare with
        Return:
            True if both are absent or both hold equal values
        """
        raise NotImplementedError()

    @abstractmethod
    def get_or_else(self, default: Any) -> Any:
        """
        Get the held value, or ``default`` if there is none

        Example:
            >>> present(1).get_or_else(2)
            1
            >>> absent().get_or_else(2)
            2

        Args:
            default: Value to return if this is `Absent`
        Return:
            the held value if this is a `Present`, ``default`` otherwise
        """
        raise NotImplementedError()

    @abstractmethod
    def or_else(self, default: Any) -> Any:
        """
        Replace an absent container with ``wrap(default)``

        Example:
            >>> present(1).or_else(2)
            Present(1)
            >>> absent().or_else(2)
            Present(2)
            >>> absent().or_else(None)
            Absent

        Args:
            default: Value to wrap if this is `Absent`
        Return:
            this container if it is a `Present`, ``wrap(default)`` otherwise
        """
        raise NotImplementedError()

    @abstractmethod
    def get(self) -> Any:
        """
        Get the held value

        Example:
            >>> present(0).get()
            0
            >>> absent().get()
            EmptyValueAccessError: Cannot get value from Absent

        Raises:
            EmptyValueAccessError: if this is `Absent`
        Return:
            the held value
        """
        raise NotImplementedError()

    @abstractmethod
    def __bool__(self) -> bool:
        raise NotImplementedError()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe_):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        if self.is_absent():
            return hash(Absent)
        return hash((Present, self.get()))


def _collapse_none(method: F) -> F:
    # A Present built by `present(None)` holds the absence marker
    # and behaves exactly like Absent
    @wraps(method)
    def decorator(self, *args, **kwargs):
        if self.value is None:
            return getattr(Absent(), method.__name__)(*args, **kwargs)
        return method(self, *args, **kwargs)

    return cast(F, decorator)


class Present(Maybe_, Generic[A], eq=False):
    """
    Represents a container holding a value

    """
    value: A
    """
    The held value
    """

    def is_absent(self) -> bool:
        return self.value is None

    @_collapse_none
    def map(self, f: Callable[[A], Optional[B]]) -> 'Maybe[B]':
        return wrap(f(self.value))

    @_collapse_none
    def flat_map(self, f: Callable[[A], 'Maybe[B]']) -> 'Maybe[B]':
        return f(self.value)

    @_collapse_none
    def apply(self, f: 'Maybe[Callable[[A], Optional[B]]]') -> 'Maybe[B]':
        value = self.value
        return f.map(lambda g: g(value))

    @_collapse_none
    def equals(self, other: 'Maybe[Any]') -> bool:
        return other.is_present() and self.value == other.get()

    @_collapse_none
    def get_or_else(self, default: B) -> Union[A, B]:
        return self.value

    @_collapse_none
    def or_else(self, default: B) -> 'Maybe[Union[A, B]]':
        return self

    @_collapse_none
    def get(self) -> A:
        return self.value

    @_collapse_none
    def __bool__(self) -> bool:
        return True

    @_collapse_none
    def __str__(self) -> str:
        return f'Present({self.value})'

    @_collapse_none
    def __repr__(self) -> str:
        return f'Present({self.value!r})'


class Absent(Maybe_, eq=False):
    """
    Represents a container holding no value

    """
    def is_absent(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Optional[B]]) -> 'Maybe[B]':
        return self

    def flat_map(self, f: Callable[[Any], 'Maybe[B]']) -> 'Maybe[B]':
        return self

    def apply(self, f: 'Maybe[Callable[[Any], Optional[B]]]') -> 'Maybe[B]':
        return self

    def equals(self, other: 'Maybe[Any]') -> bool:
        return other.is_absent()

    def get_or_else(self, default: B) -> B:
        return default

    def or_else(self, default: Optional[B]) -> 'Maybe[B]':
        return wrap(default)

    def get(self) -> Any:
        raise EmptyValueAccessError('Cannot get value from Absent')

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return 'Absent'

    def __repr__(self) -> str:
        return 'Absent'


Maybe = Union[Absent, Present[A]]
"""
Type-alias for `Union[Absent, Present[TypeVar('A')]]`
"""


def wrap(value: Optional[C]) -> Maybe[C]:
    """
    Put a value in a container. ``None`` becomes `Absent`,
    anything else becomes `Present`

    Example:
        >>> wrap('value')
        Present('value')
        >>> wrap(0)
        Present(0)
        >>> wrap(None)
        Absent

    Args:
        value: optional value to wrap
    Return:
        `Present(value)` if `value` is not ``None``, `Absent` otherwise
    """
    if value is None:
        return Absent()
    return Present(value)


from_optional = wrap


def absent() -> Maybe[Any]:
    """
    Get an empty container

    Example:
        >>> absent()
        Absent

    Return:
        `Absent`
    """
    return Absent()


def present(value: C) -> Maybe[C]:
    """
    Put a value in a `Present` container without checking it for ``None``.
    A `Present` holding ``None`` behaves like `Absent` in every operation

    Example:
        >>> present(1)
        Present(1)

    Args:
        value: value to wrap
    Return:
        `Present(value)`
    """
    return Present(value)


def maybe(f: Callable[..., Optional[B]]) -> Callable[..., Maybe[B]]:
    """
    Wrap a function that may raise an exception or return ``None``
    with a container. Can also be used as a decorator.

    Example:
        >>> to_int = maybe(int)
        >>> to_int('1')
        Present(1)
        >>> to_int('Whoops')
        Absent

    Args:
        f: Function to wrap
    Return:
        f wrapped with a container
    """
    @wraps(f)
    def decorator(*args, **kwargs):
        try:
            return wrap(f(*args, **kwargs))
        except Exception:
            logger.debug(
                'exception in %s converted to Absent',
                getattr(f, '__qualname__', f),
                exc_info=True
            )
            return Absent()

    return decorator


def flatten(maybes: Iterable[Maybe[C]]) -> Tuple[C, ...]:
    """
    Extract the value from each container, skipping absent ones

    Example:
        >>> flatten([present(1), absent(), present(2)])
        (1, 2)

    Args:
        maybes: Iterable of containers
    Return:
        tuple of held values
    """
    return tuple(m.get() for m in maybes if m.is_present())


def join(nested: Maybe[Maybe[C]]) -> Maybe[C]:
    """
    Remove one level of nesting

    Example:
        >>> join(present(present(1)))
        Present(1)
        >>> join(present(absent()))
        Absent

    Args:
        nested: container holding a container
    Return:
        the inner container, or `Absent` if the outer one is absent
    """
    return nested.flat_map(identity)


_EMPTY: Maybe[Tuple[Any, ...]] = Present(())


def sequence(iterable: Iterable[Maybe[C]]) -> Maybe[Tuple[C, ...]]:
    """
    Collect the values of containers from left to right

    Example:
        >>> sequence([present(v) for v in range(3)])
        Present((0, 1, 2))
        >>> sequence([present(1), absent()])
        Absent

    Args:
        iterable: The iterable to collect values from
    Return:
        `Present` tuple of values if every container is present, \
        `Absent` otherwise
    """
    return map_m(identity, iterable)


@curry
def map_m(f: Callable[[C], Maybe[B]],
          iterable: Iterable[C]) -> Maybe[Tuple[B, ...]]:
    """
    Map each element in ``iterable`` to a container by applying ``f``
    and collect the results from left to right.
    ``f`` is not called for elements after the first `Absent`

    Example:
        >>> map_m(present, range(3))
        Present((0, 1, 2))

    Args:
        f: Function to map over ``iterable``
        iterable: Iterable to map ``f`` over
    Return:
        ``f`` mapped over ``iterable`` and collected from left to right
    """
    def combine(collected: Maybe[Tuple[B, ...]],
                x: C) -> Maybe[Tuple[B, ...]]:
        return collected.flat_map(lambda xs: f(x).map(lambda y: xs + (y, )))

    return reduce(combine, iterable, _EMPTY)


@curry
def filter_m(f: Callable[[C], Maybe[bool]],
             iterable: Iterable[C]) -> Maybe[Tuple[C, ...]]:
    """
    Keep the elements of ``iterable`` for which ``f`` gives `Present(True)`

    Example:
        >>> filter_m(lambda v: present(v % 2 == 0), range(3))
        Present((0, 2))

    Args:
        f: Function giving a container of bool for each element
        iterable: Iterable to filter by ``f``
    Return:
        `Present` tuple of kept elements, `Absent` if ``f`` gave `Absent` \
        for any element
    """
    def combine(kept: Maybe[Tuple[C, ...]], x: C) -> Maybe[Tuple[C, ...]]:
        return kept.flat_map(
            lambda xs: f(x).map(lambda keep: xs + (x, ) if keep else xs)
        )

    return reduce(combine, iterable, _EMPTY)


__all__ = [
    'Maybe',
    'Present',
    'Absent',
    'EmptyValueAccessError',
    'wrap',
    'from_optional',
    'absent',
    'present',
    'maybe',
    'flatten',
    'join',
    'sequence',
    'map_m',
    'filter_m'
]
