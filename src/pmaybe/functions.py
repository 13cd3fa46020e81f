import functools
import inspect
from typing import Any, Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')

Unary = Callable[[A], B]


def identity(v: A) -> A:
    """
    The identity function. Just gives back its argument

    Example:
        >>> identity('value')
        'value'
    """
    return v


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[..., Any]:
    """
    Compose functions so that the rightmost one is called first

    Example:
        >>> compose(str, lambda v: v * 2)(3)
        '6'

    Args:
        f: the outermost function
        g: the function called before `f`
        functions: further functions, called before `g` from right to left
    Return:
        the composed function
    """
    *outer, innermost = (f, g) + functions

    def composition(*args, **kwargs):
        result = innermost(*args, **kwargs)
        for h in reversed(outer):
            result = h(result)
        return result

    return composition


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that collects its arguments over several calls
    and calls ``f`` once every parameter is bound

    Example:
        >>> add = curry(lambda a, b: a + b)
        >>> add(1)(1)
        2
    """
    signature = inspect.signature(f)

    @functools.wraps(f)
    def curried(*args, **kwargs):
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        if set(signature.parameters) <= set(bound.arguments):
            return f(*args, **kwargs)
        return curry(functools.partial(f, *args, **kwargs))

    return curried


__all__ = ['curry', 'compose', 'identity', 'Unary']
