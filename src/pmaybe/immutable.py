from dataclasses import dataclass

from typing_extensions import dataclass_transform


@dataclass_transform(frozen_default=True)
class Immutable:
    """
    Super class that makes subclasses immutable using dataclasses

    Example:
        >>> class Point(Immutable):
        ...     x: int
        >>> class Point3D(Point):
        ...     z: int
        >>> p = Point3D(1, 2)
        >>> p.x = 3
        FrozenInstanceError: cannot assign to field 'x'

    """

    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False) -> None:
        super().__init_subclass__()
        dataclass(
            frozen=True, init=init, repr=repr, eq=eq, order=order
        )(cls)


__all__ = ['Immutable']
