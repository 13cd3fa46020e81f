from dataclasses import FrozenInstanceError
from typing import Any

import pytest
from hypothesis import given

from pmaybe import Immutable
from pmaybe.hypothesis_strategies import anything
from pmaybe.maybe import Absent, Present


class C(Immutable):
    a: Any


class D(C):
    a2: Any


@given(anything())
def test_is_immutable(a):
    c = C(a)
    with pytest.raises(FrozenInstanceError):
        c.a = a


@given(anything(), anything())
def test_derived_is_immutable(a, a2):
    d = D(a, a2)
    with pytest.raises(FrozenInstanceError):
        d.a = a
    with pytest.raises(FrozenInstanceError):
        d.a2 = a2


@given(anything())
def test_present_is_immutable(value):
    m = Present(value)
    with pytest.raises(FrozenInstanceError):
        m.value = value  # type: ignore


def test_absent_is_immutable():
    with pytest.raises(FrozenInstanceError):
        Absent().value = 1  # type: ignore
