from typing import Any

from pmaybe import identity
from pmaybe.maybe import Maybe, absent, present


def test_present() -> Maybe[int]:
    return present(1).map(lambda a: a * 2)


def test_absent() -> Maybe[Any]:
    return absent().map(identity)
