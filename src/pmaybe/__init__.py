from .functions import *  # noqa
from .immutable import Immutable  # noqa
from .maybe import (Absent, EmptyValueAccessError, Maybe, Present,  # noqa
                    absent, present, wrap)

try:
    from . import hypothesis_strategies  # noqa
except ImportError:
    pass
