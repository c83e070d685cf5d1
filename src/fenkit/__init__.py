"""fenkit - strict Forsyth-Edwards Notation parsing and serialization."""

from fenkit.core import *  # noqa: F403
from fenkit.core import __all__ as __all__

__version__ = "0.1.0"
