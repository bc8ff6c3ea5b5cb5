"""
Constants Package

Unit tables, document markers and validation limits.
"""

from .units import *  # noqa: F401,F403
from .document import *  # noqa: F401,F403
from .validation import *  # noqa: F401,F403
