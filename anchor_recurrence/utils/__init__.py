# File: utils/__init__.py
"""Pure Python utilities for the recurrence engine.

Submodules:
    - dt_utils: Calendar arithmetic, date parsing, "today" resolution

Usage:
    from .utils import dt_utils
    from .utils.dt_utils import dt_weekday
"""

from . import dt_utils

__all__ = ["dt_utils"]
