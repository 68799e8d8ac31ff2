"""
Shared utilities for the Step Counter system.
"""

from .constants import *
from .schemas import *
from .utils import *
from .errors import *

__version__ = "1.0.0"
