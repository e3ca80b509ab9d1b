from .theme import *  # noqa: F401,F403
from .theme import __all__

__version__ = "0.1.0"
