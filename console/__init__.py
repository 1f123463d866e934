"""
In-process developer console.
"""

__version__ = "1.0.0"
__description__ = "Developer console with a command registry and dispatcher"

from console.client import DevConsole, create_console
from console.config import Config

__all__ = ["DevConsole", "create_console", "Config", "__version__"]
