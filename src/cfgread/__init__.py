"""cfgread package.

Read a config file into memory as text:

    import cfgread

    text = cfgread.read_config("config.txt")      # raises ConfigOpenError / ConfigReadError

    result = cfgread.load_config("config.txt")    # never raises for open/read failures
    if result.ok:
        print(result.contents)
    else:
        print(result.error_kind, result.detail)
"""

__version__ = "0.1.0"

from .errors import ConfigLoadError, ConfigOpenError, ConfigReadError
from .loader import DEFAULT_CONFIG_PATH, LoadResult, load_config, read_config

__all__ = [
    "read_config",
    "load_config",
    "LoadResult",
    "ConfigLoadError",
    "ConfigOpenError",
    "ConfigReadError",
    "DEFAULT_CONFIG_PATH",
    "__version__",
]
