"""
Summary: Export the client configuration model and its path helpers.
Why: Let callers load settings without reaching into submodules.
"""

from .config import ClientConfig
from .paths import default_config_path, default_log_file

__all__ = ["ClientConfig", "default_config_path", "default_log_file"]
