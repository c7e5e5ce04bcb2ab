"""Where: src/music163/config/settings.py
What: Built-in defaults for the NetEase Cloud Music endpoint and request decoration.
Why: Keep endpoint identity in one place so config loading and tests agree on it.
"""

from __future__ import annotations

from typing import Final

# Relative request paths are joined onto this, so it must end with a slash.
DEFAULT_BASE_URL: Final[str] = "http://music.163.com/api/"

# The web API rejects requests that do not look like they come from a browser
# on the music.163.com site.
DEFAULT_USER_AGENT: Final[str] = (
    "Mozilla/5.0 (Windows; U; Windows NT 6.1; en-US; rv:1.9.1.6) "
    "Gecko/20091201 Firefox/3.5.6"
)
DEFAULT_REFERER: Final[str] = "http://music.163.com/"

# Seconds; applies to both connect and read unless a call overrides it.
DEFAULT_TIMEOUT: Final[float] = 15.0

CONFIG_SECTION: Final[str] = "client"


__all__ = [
    "CONFIG_SECTION",
    "DEFAULT_BASE_URL",
    "DEFAULT_REFERER",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
]
