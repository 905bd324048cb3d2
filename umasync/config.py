"""Environment configuration.

Values are read from the process environment, after ``.env`` has been loaded
by the command-line entry point:

    WIKI_API_HOST    full URL of the wiki's api.php
    WIKI_USERNAME    bot username (Special:BotPasswords)
    WIKI_PASSWORD    bot password
    WIKI_USER_AGENT  optional user agent override
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit

from umasync import __version__
from umasync.errors import ConfigError

DEFAULT_DB_FILE = "master.mdb"
DEFAULT_USER_AGENT = f"umasync/{__version__} (master.mdb template sync bot)"


@dataclass(frozen=True)
class Config:
    api_url: str
    username: Optional[str] = None
    password: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 require_credentials: bool = True) -> "Config":
        env = os.environ if environ is None else environ
        api_url = (env.get("WIKI_API_HOST") or "").strip()
        if not api_url:
            raise ConfigError("WIKI_API_HOST must be set")

        username = env.get("WIKI_USERNAME") or None
        password = env.get("WIKI_PASSWORD") or None
        if require_credentials and not (username and password):
            raise ConfigError("WIKI_USERNAME and WIKI_PASSWORD must be set")

        return cls(
            api_url=api_url,
            username=username,
            password=password,
            user_agent=env.get("WIKI_USER_AGENT") or DEFAULT_USER_AGENT,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def site_args(self) -> tuple[str, str, str]:
        """Split ``api_url`` into the (scheme, host, path) mwclient expects."""
        parts = urlsplit(self.api_url)
        if not parts.netloc:
            raise ConfigError(f"WIKI_API_HOST is not a URL: {self.api_url!r}")
        path = parts.path or "/"
        if path.endswith("api.php"):
            path = path[: -len("api.php")]
        if not path.endswith("/"):
            path += "/"
        return parts.scheme or "https", parts.netloc, path
