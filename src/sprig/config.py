"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

NO_CACHE = "no-store, no-cache, must-revalidate, proxy-revalidate, max-age=0"


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, content_root="public")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    workers: int = 1  # 0 = auto-detect from CPU count

    # Content
    content_root: str | Path = "html"
    routes_file: str | Path = "conf/routes.json"
    not_found_page: str = "404.html"
    cache_control: str = NO_CACHE

    # Logging
    log_level: str = "info"
    log_format: str = "json"  # "json" or "text"
