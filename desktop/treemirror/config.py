"""Client configuration

Values are read from environment variables prefixed with ``TREEMIRROR_``
or from a local ``.env`` file.
"""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Connection and runtime settings for the tree client"""

    # Remote service exposing tree scan, status lookup and selection store
    api_base_url: str = "http://127.0.0.1:8000"
    api_token: str = ""
    request_timeout: float = 60.0

    # Separator used to build full paths from node names
    path_separator: str = "/"

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    class Config:
        env_prefix = "TREEMIRROR_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
