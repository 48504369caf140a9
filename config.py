# config.py
import os
from dataclasses import dataclass
from typing import Iterable, Optional

from dotenv import load_dotenv

from core.errors import ConfigError

ENV_VARS = {
    "secret_key": "BLAWG_SECRET_KEY",
    "editor": "BLAWG_EDITOR",
    "create_url": "BLAWG_API_CREATE",
    "update_url": "BLAWG_API_UPDATE",
    "delete_url": "BLAWG_API_DELETE",
    "get_url": "BLAWG_API_GET",
}

LOG_FILE_VAR = "BLAWG_LOG_FILE"

REQUIRED_FOR = {
    "create": ("secret_key", "editor", "create_url"),
    "update": ("secret_key", "editor", "get_url", "update_url"),
    "delete": ("secret_key", "delete_url"),
}


@dataclass(frozen=True)
class Config:
    secret_key: Optional[str] = None
    editor: Optional[str] = None
    create_url: Optional[str] = None
    update_url: Optional[str] = None
    delete_url: Optional[str] = None
    get_url: Optional[str] = None
    log_file: Optional[str] = None

    def update_url_for(self, slug: str) -> str:
        return self.update_url.replace("{slug}", slug)

    def delete_url_for(self, slug: str) -> str:
        return self.delete_url.replace("{slug}", slug)

    def get_url_for(self, slug: str) -> str:
        return f"{self.get_url}/{slug}"


def load_config(required: Iterable[str] = (), environ=None, dotenv: bool = True) -> Config:
    """
    Load configuration from the environment (and a .env file, if present).

    Every field named in `required` must be set to a non-empty value;
    there are no defaults.
    """
    if dotenv:
        load_dotenv()
    environ = os.environ if environ is None else environ

    values = {field: environ.get(var) or None for field, var in ENV_VARS.items()}

    for field in required:
        if not values[field]:
            raise ConfigError(f"'{ENV_VARS[field]}' environment variable undefined.")

    return Config(log_file=environ.get(LOG_FILE_VAR) or None, **values)
