"""
Credential configuration for the Resend CLI.

Lookup order:
1. ``RESEND_API_KEY`` (after loading a ``.env`` from the working directory)
2. ``~/.resend-cli/config.json``
"""

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from dotenv import load_dotenv

from resend_cli.core.client import ConfigError

API_KEY_ENV = "RESEND_API_KEY"


def config_path() -> Path:
    """Location of the saved configuration file."""
    return Path.home() / ".resend-cli" / "config.json"


@dataclass
class Config:
    """Saved CLI configuration."""

    api_key: str

    @classmethod
    def load(cls) -> "Config":
        """
        Load configuration from the environment or the config file.

        Raises:
            ConfigError: If no key is configured or the file is unreadable

        """
        load_dotenv(Path.cwd() / ".env")

        api_key = os.environ.get(API_KEY_ENV)
        if api_key:
            return cls(api_key=api_key)

        path = config_path()
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                return cls(api_key=data["api_key"])
            except (OSError, ValueError, KeyError, TypeError) as e:
                raise ConfigError(f"Could not read config file {path}: {e}") from e

        raise ConfigError(
            f"{API_KEY_ENV} environment variable not set and config file not found. "
            "Use 'resend config --api-key <KEY>' to set it."
        )

    def save(self) -> Path:
        """Write the configuration file, creating its directory if needed."""
        path = config_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not write config file {path}: {e}") from e
        return path
