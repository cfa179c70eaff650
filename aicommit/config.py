"""Configuration management for ai-commit."""
import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError, UnknownKey

DEFAULT_CONFIG_FILENAME = ".ai-commit"
CONFIG_PATH_ENV = "AI_COMMIT_CONFIG"

# Key names accepted by get/set, mapped to Config fields.
# GROQ_APIKEY is the name the key is persisted under.
CONFIG_KEYS = {
    "API_KEY": "api_key",
    "GROQ_APIKEY": "api_key",
    "COMMIT_PROMPT": "commit_prompt",
}


class Config(BaseModel):
    """Settings persisted in the configuration file.

    Values are opaque strings; an empty string means "not set".
    """

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(
        default="",
        alias="GROQ_APIKEY",
        description="API key for the completion endpoint",
    )

    commit_prompt: str = Field(
        default="",
        alias="COMMIT_PROMPT",
        description="Custom system prompt; the built-in prompt is used when empty",
    )


class ConfigStore:
    """Reads and writes the flat JSON configuration file.

    The store is created once at process start and passed to whatever needs
    it. The file is loaded on every access and rewritten in full on every
    set; concurrent writers are not coordinated.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @classmethod
    def default(cls) -> "ConfigStore":
        """Create a store for the user's configuration file.

        The AI_COMMIT_CONFIG environment variable overrides the default
        location of ~/.ai-commit.
        """
        override = os.environ.get(CONFIG_PATH_ENV)
        if override:
            return cls(Path(override).expanduser())
        return cls(Path.home() / DEFAULT_CONFIG_FILENAME)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Config:
        """Load the configuration, treating a missing file as empty.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed
        """
        try:
            data = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Config()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Error reading config file {self._path}: {e}") from e

        try:
            return Config.model_validate_json(data)
        except ValidationError as e:
            raise ConfigError(f"Error parsing config file {self._path}: {e}") from e

    def save(self, config: Config) -> None:
        """Rewrite the whole file, readable and writable by the owner only."""
        data = json.dumps(config.model_dump(by_alias=True), indent=2)
        try:
            fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            # O_CREAT only applies the mode to new files
            os.chmod(self._path, 0o600)
        except OSError as e:
            raise ConfigError(f"Error saving config file {self._path}: {e}") from e

    def get(self, key: str) -> str:
        """Return the value for key, or an empty string when it is unset."""
        field_name = _field_for(key)
        return getattr(self.load(), field_name)

    def set(self, key: str, value: str) -> None:
        """Update a single key and rewrite the configuration file."""
        field_name = _field_for(key)
        config = self.load()
        setattr(config, field_name, value)
        self.save(config)


def _field_for(key: str) -> str:
    field_name: Optional[str] = CONFIG_KEYS.get(key)
    if field_name is None:
        raise UnknownKey(key)
    return field_name
