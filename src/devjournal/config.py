"""Configuration management for devjournal."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .core.entries import DEFAULT_TAIL_BLOCKS
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "devjournal.conf"
DEFAULT_CONTEXT_ROOT = ".context"


@dataclass
class Config:
    """devjournal configuration."""

    context_root: str = DEFAULT_CONTEXT_ROOT
    status_blocks: int = DEFAULT_TAIL_BLOCKS
    log_level: str = "WARNING"

    @property
    def root_path(self) -> Path:
        """Journal root with ~ expanded. Relative paths stay relative to the cwd."""
        return Path(self.context_root).expanduser()


def _strip_value(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | str | None = None) -> Config:
    """Load configuration from devjournal.conf, falling back to defaults."""
    config = Config()
    path = Path(config_file) if config_file else Path.cwd() / CONFIG_FILENAME

    if not path.exists():
        return config

    if not path.is_file():
        raise ConfigurationError(f"Config path is not a file: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "context_root":
                if value:
                    config.context_root = value
            case "status_blocks":
                try:
                    blocks = int(value)
                except ValueError:
                    logger.warning(f"Invalid STATUS_BLOCKS value '{value}', using {config.status_blocks}")
                    continue
                if blocks < 1:
                    logger.warning(f"STATUS_BLOCKS must be at least 1, got {blocks}; using {config.status_blocks}")
                    continue
                config.status_blocks = blocks
            case "log_level":
                config.log_level = value.upper() or config.log_level

    return config
