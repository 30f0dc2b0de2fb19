"""Configuration management for Laddr."""

from __future__ import annotations

import json
from argparse import ArgumentParser

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from laddr.utils import expand_file_path


class Config(BaseModel):
    """Configuration for corpus loading and ladder search."""

    corpus: str | None = Field(None, description="Whitespace-separated word file")
    top_n: int | None = Field(None, ge=1, description="Top N most common English words")
    include: str | None = None
    exclude: str | None = None
    ignore_case: bool = Field(
        False, description="Lowercase corpus words and match input case-insensitively"
    )
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("corpus", "include", "exclude", "log_file", mode="before")
    @classmethod
    def expand_paths(cls, v):
        """Expand ~ in file paths and treat empty strings as unset."""
        if v is None or v == "":
            return None
        return expand_file_path(str(v))

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.corpus and self.top_n:
            raise ValueError("corpus and top_n are mutually exclusive; choose one word source")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        # Otherwise, try JSON, then the hardcoded fallback
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "corpus": get_value("corpus", None),
        "top_n": get_value("top_n", None),
        "include": get_value("include", None),
        "exclude": get_value("exclude", None),
        "ignore_case": cli_args.ignore_case or json_config.get("ignore_case", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
