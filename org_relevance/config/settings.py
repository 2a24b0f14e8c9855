"""Application settings with Pydantic Settings validation.

Environment variables (and an optional .env file) take precedence.
Non-sensitive defaults are loaded from config/main.yaml and config/*.yaml;
each file is validated against its JSON Schema in config/schemas/ when one
exists, then all files are deep-merged.
"""

import json
from pathlib import Path
from typing import Any, Literal, cast

import yaml
from jsonschema import ValidationError as JSONSchemaValidationError
from jsonschema import validate
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from org_relevance.config.logging_config import get_logger
from org_relevance.domain.scoring_constants import (
    DEFAULT_MAX_TRENDS_PER_RUN,
    DEFAULT_MIN_STORED_RELEVANCE_SCORE,
    DEFAULT_SCORE_TTL_HOURS,
    DEFAULT_TOKEN_OVERLAP_MIN_SIMILARITY,
)

logger = cast(Any, get_logger(__name__))

CONFIG_DIR = Path("config")
SCHEMA_DIR = CONFIG_DIR / "schemas"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``, recursing into nested sections.

    Lists and scalars in ``override`` replace the base value outright.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def load_schema(schema_name: str) -> dict[str, Any]:
    """Read ``config/schemas/<schema_name>.schema.json``.

    A missing or unreadable schema disables validation for that file, so an
    empty dict is returned instead of raising.
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.schema.json"
    if not schema_path.exists():
        return {}

    try:
        return json.loads(schema_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("config_schema_load_failed", schema=schema_name, error=str(e))
        return {}


def validate_config_section(
    config: dict[str, Any], schema_name: str, file_path: str = ""
) -> None:
    """Check one YAML document against its schema, if it has one.

    Raises:
        ValueError: Naming the schema, the file (when given) and the first
            violation reported by jsonschema
    """
    schema = load_schema(schema_name)
    if not schema:
        return

    try:
        validate(instance=config, schema=schema)
    except JSONSchemaValidationError as e:
        where = f" (file: {file_path})" if file_path else ""
        raise ValueError(
            f"Config validation failed for {schema_name}{where}: {e.message}"
        ) from e
    logger.debug("config_validation_succeeded", schema=schema_name)


def _load_yaml_file(path: Path, schema_name: str) -> dict[str, Any] | None:
    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning(
            "config_file_load_failed",
            path=str(path),
            error=str(e),
        )
        return None

    try:
        validate_config_section(file_config, schema_name, str(path))
    except ValueError as e:
        logger.error(
            "config_validation_failed",
            path=str(path),
            schema=schema_name,
            error=str(e),
        )
        raise

    logger.debug("config_file_loaded", path=str(path), schema=schema_name)
    return file_config


def load_all_configs() -> dict[str, Any]:
    """Merge ``config/main.yaml`` with the other ``config/*.yaml`` files.

    ``main.yaml`` is read first, the rest follow in name order and override it.
    Each file is checked against the schema named after its stem. Unreadable
    files are skipped; schema violations raise ``ValueError``.
    """
    if not CONFIG_DIR.is_dir():
        logger.info("config_load_complete", file_count=0)
        return {}

    main_path = CONFIG_DIR / "main.yaml"
    others = sorted(p for p in CONFIG_DIR.glob("*.yaml") if p != main_path)
    ordered = ([main_path] if main_path.exists() else []) + others

    merged_config: dict[str, Any] = {}
    file_count = 0
    for path in ordered:
        file_config = _load_yaml_file(path, path.stem)
        if file_config is None:
            continue
        merged_config = deep_merge(merged_config, file_config)
        file_count += 1

    logger.info("config_load_complete", file_count=file_count)
    return merged_config


class Settings(BaseSettings):
    """Application settings.

    Environment variables override values from config/*.yaml, which override
    the defaults declared here.
    """

    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    # Matching
    entity_matcher: Literal["substring", "token_overlap"] = Field(
        default="substring",
        description="Name matching strategy used by the relevance scorer",
    )
    token_overlap_min_similarity: float = Field(
        default=DEFAULT_TOKEN_OVERLAP_MIN_SIMILARITY,
        gt=0.0,
        le=1.0,
        description="Minimum similarity for the token_overlap matcher",
    )

    # Trend scoring run
    min_stored_relevance_score: int = Field(
        default=DEFAULT_MIN_STORED_RELEVANCE_SCORE,
        ge=0,
        le=100,
        description="Scores below this are dropped (blocked records are kept)",
    )
    score_ttl_hours: int = Field(
        default=DEFAULT_SCORE_TTL_HOURS,
        ge=1,
        description="Hours until a stored org/trend score expires",
    )
    max_trends_per_run: int = Field(
        default=DEFAULT_MAX_TRENDS_PER_RUN,
        ge=1,
        description="Maximum distinct trends scored per run",
    )

    def __init__(self, **data: Any):
        """Initialize settings with auto-loaded configs from all YAML files."""
        config = load_all_configs()

        super().__init__(**data)
        self._apply_yaml_defaults(config)

    def _apply_yaml_defaults(self, config: dict[str, Any]) -> None:
        """Apply YAML-sourced defaults without overriding env-provided values."""

        fields_from_env = set(self.model_fields_set)

        def _assign(field_name: str, value: Any) -> None:
            if value is None:
                return
            if field_name in fields_from_env:
                return

            object.__setattr__(self, field_name, value)
            self.model_fields_set.add(field_name)

        logging_config = config.get("logging") or {}
        _assign("log_level", logging_config.get("level"))
        _assign("json_logs", logging_config.get("json"))

        matching_config = config.get("matching") or {}
        _assign("entity_matcher", matching_config.get("entity_matcher"))
        _assign(
            "token_overlap_min_similarity",
            matching_config.get("token_overlap_min_similarity"),
        )

        scoring_config = config.get("trend_scoring") or {}
        _assign(
            "min_stored_relevance_score",
            scoring_config.get("min_stored_relevance_score"),
        )
        _assign("score_ttl_hours", scoring_config.get("score_ttl_hours"))
        _assign("max_trends_per_run", scoring_config.get("max_trends_per_run"))


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
