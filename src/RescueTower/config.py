# ============================================================================
# RescueTower - Configuration Management
#
# Purpose: Load and manage configuration from YAML, CLI args, and env vars
# Inputs: YAML files, environment variables
# Outputs: Config model with all settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = Config.from_default() or Config.from_yaml("path.yaml")
#
# Changelog:
#   2026-03-02: Initial configuration system (catalog, sink, logging)
#   2026-03-05: Added PerformanceConfig for the --perf flag
#   2026-03-09: Added SearchConfig.verify_sorted (debug-only sortedness check)
#   2026-03-11: Env overrides now apply on top of built-in defaults, so keys
#               missing from the YAML file can still be overridden
# ============================================================================

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, model_validator

# Hard ceiling on catalog size; configs may lower it but never raise it.
MAX_CAPACITY = 20
# Field limits of the component record, in UTF-8 bytes.
MAX_NAME_BYTES = 29
MAX_CATEGORY_BYTES = 19


class CatalogConfig(BaseModel):
    """Catalog capacity and component field constraints."""

    capacity: int = Field(default=MAX_CAPACITY, ge=1, le=MAX_CAPACITY)
    max_name_bytes: int = Field(default=MAX_NAME_BYTES, ge=1, le=MAX_NAME_BYTES)
    max_category_bytes: int = Field(default=MAX_CATEGORY_BYTES, ge=1, le=MAX_CATEGORY_BYTES)
    min_priority: int = 1
    max_priority: int = 10

    @model_validator(mode="after")
    def _check_priority_range(self) -> "CatalogConfig":
        if self.min_priority > self.max_priority:
            raise ValueError(
                f"min_priority ({self.min_priority}) must not exceed max_priority ({self.max_priority})"
            )
        return self


class SearchConfig(BaseModel):
    """Binary search configuration."""

    # O(n) pre-check that the catalog is name-sorted. Off by default: the search
    # contract leaves the precondition to the caller.
    verify_sorted: bool = False


class SinkConfig(BaseModel):
    """Report sink configuration."""

    output_dir: str = "runs"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class PerformanceConfig(BaseModel):
    """Performance monitoring configuration."""

    mode: Optional[Literal["summary", "detailed"]] = None


class Config(BaseModel):
    """Root configuration object."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    sink: SinkConfig = Field(default_factory=SinkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}

        data = cls._merge_defaults(data)
        data = cls._apply_env_overrides(data)

        return cls(**data)

    @classmethod
    def from_default(cls) -> "Config":
        """
        Load configuration from default config file.

        Returns:
            Config instance
        """
        package_root = Path(__file__).parent.parent.parent
        default_config = package_root / "configs" / "default.yaml"

        if default_config.exists():
            return cls.from_yaml(str(default_config))
        return cls(**cls._apply_env_overrides(cls._merge_defaults({})))

    @classmethod
    def _merge_defaults(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Layer YAML sections over the built-in defaults (one level deep)."""
        merged = cls().model_dump()
        for section, values in data.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables follow the pattern:
        RESCUETOWER_<SECTION>_<KEY>=value

        Examples:
            RESCUETOWER_CATALOG_CAPACITY=10       → data["catalog"]["capacity"]
            RESCUETOWER_SEARCH_VERIFY_SORTED=true → data["search"]["verify_sorted"]

        Args:
            data: Configuration dictionary

        Returns:
            Updated configuration dictionary
        """
        prefix = "RESCUETOWER_"

        # Longest first so a multi-word section never loses to a shorter prefix
        section_keys = sorted(data.keys(), key=len, reverse=True)

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            remainder = env_key[len(prefix) :].lower()

            for section in section_keys:
                section_prefix = section + "_"
                if not remainder.startswith(section_prefix):
                    continue

                rest = remainder[len(section_prefix) :]
                section_data = data.get(section)
                if isinstance(section_data, dict) and rest in section_data:
                    section_data[rest] = cls._parse_env_value(env_value)
                break

        return data

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        Parse environment variable value to appropriate type.

        Args:
            value: String value from environment

        Returns:
            Parsed value (str, int, float, or bool)
        """
        # "1"/"0" stay integers; capacity and priority bounds are numeric
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value
