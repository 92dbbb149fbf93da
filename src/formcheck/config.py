"""
Runtime configuration for formcheck.

Settings are read from environment variables; an optional .env file is
loaded first with python-dotenv (existing environment variables win).
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from formcheck.core.rules import DirectorRegistry, FieldPolicy, RecipeConfigLoader
from formcheck.observability.logger import get_logger

logger = get_logger(__name__)


class Settings(BaseModel):
    """
    Snapshot of formcheck configuration.

    Attributes:
        log_level: LOG_LEVEL (default INFO)
        log_format: LOG_FORMAT, "json" or "text" (default json)
        recipes_path: FORMCHECK_RECIPES_PATH, YAML with extra recipes
        fields_path: FORMCHECK_FIELDS_PATH, YAML with the field policy
        metrics_port: METRICS_PORT for the Prometheus exporter
    """

    log_level: str = "INFO"
    log_format: str = "json"
    recipes_path: Path | None = None
    fields_path: Path | None = None
    metrics_port: int = 8000

    class Config:
        frozen = True

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Settings":
        """
        Build settings from the environment.

        Args:
            env_file: Optional .env file to load before reading variables

        Raises:
            ValueError: If METRICS_PORT is not an integer
        """
        if env_file:
            load_dotenv(env_file, override=False)
        else:
            load_dotenv(override=False)

        recipes_path = os.getenv("FORMCHECK_RECIPES_PATH")
        fields_path = os.getenv("FORMCHECK_FIELDS_PATH")
        metrics_port = os.getenv("METRICS_PORT", "8000")

        try:
            port = int(metrics_port)
        except ValueError:
            raise ValueError(f"METRICS_PORT must be an integer, got {metrics_port!r}")

        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", "json").lower(),
            recipes_path=Path(recipes_path) if recipes_path else None,
            fields_path=Path(fields_path) if fields_path else None,
            metrics_port=port,
        )

    def build_registry(self) -> DirectorRegistry:
        """Registry with the built-in recipes plus any configured ones."""
        registry = DirectorRegistry()
        if self.recipes_path is not None:
            recipes = RecipeConfigLoader(self.recipes_path).load_recipes()
            registry.register_recipes(recipes)
            logger.info(f"Loaded {len(recipes)} recipe(s) from {self.recipes_path}")
        return registry

    def build_field_policy(self) -> FieldPolicy:
        """Configured field policy, or an empty one (every field optional)."""
        if self.fields_path is None:
            return FieldPolicy()
        return RecipeConfigLoader(self.fields_path).load_field_policy()
