"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from wellness_engine.models.config import EngineConfig

# Single .env at the repo root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("memory", "json", "firebase")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data source: "memory" | "json" | "firebase"
    data_source: str = "memory"
    # When data_source=json: catalog rows and wellness request records
    catalog_json_path: Optional[Path] = None
    requests_json_path: Optional[Path] = None
    # When data_source=firebase: path to service account JSON and optional project id
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None
    catalog_collection: str = "wellness_catalog"
    requests_collection: str = "wellness_requests"

    # Engine
    engine_config_path: Optional[Path] = None
    recommendation_seed: Optional[int] = None
    # Raw RECOMMENDATION_SEED when it is not an integer; reported by validate()
    invalid_recommendation_seed: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or "memory"
        if data_source not in DATA_SOURCES:
            data_source = "memory"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        seed_env = os.getenv("RECOMMENDATION_SEED", "").strip()
        seed, invalid_seed = None, None
        if seed_env:
            try:
                seed = int(seed_env)
            except ValueError:
                invalid_seed = seed_env

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_source=data_source,
            catalog_json_path=_path_env("CATALOG_JSON_PATH", base_dir / "data" / "catalog.json"),
            requests_json_path=_path_env("REQUESTS_JSON_PATH", base_dir / "data" / "wellness_requests.json"),
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            catalog_collection=os.getenv("CATALOG_COLLECTION", "wellness_catalog"),
            requests_collection=os.getenv("REQUESTS_COLLECTION", "wellness_requests"),
            engine_config_path=_path_env("ENGINE_CONFIG_PATH"),
            recommendation_seed=seed,
            invalid_recommendation_seed=invalid_seed,
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "json" and not self.catalog_json_path:
            errors.append("DATA_SOURCE=json requires CATALOG_JSON_PATH")

        if self.data_source == "firebase":
            if not self.firebase_credentials_path:
                errors.append("DATA_SOURCE=firebase requires FIREBASE_CREDENTIALS_PATH")
            elif not self.firebase_credentials_path.is_file():
                errors.append(f"Firebase credentials file not found: {self.firebase_credentials_path}")

        if self.invalid_recommendation_seed is not None:
            errors.append(
                f"RECOMMENDATION_SEED must be an integer, got {self.invalid_recommendation_seed!r}; ignoring it"
            )

        if self.engine_config_path and not self.engine_config_path.is_file():
            errors.append(f"Engine config not found: {self.engine_config_path}")

        return len(errors) == 0, errors

    def load_engine_config(self) -> EngineConfig:
        """EngineConfig from ENGINE_CONFIG_PATH (when set) with RECOMMENDATION_SEED applied."""
        data: dict = {}
        if self.engine_config_path and self.engine_config_path.is_file():
            with open(self.engine_config_path) as f:
                data = json.load(f)
        config = EngineConfig.from_dict(data)
        if self.recommendation_seed is not None:
            config = config.model_copy(update={"random_seed": self.recommendation_seed})
        return config


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
