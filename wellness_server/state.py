"""Application state: engine config and the catalog / wellness request stores."""

from pathlib import Path
from typing import Any, Optional

from wellness_engine.models.config import EngineConfig

from .config import ServerConfig, get_config
from .services import (
    FirestoreCatalogStore,
    FirestoreRecommendationStore,
    InMemoryCatalogStore,
    InMemoryRecommendationStore,
    JsonCatalogStore,
    JsonRecommendationStore,
)


class AppState:
    """Global application state. Routes pass these handles into the engine explicitly."""

    def __init__(
        self,
        config: ServerConfig,
        catalog_store: Optional[Any] = None,
        request_store: Optional[Any] = None,
        engine_config: Optional[EngineConfig] = None,
    ):
        self.config = config
        self.engine_config = engine_config if engine_config is not None else self._load_engine_config(config)

        # Stores: Firestore / JSON per DATA_SOURCE, in-memory otherwise or on failure
        self.catalog_store = catalog_store if catalog_store is not None else self._create_catalog_store(config)
        self.request_store = request_store if request_store is not None else self._create_request_store(config)
        print(f"[startup] Catalog store: {type(self.catalog_store).__name__}")
        print(f"[startup] Request store: {type(self.request_store).__name__}")

    def _load_engine_config(self, config: ServerConfig) -> EngineConfig:
        try:
            return config.load_engine_config()
        except (OSError, ValueError) as e:
            print(f"[startup] Engine config load failed: {e}, using defaults")
            return EngineConfig()

    def _firestore_credentials_ok(self, config: ServerConfig) -> bool:
        cred_path = config.firebase_credentials_path
        if not cred_path:
            print("[startup] Firestore skipped: FIREBASE_CREDENTIALS_PATH not set")
            return False
        cred_path = Path(cred_path)
        if not cred_path.exists() or not cred_path.is_file():
            print(f"[startup] Firestore skipped: credentials path not found or not a file: {cred_path}")
            return False
        return True

    def _create_catalog_store(self, config: ServerConfig) -> Any:
        """Create catalog store (Firestore / JSON per DATA_SOURCE, else in-memory)."""
        if config.data_source == "firebase" and self._firestore_credentials_ok(config):
            try:
                return FirestoreCatalogStore(
                    project_id=config.firebase_project_id,
                    credentials_path=config.firebase_credentials_path,
                    collection=config.catalog_collection,
                )
            except Exception as e:
                print(f"[startup] Firestore catalog store init failed: {e}, using in-memory")
        elif config.data_source == "json" and config.catalog_json_path:
            try:
                return JsonCatalogStore(config.catalog_json_path)
            except (OSError, ValueError) as e:
                print(f"[startup] JSON catalog store init failed: {e}, using in-memory")
        return InMemoryCatalogStore()

    def _create_request_store(self, config: ServerConfig) -> Any:
        """Create wellness request store (Firestore / JSON per DATA_SOURCE, else in-memory)."""
        if config.data_source == "firebase" and self._firestore_credentials_ok(config):
            try:
                return FirestoreRecommendationStore(
                    project_id=config.firebase_project_id,
                    credentials_path=config.firebase_credentials_path,
                    collection=config.requests_collection,
                )
            except Exception as e:
                print(f"[startup] Firestore request store init failed: {e}, using in-memory")
        elif config.data_source == "json" and config.requests_json_path:
            try:
                return JsonRecommendationStore(config.requests_json_path)
            except OSError as e:
                print(f"[startup] JSON request store init failed: {e}, using in-memory")
        return InMemoryRecommendationStore()


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (tests inject stores this way)."""
    global _state
    _state = state
