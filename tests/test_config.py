#!/usr/bin/env python3
"""
Configuration Tests

EngineConfig defaults, bounds and from_dict merging; ServerConfig loading
from environment variables and validation.

Run:
----
    pytest tests/test_config.py -v
"""

import json

import pytest
from pydantic import ValidationError

from wellness_engine.models.config import DEFAULT_CONFIG, EngineConfig, resolve_config
from wellness_server.config import ServerConfig

ENV_KEYS = (
    "HOST", "PORT", "LOG_LEVEL", "DATA_SOURCE", "CATALOG_JSON_PATH", "REQUESTS_JSON_PATH",
    "FIREBASE_CREDENTIALS_PATH", "GOOGLE_APPLICATION_CREDENTIALS", "FIREBASE_PROJECT_ID",
    "CATALOG_COLLECTION", "REQUESTS_COLLECTION", "ENGINE_CONFIG_PATH", "RECOMMENDATION_SEED",
)


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.top_n == 4
        assert config.candidate_pool_factor == 2
        assert config.persist_recommendations is True
        assert config.transcript_excerpt_limit == 500
        assert config.random_seed is None

    def test_from_dict_nested_and_flat(self):
        config = EngineConfig.from_dict({
            "ranking": {"top_n": 6, "candidate_pool_factor": 3},
            "persistence": {"enabled": False},
            "message": {"random_seed": 5},
            "transcript_excerpt_limit": 200,
            "unknown": "ignored",
        })
        assert config.top_n == 6
        assert config.candidate_pool_factor == 3
        assert config.persist_recommendations is False
        assert config.random_seed == 5
        assert config.transcript_excerpt_limit == 200

    @pytest.mark.parametrize(
        "field,value",
        [
            ("top_n", -1),
            ("candidate_pool_factor", 0),
            ("transcript_excerpt_limit", 3),
            ("transcript_excerpt_limit", 1000),
        ],
    )
    def test_bounds(self, field, value):
        with pytest.raises(ValidationError):
            EngineConfig(**{field: value})

    def test_resolve_config(self):
        assert resolve_config(None) is DEFAULT_CONFIG
        custom = EngineConfig(top_n=2)
        assert resolve_config(custom) is custom


class TestServerConfig:
    @pytest.fixture(autouse=True)
    def setup(self, monkeypatch):
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        self.monkeypatch = monkeypatch

    def test_defaults(self):
        config = ServerConfig.from_env()
        assert config.port == 8000
        assert config.data_source == "memory"
        assert config.catalog_collection == "wellness_catalog"
        assert config.requests_collection == "wellness_requests"
        assert config.recommendation_seed is None
        assert config.validate() == (True, [])

    def test_env_values(self, tmp_path):
        self.monkeypatch.setenv("PORT", "9001")
        self.monkeypatch.setenv("LOG_LEVEL", "debug")
        self.monkeypatch.setenv("DATA_SOURCE", "JSON")
        self.monkeypatch.setenv("CATALOG_JSON_PATH", str(tmp_path / "c.json"))
        self.monkeypatch.setenv("RECOMMENDATION_SEED", "42")
        config = ServerConfig.from_env()
        assert config.port == 9001
        assert config.log_level == "DEBUG"
        assert config.data_source == "json"
        assert config.catalog_json_path == tmp_path / "c.json"
        assert config.recommendation_seed == 42

    def test_non_integer_seed_reported_by_validate(self):
        self.monkeypatch.setenv("RECOMMENDATION_SEED", "abc")
        config = ServerConfig.from_env()
        assert config.recommendation_seed is None
        ok, errors = config.validate()
        assert not ok
        assert errors == ["RECOMMENDATION_SEED must be an integer, got 'abc'; ignoring it"]
        assert config.load_engine_config().random_seed is None

    def test_unknown_data_source_falls_back_to_memory(self):
        self.monkeypatch.setenv("DATA_SOURCE", "postgres")
        assert ServerConfig.from_env().data_source == "memory"

    def test_firebase_requires_credentials(self, tmp_path):
        ok, errors = ServerConfig(data_source="firebase").validate()
        assert not ok
        assert "FIREBASE_CREDENTIALS_PATH" in errors[0]
        ok, errors = ServerConfig(
            data_source="firebase", firebase_credentials_path=tmp_path / "missing.json"
        ).validate()
        assert not ok

    def test_load_engine_config_with_seed_override(self, tmp_path):
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"ranking": {"top_n": 3}, "message": {"random_seed": 1}}))
        config = ServerConfig(engine_config_path=path, recommendation_seed=9).load_engine_config()
        assert config.top_n == 3
        assert config.random_seed == 9
