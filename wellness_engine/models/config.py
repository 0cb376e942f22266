"""
Engine configuration — candidate fetching, ranking and persistence parameters.

EngineConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file at ENGINE_CONFIG_PATH); from_dict() merges it with these defaults.

Scoring weights are not part of the config: they are fixed constants in
stages/ranking/product_scoring.py.
"""

from typing import Dict, Optional

from pydantic import BaseModel, model_validator

from .records import TRANSCRIPT_EXCERPT_LIMIT


class EngineConfig(BaseModel):
    """Configuration for the recommendation engine."""

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    # Number of recommendations returned per request.
    top_n: int = 4

    # When the situation-filtered catalog query returns fewer than
    # top_n * candidate_pool_factor items, the full catalog is merged in.
    candidate_pool_factor: int = 2

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    # Whether the HTTP layer persists the top recommendation as a wellness request.
    persist_recommendations: bool = True

    # Stored transcript excerpts are cut to this many characters (ellipsis included).
    # Records never store more than TRANSCRIPT_EXCERPT_LIMIT.
    transcript_excerpt_limit: int = TRANSCRIPT_EXCERPT_LIMIT

    # -------------------------------------------------------------------------
    # Message composition
    # -------------------------------------------------------------------------

    # Seed for the calming-phrase draw. None = non-deterministic.
    random_seed: Optional[int] = None

    @model_validator(mode="after")
    def check_bounds(self):
        if self.top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {self.top_n}")
        if self.candidate_pool_factor < 1:
            raise ValueError(
                f"candidate_pool_factor must be >= 1, got {self.candidate_pool_factor}"
            )
        if not 4 <= self.transcript_excerpt_limit <= TRANSCRIPT_EXCERPT_LIMIT:
            raise ValueError(
                f"transcript_excerpt_limit must be between 4 and {TRANSCRIPT_EXCERPT_LIMIT}, "
                f"got {self.transcript_excerpt_limit}"
            )
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "EngineConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "ranking" in config_dict:
            rk = config_dict["ranking"]
            if "top_n" in rk:
                flat["top_n"] = rk["top_n"]
            if "candidate_pool_factor" in rk:
                flat["candidate_pool_factor"] = rk["candidate_pool_factor"]
        if "persistence" in config_dict:
            ps = config_dict["persistence"]
            if "enabled" in ps:
                flat["persist_recommendations"] = ps["enabled"]
            if "transcript_excerpt_limit" in ps:
                flat["transcript_excerpt_limit"] = ps["transcript_excerpt_limit"]
        if "message" in config_dict:
            ms = config_dict["message"]
            if "random_seed" in ms:
                flat["random_seed"] = ms["random_seed"]
        # Flat keys are accepted as well
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = EngineConfig()


def resolve_config(config: Optional["EngineConfig"]) -> "EngineConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
