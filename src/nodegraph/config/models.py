"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nodegraph.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class GraphConfig(BaseModel):
    """[graph] section — defaults for graphs built from the command line."""

    model_config = {"frozen": True}

    directed: bool = True
    weighted: bool = True
    positive_edges_only: bool = True

    @model_validator(mode="after")
    def _unweighted_implies_positive(self) -> GraphConfig:
        if not self.weighted and not self.positive_edges_only:
            msg = "positive_edges_only cannot be false when weighted is false"
            raise ValueError(msg)
        return self


class BenchConfig(BaseModel):
    """[bench] section — random graph shape for ``nodegraph bench``."""

    model_config = {"frozen": True}

    nodes: int = Field(default=200, ge=1)
    edge_probability: float = Field(default=0.05, ge=0.0, le=1.0)
    max_weight: int = Field(default=20, ge=1)
    repeats: int = Field(default=3, ge=1)
    seed: int | None = 42
