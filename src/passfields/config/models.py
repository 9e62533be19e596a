"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, passfields.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from passfields.domain.types import SplicePolicy


class FieldGroupsConfig(BaseModel):
    """[field_groups] section."""

    model_config = {"frozen": True}

    splice_policy: SplicePolicy = SplicePolicy.VALIDATE_FIRST


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    fail_on_rejected: bool = False

