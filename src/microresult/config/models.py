"""Pydantic models for the sections of microresult.toml.

Sparse TOML contract: defaults are baked in here and the file only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CodecConfig(BaseModel):
    """[codec] section: the wire format commands write by default."""

    model_config = {"frozen": True}

    compact: bool = False
    indent: int | None = Field(default=2, ge=0)
