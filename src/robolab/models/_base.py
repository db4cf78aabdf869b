"""Base model for robolab value records.

Every record inherits from :class:`RobolabModel` which provides:

* ``frozen=True`` so records are hashable values that are replaced,
  never mutated.
* ``extra="forbid"`` so misspelled field names fail loudly.
* ``allow_inf_nan=False`` so every float field is a finite number.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RobolabModel(BaseModel):
    """Base for immutable robolab records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        allow_inf_nan=False,
    )
