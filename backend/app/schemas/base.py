"""Wire Model Base: shared pydantic configuration for every API schema.

Invariants:
    - Serialized field names are camelCase
    - Inputs accept camelCase aliases and Python field names alike

Design Decisions:
    - alias_generator over per-field aliases: one place defines the wire naming;
      explicit aliases (e.g. "_id") still take priority
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for request and response schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def strip_required(v: str, label: str) -> str:
    """Strip surrounding whitespace; reject blank values."""
    v = v.strip()
    if not v:
        raise ValueError(f"{label} cannot be empty or whitespace")
    return v
