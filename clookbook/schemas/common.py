"""
Shared Pydantic building blocks.

The browser client speaks camelCase (totalPages, startedAt, elapsedMs), while
the Python side stays snake_case. CamelModel bridges the two: responses are
serialized with camelCase aliases and requests accept either spelling.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest values the Integer and BigInteger columns can hold
MAX_INT = 2_147_483_647
MAX_BIGINT = 9_223_372_036_854_775_807


class CamelModel(BaseModel):
    """Base schema with camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OkResponse(BaseModel):
    """Bare acknowledgement returned by logout and the health check."""

    ok: bool = Field(default=True, description="Always true on success")
