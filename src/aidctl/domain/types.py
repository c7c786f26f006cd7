"""Entity descriptor supplied alongside every generation request."""

from __future__ import annotations

from pydantic import BaseModel, Field


class EntityDescriptor(BaseModel):
    """Caller-owned metadata for the entity an AID is being minted for.

    The descriptor does not influence the identifier's characters; AIDs are
    random, not content-derived. It is accepted so call sites stay uniform
    and so generation can be logged against the entity it was issued for.
    Whether ``prefix`` agrees with the prefix passed to the generator is the
    caller's responsibility.
    """

    model_config = {"frozen": True}

    title: str = Field(min_length=1)
    kind: str
    status: str
    prefix: str | None = None
