"""Configuration for product construction."""

import os

from pydantic import BaseModel, Field

MAX_ARITY = 26
"""Largest number of producers one product may combine."""


class ProductConfig(BaseModel):
    """
    Configuration for building a product.

    The defaults reproduce the plain nested-loop semantics; configs are only
    needed to tighten the arity cap or to allow single-pass inner producers.
    """

    max_arity: int = Field(
        default=MAX_ARITY,
        ge=1,
        le=MAX_ARITY,
        description="Maximum number of producers per product. Can lower the hard cap, never raise it.",
    )

    buffer_iterators: bool = Field(
        default=False,
        description="Wrap single-pass inner producers in a replay buffer instead of rejecting them.",
    )

    @classmethod
    def from_env(cls) -> "ProductConfig":
        """
        Build a config from ``CARTESIAN_*`` environment variables.

        Recognised variables:
            CARTESIAN_MAX_ARITY: integer in 1..26.
            CARTESIAN_BUFFER_ITERATORS: boolean ("1", "true", "yes", ...).

        Unset variables keep their defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        values: dict[str, str] = {}
        if "CARTESIAN_MAX_ARITY" in os.environ:
            values["max_arity"] = os.environ["CARTESIAN_MAX_ARITY"]
        if "CARTESIAN_BUFFER_ITERATORS" in os.environ:
            values["buffer_iterators"] = os.environ["CARTESIAN_BUFFER_ITERATORS"]
        return cls.model_validate(values)


DEFAULT_CONFIG = ProductConfig()
