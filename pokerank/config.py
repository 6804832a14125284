"""
Evaluator configuration.
"""

from typing import Literal

from pydantic import BaseModel


class EvaluatorConfig(BaseModel):
    """Configuration for hand evaluation."""

    # "dynamic" builds the lookup table at first use, "static" decodes the
    # packaged pokerank.tables.static_table module
    table_source: Literal["dynamic", "static"] = "dynamic"

    # Compare the static table against a freshly built one when loading it
    verify_static_table: bool = False

    class Config:
        extra = "forbid"
        frozen = True
