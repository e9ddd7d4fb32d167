"""Configuration for lazy-tui tables."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from lazy_tui.table.style import TableStyle
from lazy_tui.theme import Theme

# Environment variables overriding the defaults
ENV_PAGE_SIZE = "LAZY_TUI_PAGE_SIZE"
ENV_NEAR_END_THRESHOLD = "LAZY_TUI_NEAR_END_THRESHOLD"


class LazyTableOptions(BaseModel):
    """Options for LazySelectableTable.

    page_size is the number of visible rows and the PgUp/PgDn step.
    near_end_threshold is the distance from the last loaded row at which
    SelectionInfo.is_near_end turns on.
    """
    model_config = ConfigDict(frozen=True)

    page_size: int = Field(default=10, ge=1)
    near_end_threshold: int = Field(default=5, ge=0)
    style: TableStyle = Field(default_factory=TableStyle)
    theme: Theme = Field(default_factory=Theme)


def options_from_env(
    environ: Mapping[str, str] | None = None,
    **overrides: object,
) -> LazyTableOptions:
    """Build options from LAZY_TUI_* variables; keyword overrides win.

    Raises:
        pydantic.ValidationError: a variable holds a non-integer or out-of-range value
    """
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}
    if env.get(ENV_PAGE_SIZE):
        values["page_size"] = env[ENV_PAGE_SIZE]
    if env.get(ENV_NEAR_END_THRESHOLD):
        values["near_end_threshold"] = env[ENV_NEAR_END_THRESHOLD]
    values.update(overrides)
    return LazyTableOptions.model_validate(values)
