"""Check settings — environment defaults, overridden by CLI flags."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

from narcheck.models import COMPILE_SCOPE, NAR_TYPE


class CheckSettings(BaseModel):
    bundle_type: str = Field(default=NAR_TYPE, min_length=1)
    scope: str = Field(default=COMPILE_SCOPE, min_length=1)
    graph_format: str | None = None  # None: pick by file name
    json_output: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> CheckSettings:
        """Build settings from ``NARCHECK_*`` variables.

        Keyword overrides win over the environment; ``None`` overrides are
        ignored so unset CLI options fall through.
        """
        values: dict[str, Any] = {}
        env_map = {
            "bundle_type": "NARCHECK_BUNDLE_TYPE",
            "scope": "NARCHECK_SCOPE",
            "graph_format": "NARCHECK_GRAPH_FORMAT",
        }
        for field_name, var in env_map.items():
            value = os.environ.get(var)
            if value:
                values[field_name] = value
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
