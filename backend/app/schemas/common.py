from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class APIModel(BaseModel):
    """
    Common base for the app's pydantic models:
    - forbid unknown keys (prevents silent typos in config)
    - frozen, since values are built once at startup
    """

    model_config = ConfigDict(extra="forbid", frozen=True)


def _strip_or_none(v: object) -> object:
    if v is None:
        return None
    if isinstance(v, str):
        s = v.strip()
        return s
    return v
