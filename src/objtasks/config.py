from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjTasksConfig:
    log_level: str = "WARNING"
    descendant_token: str = "descendant"  # CLI word for the " " combinator
    json_output: bool = False
