import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError

ORDERING_STRATEGIES = ("topological", "declaration")
SCHEME_POLICIES = ("parsed", "compat")


@dataclass(frozen=True)
class EvalConfig:
    """Design evaluation configuration.

    Examples in apigraph.toml:

        [eval]
        ordering = "topological"   # or "declaration"
        scheme_policy = "parsed"   # or "compat"
    """

    ordering: str = "topological"  # service ordering used by walk_sets
    scheme_policy: str = "parsed"  # which server URLs contribute to schemes()

    def __post_init__(self) -> None:
        if self.ordering not in ORDERING_STRATEGIES:
            raise ConfigError(
                f"Unknown ordering '{self.ordering}'. "
                f"Expected one of: {', '.join(ORDERING_STRATEGIES)}"
            )
        if self.scheme_policy not in SCHEME_POLICIES:
            raise ConfigError(
                f"Unknown scheme_policy '{self.scheme_policy}'. "
                f"Expected one of: {', '.join(SCHEME_POLICIES)}"
            )


def config_from_dict(data: dict[str, Any]) -> EvalConfig:
    known = {f.name for f in fields(EvalConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown [eval] settings: {', '.join(unknown)}")
    return EvalConfig(
        ordering=data.get("ordering", "topological"),
        scheme_policy=data.get("scheme_policy", "parsed"),
    )


def load_config(path: Path) -> EvalConfig:
    """Load the ``[eval]`` table of a TOML file.

    A file without an ``[eval]`` table yields the default configuration.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    eval_data = data.get("eval", {})
    if not isinstance(eval_data, dict):
        raise ConfigError(f"[eval] in {path} must be a table")
    return config_from_dict(eval_data)
