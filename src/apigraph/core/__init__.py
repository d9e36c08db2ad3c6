"""Core apigraph functionality: design IR, HTTP expressions, ordering, evaluation."""

from . import ir
from .config import EvalConfig, load_config
from .errors import (
    ApiGraphError,
    ConfigError,
    DesignError,
    ValidationError,
)
from .eval import run
from .http import (
    EndpointExpr,
    ErrorResponseExpr,
    FileServerExpr,
    HTTPRoot,
    RouteExpr,
    ServiceExpr,
)
from .paths import absolute_path, extract_wildcards, join_paths, name_map

__all__ = [
    "ir",
    "ApiGraphError",
    "ConfigError",
    "DesignError",
    "ValidationError",
    "EvalConfig",
    "load_config",
    "run",
    "HTTPRoot",
    "ServiceExpr",
    "EndpointExpr",
    "RouteExpr",
    "FileServerExpr",
    "ErrorResponseExpr",
    "absolute_path",
    "extract_wildcards",
    "join_paths",
    "name_map",
]
