"""
apigraph - in-memory IR for HTTP transport API designs.

Builds a graph of services, endpoints and file servers, evaluates it in
dependency order and exposes finalized values to code generators.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ApiGraphError, ConfigError, DesignError, ValidationError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ApiGraphError",
    "ConfigError",
    "DesignError",
    "ValidationError",
]
