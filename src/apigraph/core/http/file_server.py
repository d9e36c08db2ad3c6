"""
File server expressions: endpoints serving static assets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..errors import DesignError, make_design_error
from ..ir import DocsSpec
from ..paths import absolute_path, has_wildcard

if TYPE_CHECKING:
    from .root import HTTPRoot
    from .service import ServiceExpr


@dataclass(eq=False)
class FileServerExpr:
    """
    An endpoint that serves static assets.

    Attributes:
        file_path: File system path of the asset(s) being served
        request_path: HTTP path serving the assets. Relative as declared,
            absolute once finalized.
        service: Owning service
        description: Optional documentation
        docs: Optional external documentation
        metadata: Generator specific key/values
    """

    file_path: str
    request_path: str = ""
    service: ServiceExpr | None = field(default=None, repr=False)
    description: str | None = None
    docs: DocsSpec | None = None
    metadata: dict[str, list[str]] = field(default_factory=dict)

    def eval_name(self) -> str:
        """Name used in error messages."""
        suffix = f"file server {self.file_path}"
        if self.service is not None:
            return f"{self.service.eval_name()} {suffix}"
        return suffix

    def validate(self, root: HTTPRoot) -> list[DesignError]:
        errors: list[DesignError] = []
        if not self.file_path:
            errors.append(make_design_error("file path is empty", self))
        if not self.request_path:
            errors.append(make_design_error("request path is empty", self))
        if self.service is None:
            errors.append(make_design_error("file server does not belong to a service", self))
        return errors

    def finalize(self, root: HTTPRoot) -> None:
        """Normalize the request path.

        Prefixes the declared path with the API path and the declared paths
        of the owning service and its ancestors. Canonical endpoint routes
        are not part of the prefix: a request path without a wildcard serves
        a single file. The result always starts with "/".
        """
        prefix = self.service.declared_prefix(root) if self.service is not None else ""
        self.request_path = absolute_path(root.path, prefix, self.request_path)

    def is_dir(self) -> bool:
        """True if the file server serves a directory, False if a single file."""
        return has_wildcard(self.request_path)
