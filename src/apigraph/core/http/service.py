"""
HTTP service expressions.

A service may name a parent service. Its effective path, headers and
parameters extend the parent's effective values, so parents must be
finalized before their children (see ``HTTPRoot.walk_sets``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..errors import DesignError, make_design_error
from ..ir import AttributeSpec, DocsSpec, MappedAttribute, MethodDesign, ServiceDesign
from ..paths import join_paths
from .endpoint import EndpointExpr
from .file_server import FileServerExpr

if TYPE_CHECKING:
    from .root import HTTPRoot

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ServiceExpr:
    """
    HTTP transport of a service.

    Attributes:
        service: Transport agnostic service being augmented
        path: Path prefix relative to the parent service (or API)
        parent_name: Name of the parent service, empty for root services
        canonical_endpoint_name: Endpoint whose first route prefixes the
            paths of child services
        endpoints: HTTP endpoints in declaration order
        file_servers: File servers in declaration order
        metadata: Generator specific key/values

    Computed by finalize:
        effective_path: Parent effective path joined with path
        effective_headers: API, ancestor and service headers merged
        effective_params: API, ancestor and service parameters merged
    """

    service: ServiceDesign
    path: str = ""
    parent_name: str = ""
    canonical_endpoint_name: str = ""
    endpoints: list[EndpointExpr] = field(default_factory=list)
    file_servers: list[FileServerExpr] = field(default_factory=list)
    metadata: dict[str, list[str]] = field(default_factory=dict)

    _headers: AttributeSpec | None = field(default=None, init=False, repr=False)
    _params: AttributeSpec | None = field(default=None, init=False, repr=False)

    effective_path: str | None = field(default=None, init=False)
    effective_headers: MappedAttribute | None = field(default=None, init=False, repr=False)
    effective_params: MappedAttribute | None = field(default=None, init=False, repr=False)

    @property
    def name(self) -> str:
        return self.service.name

    def eval_name(self) -> str:
        """Name used in error messages."""
        return f'service "{self.name}"'

    def headers(self) -> AttributeSpec:
        """Initialize and return the attribute holding the service headers."""
        if self._headers is None:
            self._headers = AttributeSpec.object()
        return self._headers

    def params(self) -> AttributeSpec:
        """Initialize and return the attribute holding the service parameters."""
        if self._params is None:
            self._params = AttributeSpec.object()
        return self._params

    def mapped_headers(self) -> MappedAttribute:
        return MappedAttribute.from_attribute(self._headers)

    def mapped_params(self) -> MappedAttribute:
        return MappedAttribute.from_attribute(self._params)

    def endpoint(self, name: str) -> EndpointExpr | None:
        """Get endpoint by method name."""
        for e in self.endpoints:
            if e.name == name:
                return e
        return None

    def endpoint_for(self, method: MethodDesign) -> EndpointExpr:
        """Return the endpoint for the given method, creating it if needed."""
        if (e := self.endpoint(method.name)) is not None:
            return e
        e = EndpointExpr(method=method, service=self)
        self.endpoints.append(e)
        return e

    def canonical_endpoint(self) -> EndpointExpr | None:
        if not self.canonical_endpoint_name:
            return None
        return self.endpoint(self.canonical_endpoint_name)

    def add_file_server(
        self,
        file_path: str,
        request_path: str,
        description: str | None = None,
        docs: DocsSpec | None = None,
    ) -> FileServerExpr:
        """Declare a file server owned by this service."""
        fs = FileServerExpr(
            file_path=file_path,
            request_path=request_path,
            service=self,
            description=description,
            docs=docs,
        )
        self.file_servers.append(fs)
        return fs

    def parent(self, root: HTTPRoot) -> ServiceExpr | None:
        """Resolve the parent service by name."""
        if not self.parent_name:
            return None
        return root.service(self.parent_name)

    def prefix(self) -> str:
        """Path prefix of the service: effective once finalized, declared before."""
        if self.effective_path is not None:
            return self.effective_path
        return self.path

    def declared_prefix(self, root: HTTPRoot) -> str:
        """Join the declared paths of the ancestors and the service.

        Unlike ``prefix`` no canonical endpoint route is included, so the
        result never carries a parent's path wildcards.
        """
        paths = [self.path]
        seen = {self.name}
        current = self.parent(root)
        while current is not None and current.name not in seen:
            seen.add(current.name)
            paths.append(current.path)
            current = current.parent(root)
        return join_paths(*reversed(paths))

    def validate(self, root: HTTPRoot) -> list[DesignError]:
        errors: list[DesignError] = []
        if self.parent_name:
            if self.parent_name == self.name:
                errors.append(make_design_error("service cannot be its own parent", self))
            elif root.service(self.parent_name) is None:
                errors.append(
                    make_design_error(f'parent service "{self.parent_name}" not found', self)
                )
            elif (cycle := self._parent_cycle(root)) is not None:
                errors.append(
                    make_design_error(f"parent chain forms a cycle: {' -> '.join(cycle)}", self)
                )
        if self.canonical_endpoint_name and self.canonical_endpoint() is None:
            errors.append(
                make_design_error(
                    f'canonical endpoint "{self.canonical_endpoint_name}" not found', self
                )
            )
        seen: set[str] = set()
        for e in self.endpoints:
            if e.name in seen:
                errors.append(make_design_error(f'duplicate endpoint "{e.name}"', self))
            seen.add(e.name)
        return errors

    def _parent_cycle(self, root: HTTPRoot) -> list[str] | None:
        chain = [self.name]
        current = self.parent(root)
        while current is not None:
            chain.append(current.name)
            if current.name == self.name:
                return chain
            if current.name in chain[:-1]:
                # loop above this service, reported on its own members
                return None
            current = current.parent(root)
        return None

    def finalize(self, root: HTTPRoot) -> None:
        """Compute the effective path, headers and parameters."""
        parent = self.parent(root)
        if parent is None:
            base_path = ""
            headers = root.mapped_headers()
            params = root.mapped_params()
        else:
            if parent.effective_path is None:
                logger.warning(
                    "Finalizing %s before its parent %s", self.eval_name(), parent.eval_name()
                )
            base_path = parent.prefix()
            if (canonical := parent.canonical_endpoint()) is not None and canonical.routes:
                base_path = join_paths(base_path, canonical.routes[0].path)
            if parent.effective_headers is not None:
                headers = parent.effective_headers.copy()
                params = parent.effective_params.copy()
            else:
                headers = root.mapped_headers()
                headers.merge(parent.mapped_headers())
                params = root.mapped_params()
                params.merge(parent.mapped_params())

        headers.merge(self.mapped_headers())
        params.merge(self.mapped_params())
        self.effective_path = join_paths(base_path, self.path)
        self.effective_headers = headers
        self.effective_params = params
