"""
HTTP endpoint and route expressions.

An endpoint binds a service method to one or more HTTP routes. Its
effective headers and parameters layer the endpoint declarations on top of
the owning service's effective values, which in turn include the API-wide
declarations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..errors import DesignError, make_design_error
from ..ir import AttributeSpec, MappedAttribute, MethodDesign
from ..paths import absolute_path, extract_wildcard_markers, extract_wildcards

if TYPE_CHECKING:
    from .root import HTTPRoot
    from .service import ServiceExpr

HTTP_VERBS = ("GET", "HEAD", "POST", "PUT", "DELETE", "CONNECT", "OPTIONS", "TRACE", "PATCH")

# A catch-all wildcard followed by anything
_INNER_CATCH_ALL_RE = re.compile(r"/\{\*[a-zA-Z0-9_]+\}(?!$)")


@dataclass(eq=False)
class RouteExpr:
    """
    A single HTTP route of an endpoint.

    Attributes:
        method: HTTP verb, e.g. "GET"
        path: Path relative to the service, may contain wildcards
        endpoint: Owning endpoint
    """

    method: str
    path: str
    endpoint: EndpointExpr | None = field(default=None, repr=False)

    def is_valid_verb(self) -> bool:
        return self.method in HTTP_VERBS

    def wildcards(self) -> list[str]:
        return extract_wildcards(self.path)

    def full_path(self, root: HTTPRoot) -> str:
        """Absolute path including the API and service prefixes."""
        prefix = ""
        if self.endpoint is not None and self.endpoint.service is not None:
            prefix = self.endpoint.service.prefix()
        return absolute_path(root.path, prefix, self.path)


@dataclass(eq=False)
class EndpointExpr:
    """
    HTTP transport of a service method.

    Attributes:
        method: The method this endpoint exposes
        service: Owning service
        routes: HTTP routes in declaration order
        metadata: Generator specific key/values

    Computed by finalize:
        effective_headers: API, service and endpoint headers merged
        effective_params: API, service and endpoint parameters merged
        full_paths: Absolute path of each route
        path_params: Wildcard names across all routes, first occurrence order
        query_params: Effective parameters not bound to a path wildcard
    """

    method: MethodDesign
    service: ServiceExpr | None = field(default=None, repr=False)
    routes: list[RouteExpr] = field(default_factory=list)
    metadata: dict[str, list[str]] = field(default_factory=dict)

    _headers: AttributeSpec | None = field(default=None, init=False, repr=False)
    _params: AttributeSpec | None = field(default=None, init=False, repr=False)

    effective_headers: MappedAttribute | None = field(default=None, init=False, repr=False)
    effective_params: MappedAttribute | None = field(default=None, init=False, repr=False)
    full_paths: list[str] = field(default_factory=list, init=False)
    path_params: list[str] = field(default_factory=list, init=False)
    query_params: MappedAttribute | None = field(default=None, init=False, repr=False)

    @property
    def name(self) -> str:
        return self.method.name

    def eval_name(self) -> str:
        """Name used in error messages."""
        prefix = f'endpoint "{self.name}"'
        if self.service is not None:
            return f"{prefix} of {self.service.eval_name()}"
        return prefix

    def headers(self) -> AttributeSpec:
        """Initialize and return the attribute holding the endpoint headers."""
        if self._headers is None:
            self._headers = AttributeSpec.object()
        return self._headers

    def params(self) -> AttributeSpec:
        """Initialize and return the attribute holding the endpoint parameters."""
        if self._params is None:
            self._params = AttributeSpec.object()
        return self._params

    def mapped_headers(self) -> MappedAttribute:
        return MappedAttribute.from_attribute(self._headers)

    def mapped_params(self) -> MappedAttribute:
        return MappedAttribute.from_attribute(self._params)

    def route(self, method: str, path: str) -> RouteExpr:
        """Add a route to the endpoint."""
        r = RouteExpr(method=method.upper(), path=path, endpoint=self)
        self.routes.append(r)
        return r

    def validate(self, root: HTTPRoot) -> list[DesignError]:
        errors: list[DesignError] = []
        if not self.routes:
            errors.append(make_design_error("endpoint has no route", self))
        for r in self.routes:
            if not r.is_valid_verb():
                errors.append(make_design_error(f'invalid HTTP method "{r.method}"', self))
            if _INNER_CATCH_ALL_RE.search(r.path):
                errors.append(
                    make_design_error(
                        f'catch-all wildcard must be the last segment of path "{r.path}"', self
                    )
                )
            seen: set[str] = set()
            for name, _ in extract_wildcard_markers(r.full_path(root)):
                if name in seen:
                    errors.append(
                        make_design_error(
                            f'wildcard "{name}" appears more than once in path "{r.path}"', self
                        )
                    )
                seen.add(name)
        return errors

    def finalize(self, root: HTTPRoot) -> None:
        """Compute the effective headers, parameters and paths.

        The owning service must already be finalized.
        """
        if self.service is not None and self.service.effective_headers is not None:
            headers = self.service.effective_headers.copy()
            params = self.service.effective_params.copy()
        else:
            headers = root.mapped_headers()
            params = root.mapped_params()
        headers.merge(self.mapped_headers())
        params.merge(self.mapped_params())
        self.effective_headers = headers
        self.effective_params = params

        self.full_paths = [r.full_path(root) for r in self.routes]
        path_params: list[str] = []
        for p in self.full_paths:
            for wc in extract_wildcards(p):
                if wc not in path_params:
                    path_params.append(wc)
        self.path_params = path_params

        query = params.copy()
        for wc in path_params:
            query.remove(params.attribute_name(wc))
        self.query_params = query
