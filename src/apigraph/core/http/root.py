"""
HTTP root expression: the aggregate of an HTTP API design.

The root owns the services, the API wide path prefix, headers and
parameters, and drives evaluation order through ``walk_sets``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from urllib.parse import SplitResult, urlsplit

from ..config import EvalConfig
from ..errors import DesignError, make_design_error
from ..ir import AttributeSpec, DesignRoot, MappedAttribute, ServiceDesign
from .expr import Expression
from .ordering import order_services
from .responses import ErrorResponseExpr
from .service import ServiceExpr

SetWalker = Callable[[Sequence[Expression]], None]

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# RFC 3986 reg-name and IP-literal
_REG_NAME_RE = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=%]*")
_IP_LITERAL_RE = re.compile(
    r"\[(?:[0-9A-Fa-f:.]+(?:%25[A-Za-z0-9\-._~%]+)?"
    r"|v[0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+)\]"
)


@dataclass(eq=False)
class HTTPRoot:
    """
    Root of the HTTP design.

    Attributes:
        design: Transport agnostic design root, if any
        path: Request path prefix common to all service endpoints
        consumes: Media types accepted by the API
        produces: Media types generated by the API
        services: HTTP services, in declaration order until ``walk_sets``
            reorders them
        errors: HTTP error responses
        metadata: Generator specific key/values
        config: Evaluation options

    Headers and parameters declared on the root apply to every endpoint.
    Their keys may use the "attribute:element" syntax.
    """

    design: DesignRoot | None = None
    path: str = ""
    consumes: list[str] = field(default_factory=list)
    produces: list[str] = field(default_factory=list)
    services: list[ServiceExpr] = field(default_factory=list)
    errors: list[ErrorResponseExpr] = field(default_factory=list)
    metadata: dict[str, list[str]] = field(default_factory=dict)
    config: EvalConfig = field(default_factory=EvalConfig)

    _params: AttributeSpec | None = field(default=None, init=False, repr=False)
    _headers: AttributeSpec | None = field(default=None, init=False, repr=False)

    def eval_name(self) -> str:
        """Name used in error messages."""
        return "API HTTP"

    def service(self, name: str) -> ServiceExpr | None:
        """Return the service with the given name if any."""
        for svc in self.services:
            if svc.name == name:
                return svc
        return None

    def service_for(self, service: ServiceDesign) -> ServiceExpr:
        """Return the HTTP service for the given service, creating it if needed."""
        if (svc := self.service(service.name)) is not None:
            return svc
        svc = ServiceExpr(service=service)
        self.services.append(svc)
        return svc

    def error(self, name: str) -> ErrorResponseExpr | None:
        for e in self.errors:
            if e.name == name:
                return e
        return None

    def headers(self) -> AttributeSpec:
        """Initialize and return the attribute holding the API headers."""
        if self._headers is None:
            self._headers = AttributeSpec.object()
        return self._headers

    def params(self) -> AttributeSpec:
        """Initialize and return the attribute holding the API parameters."""
        if self._params is None:
            self._params = AttributeSpec.object()
        return self._params

    def mapped_headers(self) -> MappedAttribute:
        """Compute the mapped attribute from the API headers."""
        return MappedAttribute.from_attribute(self._headers)

    def mapped_params(self) -> MappedAttribute:
        """Compute the mapped attribute from the API parameters."""
        return MappedAttribute.from_attribute(self._params)

    def schemes(self) -> list[str]:
        """
        Return the sorted, distinct URL schemes used by the API servers.

        With the "parsed" scheme policy a server contributes the scheme of
        its URL when the URL parses. With the "compat" policy only URLs that
        fail to parse contribute, which is what earlier generators expect.
        """
        if self.design is None:
            return []
        compat = self.config.scheme_policy == "compat"
        schemes: set[str] = set()
        for server in self.design.api.servers:
            try:
                parts = _parse_url(server.url)
            except ValueError:
                if compat and (m := _SCHEME_RE.match(server.url)):
                    schemes.add(m.group(1).lower())
                continue
            if not compat and parts.scheme:
                schemes.add(parts.scheme)
        return sorted(schemes)

    def validate(self) -> list[DesignError]:
        """Root level checks: unique service names and well-formed errors."""
        errors: list[DesignError] = []
        seen: set[str] = set()
        for svc in self.services:
            if svc.name in seen:
                errors.append(make_design_error(f'duplicate service "{svc.name}"', self))
            seen.add(svc.name)
        seen_errors: set[str] = set()
        for e in self.errors:
            if e.name in seen_errors:
                errors.append(make_design_error(f'duplicate error "{e.name}"', self))
            seen_errors.add(e.name)
            if not e.has_valid_status():
                errors.append(make_design_error(f"invalid status code {e.status_code}", e))
        return errors

    def walk_sets(self, walk: SetWalker) -> None:
        """
        Iterate through the expressions to validate and finalize them.

        Services are reordered in place so that parents come before their
        children, then ``walk`` is called three times: with the services,
        with all endpoints, and with all file servers.
        """
        self.services[:] = order_services(self.services, self.config.ordering)

        services: list[Expression] = list(self.services)
        endpoints: list[Expression] = []
        servers: list[Expression] = []
        for svc in self.services:
            endpoints.extend(svc.endpoints)
            servers.extend(svc.file_servers)

        walk(services)
        walk(endpoints)
        walk(servers)


def _parse_url(url: str) -> SplitResult:
    """Split url, raising ValueError when it is malformed."""
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in url):
        raise ValueError("invalid control character in URL")
    parts = urlsplit(url)
    # port is validated lazily
    _ = parts.port
    for component in (parts.netloc, parts.path, parts.fragment):
        if _BAD_ESCAPE_RE.search(component):
            raise ValueError(f"invalid URL escape in {component!r}")
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        literal = host[: host.find("]") + 1]
        if not _IP_LITERAL_RE.fullmatch(literal):
            raise ValueError(f"invalid IP literal {literal!r}")
    elif not _REG_NAME_RE.fullmatch(host.rpartition(":")[0] if ":" in host else host):
        raise ValueError(f"invalid character in host {host!r}")
    return parts
