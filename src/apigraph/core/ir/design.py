"""
Transport agnostic design types for apigraph IR.

The HTTP layer augments these: an HTTP service wraps a ServiceDesign and an
HTTP endpoint wraps a MethodDesign. Servers declared on the API drive the
set of URL schemes exposed by the HTTP root.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .attributes import AttributeSpec


class DocsSpec(BaseModel):
    """
    External documentation reference.

    Attributes:
        description: Short description of the documentation
        url: Link to the documentation
    """

    description: str | None = None
    url: str | None = None

    model_config = ConfigDict(frozen=True)


class ServerSpec(BaseModel):
    """
    A server hosting the API.

    Attributes:
        name: Server identifier
        url: Base URL, e.g. "https://api.example.com/v1"
        description: Optional documentation
    """

    name: str
    url: str
    description: str | None = None

    model_config = ConfigDict(frozen=True)


class APIDesign(BaseModel):
    """
    API level properties.

    Attributes:
        name: API name
        title: Human-readable title
        version: API version string
        servers: Servers hosting the API, in declaration order
    """

    name: str
    title: str | None = None
    version: str = "0.0.1"
    servers: list[ServerSpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=False)


class MethodDesign(BaseModel):
    """
    A service method.

    Attributes:
        name: Method name, unique within its service
        description: Optional documentation
        payload: Payload attribute, usually an object
    """

    name: str
    description: str | None = None
    payload: AttributeSpec | None = None

    model_config = ConfigDict(frozen=False)


class ServiceDesign(BaseModel):
    """
    A service: a named group of methods.

    Attributes:
        name: Service name, unique within the design
        description: Optional documentation
        methods: Methods in declaration order
        docs: Optional external documentation
    """

    name: str
    description: str | None = None
    methods: list[MethodDesign] = Field(default_factory=list)
    docs: DocsSpec | None = None

    model_config = ConfigDict(frozen=False)

    def method(self, name: str) -> MethodDesign | None:
        """Get method by name."""
        for m in self.methods:
            if m.name == name:
                return m
        return None


class DesignRoot(BaseModel):
    """
    Root of the transport agnostic design.

    Attributes:
        api: API properties (servers etc.)
        services: Services in declaration order
    """

    api: APIDesign
    services: list[ServiceDesign] = Field(default_factory=list)

    model_config = ConfigDict(frozen=False)

    def service(self, name: str) -> ServiceDesign | None:
        """Get service by name."""
        for s in self.services:
            if s.name == name:
                return s
        return None
