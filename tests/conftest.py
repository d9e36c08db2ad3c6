"""Shared pytest fixtures for apigraph tests."""

from collections.abc import Callable

import pytest

from apigraph.core import ir
from apigraph.core.http import HTTPRoot, ServiceExpr



@pytest.fixture
def api_design() -> ir.DesignRoot:
    """Return a design with a couple of servers."""
    return ir.DesignRoot(
        api=ir.APIDesign(
            name="store",
            title="Store API",
            servers=[
                ir.ServerSpec(name="prod", url="https://api.example.com"),
                ir.ServerSpec(name="dev", url="http://localhost:8080"),
                ir.ServerSpec(name="staging", url="https://staging.example.com"),
            ],
        )
    )


@pytest.fixture
def root(api_design: ir.DesignRoot) -> HTTPRoot:
    """Return an empty HTTP root bound to api_design."""
    return HTTPRoot(design=api_design)


@pytest.fixture
def declare_service(root: HTTPRoot) -> Callable[..., ServiceExpr]:
    """Return a helper declaring a service with methods on the root fixture."""

    def declare(name: str, *methods: str, parent: str = "", path: str = "") -> ServiceExpr:
        design = ir.ServiceDesign(
            name=name,
            methods=[ir.MethodDesign(name=m) for m in methods],
        )
        svc = root.service_for(design)
        svc.parent_name = parent
        svc.path = path
        return svc

    return declare
