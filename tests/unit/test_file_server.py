"""Tests for file server expressions."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from apigraph.core.eval import run
from apigraph.core.http import FileServerExpr, HTTPRoot, ServiceExpr

DeclareService = Callable[..., ServiceExpr]


class TestFinalize:
    def test_joins_root_service_and_request_path(
        self, root: HTTPRoot, declare_service: DeclareService
    ) -> None:
        root.path = "/api"
        svc = declare_service("web", path="v1")
        fs = svc.add_file_server("public/", "assets")
        fs.finalize(root)
        assert fs.request_path == "/api/v1/assets"

    def test_leading_slash_is_added(self, root: HTTPRoot, declare_service: DeclareService) -> None:
        fs = declare_service("web").add_file_server("index.html", "index.html")
        fs.finalize(root)
        assert fs.request_path == "/index.html"

    def test_duplicate_separators_are_removed(
        self, root: HTTPRoot, declare_service: DeclareService
    ) -> None:
        root.path = "/api/"
        fs = declare_service("web", path="/v1/").add_file_server("public/", "/assets/")
        fs.finalize(root)
        assert fs.request_path == "/api/v1/assets"

    def test_includes_ancestor_paths(
        self, root: HTTPRoot, declare_service: DeclareService
    ) -> None:
        parent = declare_service("parent", path="shop")
        child = declare_service("child", parent="parent", path="catalog")
        parent.finalize(root)
        child.finalize(root)
        fs = child.add_file_server("img/", "images/{*filepath}")
        fs.finalize(root)
        assert fs.request_path == "/shop/catalog/images/{*filepath}"

    def test_parent_canonical_route_is_ignored(
        self, root: HTTPRoot, declare_service: DeclareService
    ) -> None:
        root.path = "/api"
        carts = declare_service("carts", "show", path="carts")
        carts.canonical_endpoint_name = "show"
        carts.endpoint_for(carts.service.method("show")).route("GET", "/{cart_id}")
        items = declare_service("items", parent="carts", path="items")
        fs = items.add_file_server("public/logo.png", "logo.png")

        run(root)

        assert items.effective_path == "carts/{cart_id}/items"
        assert fs.request_path == "/api/carts/items/logo.png"
        assert not fs.is_dir()

    def test_without_service(self, root: HTTPRoot) -> None:
        root.path = "api"
        fs = FileServerExpr(file_path="x", request_path="x")
        fs.finalize(root)
        assert fs.request_path == "/api/x"


class TestIsDir:
    @pytest.mark.parametrize(
        ("request_path", "is_dir"),
        [
            ("/api/v1/assets/{*filepath}", True),
            ("/api/v1/{name}", True),
            ("/api/v1/logo.png", False),
            ("/", False),
        ],
    )
    def test_wildcard_marks_directory(self, request_path: str, is_dir: bool) -> None:
        fs = FileServerExpr(file_path="public/", request_path=request_path)
        assert fs.is_dir() is is_dir


class TestValidation:
    def test_eval_name_includes_service(self, declare_service: DeclareService) -> None:
        fs = declare_service("web").add_file_server("public/", "/")
        assert fs.eval_name() == 'service "web" file server public/'

    def test_eval_name_without_service(self) -> None:
        assert FileServerExpr(file_path="public/").eval_name() == "file server public/"

    def test_valid(self, root: HTTPRoot, declare_service: DeclareService) -> None:
        fs = declare_service("web").add_file_server("public/", "/")
        assert fs.validate(root) == []

    def test_empty_paths(self, root: HTTPRoot, declare_service: DeclareService) -> None:
        fs = declare_service("web").add_file_server("", "")
        messages = [e.message for e in fs.validate(root)]
        assert messages == ["file path is empty", "request path is empty"]

    def test_orphan(self, root: HTTPRoot) -> None:
        fs = FileServerExpr(file_path="public/", request_path="/")
        messages = [e.message for e in fs.validate(root)]
        assert messages == ["file server does not belong to a service"]
