"""HTTP transport layer of the design IR: root, services, endpoints and file servers."""

from .endpoint import HTTP_VERBS, EndpointExpr, RouteExpr
from .expr import Expression
from .file_server import FileServerExpr
from .ordering import declaration_order, order_services, topological_order
from .responses import ErrorResponseExpr
from .root import HTTPRoot, SetWalker
from .service import ServiceExpr

__all__ = [
    "HTTP_VERBS",
    "EndpointExpr",
    "ErrorResponseExpr",
    "Expression",
    "FileServerExpr",
    "HTTPRoot",
    "RouteExpr",
    "ServiceExpr",
    "SetWalker",
    "declaration_order",
    "order_services",
    "topological_order",
]
