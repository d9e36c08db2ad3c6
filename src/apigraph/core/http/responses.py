"""
Error response expressions declared at the API level.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class ErrorResponseExpr:
    """
    HTTP response used for a named design error.

    Attributes:
        name: Name of the error, as raised by service methods
        status_code: HTTP status code of the response
        description: Optional documentation
        metadata: Generator specific key/values
    """

    name: str
    status_code: int = 400
    description: str | None = None
    metadata: dict[str, list[str]] = field(default_factory=dict)

    def eval_name(self) -> str:
        return f'HTTP error "{self.name}"'

    def has_valid_status(self) -> bool:
        return 100 <= self.status_code <= 599
