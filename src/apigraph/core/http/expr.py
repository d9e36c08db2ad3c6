from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..errors import DesignError
    from .root import HTTPRoot


class Expression(Protocol):
    """Interface shared by the expressions evaluated through ``walk_sets``."""

    def eval_name(self) -> str: ...

    def validate(self, root: HTTPRoot) -> list[DesignError]: ...

    def finalize(self, root: HTTPRoot) -> None: ...
