"""
Error types for apigraph design evaluation and configuration.
"""

from __future__ import annotations


class ApiGraphError(Exception):
    """Base exception for all apigraph errors."""

    def __init__(self, message: str, expression: str | None = None):
        self.message = message
        self.expression = expression
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending expression if available."""
        if self.expression:
            return f"{self.expression}: {self.message}"
        return self.message


class DesignError(ApiGraphError):
    """
    A single structural problem found while validating a design expression.

    ``expression`` holds the human readable name of the expression that
    caused the problem (see ``eval_name()`` on the expression types).

    Examples:
    - Service whose parent is not declared
    - Parent chain that loops back on itself
    - Endpoint route using an unknown HTTP verb
    """

    pass


class ValidationError(ApiGraphError):
    """
    Raised by the evaluation driver when one batch fails validation.

    Carries every DesignError collected for the batch so that callers can
    report them all at once.
    """

    def __init__(self, errors: list[DesignError]):
        self.errors = list(errors)
        super().__init__(self._join(self.errors))

    @staticmethod
    def _join(errors: list[DesignError]) -> str:
        if len(errors) == 1:
            return str(errors[0])
        lines = [f"{len(errors)} design errors:"]
        lines.extend(f"  - {e}" for e in errors)
        return "\n".join(lines)


class ConfigError(ApiGraphError):
    """
    Raised when evaluation configuration is invalid.

    Examples:
    - Unknown service ordering strategy
    - Unknown scheme policy
    - Unreadable TOML file
    """

    pass


def make_design_error(message: str, expression: object | None = None) -> DesignError:
    """
    Helper to create a DesignError attributed to an expression.

    Args:
        message: Error description
        expression: Expression exposing ``eval_name()``, or a plain name

    Returns:
        DesignError with the expression name attached
    """
    if expression is None:
        return DesignError(message)
    eval_name = getattr(expression, "eval_name", None)
    name = eval_name() if callable(eval_name) else str(expression)
    return DesignError(message, name)
