"""
Design evaluation driver.

Runs the two evaluation phases over the expression sets produced by
``HTTPRoot.walk_sets``: every expression of a set is validated, and only
when the whole set is valid are its expressions finalized. The next set is
requested after that, so endpoints and file servers always see finalized
services.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import DesignError, ValidationError
from .http import Expression, HTTPRoot

logger = logging.getLogger(__name__)


def run(root: HTTPRoot) -> HTTPRoot:
    """
    Validate and finalize a complete HTTP design.

    Performs:
    1. Root level validation
    2. Ordering of services (parents first)
    3. Validate then finalize services
    4. Validate then finalize endpoints
    5. Validate then finalize file servers

    Args:
        root: Fully declared HTTP root

    Returns:
        The same root, finalized

    Raises:
        ValidationError: With every problem found in the first failing set
    """
    errors = root.validate()
    if errors:
        raise ValidationError(errors)
    if root.config.scheme_policy == "compat":
        logger.warning("scheme_policy 'compat' collects schemes of unparseable server URLs only")

    batch = 0

    def visit(expressions: Sequence[Expression]) -> None:
        nonlocal batch
        batch += 1
        logger.debug("Evaluating set %d (%d expressions)", batch, len(expressions))
        eval_set(root, expressions)

    root.walk_sets(visit)
    return root


def validate_set(root: HTTPRoot, expressions: Sequence[Expression]) -> list[DesignError]:
    """Validate every expression of a set and collect the problems."""
    errors: list[DesignError] = []
    for expr in expressions:
        errors.extend(expr.validate(root))
    return errors


def eval_set(root: HTTPRoot, expressions: Sequence[Expression]) -> None:
    """Validate all expressions of a set, then finalize them in order."""
    errors = validate_set(root, expressions)
    if errors:
        for e in errors:
            logger.debug("Validation failed: %s", e)
        raise ValidationError(errors)
    for expr in expressions:
        expr.finalize(root)
