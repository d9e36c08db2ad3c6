"""
Service ordering for design evaluation.

Services must be finalized after their parent because their effective
values extend the parent's. Two strategies are available:

- ``topological``: Kahn's algorithm over parent-name edges. Every ancestor
  precedes all of its descendants whatever the nesting depth.
- ``declaration``: stable sort with the comparator "a service goes after the
  service it names as parent". A service only moves ahead of a neighbouring
  direct child, so parents declared after unrelated services or deeper
  hierarchies may still come out of order. Kept for output compatibility.
"""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING

from ..errors import ConfigError

if TYPE_CHECKING:
    from .service import ServiceExpr

logger = logging.getLogger(__name__)


def order_services(services: list[ServiceExpr], strategy: str = "topological") -> list[ServiceExpr]:
    """
    Return services ordered for evaluation.

    Args:
        services: Services in declaration order
        strategy: "topological" or "declaration"

    Returns:
        New list with the same services, parents first

    Raises:
        ConfigError: If the strategy is unknown
    """
    if strategy == "topological":
        return topological_order(services)
    if strategy == "declaration":
        return declaration_order(services)
    raise ConfigError(f"Unknown ordering '{strategy}'")


def topological_order(services: list[ServiceExpr]) -> list[ServiceExpr]:
    """
    Order services so that every parent precedes its children.

    Ties are broken by declaration order. Services naming an unknown parent
    are treated as root services. Services caught in a parent cycle are
    appended last, in declaration order; validation reports the cycle.
    """
    # First declaration wins when names repeat
    index_by_name: dict[str, int] = {}
    for i, svc in enumerate(services):
        index_by_name.setdefault(svc.name, i)

    children: dict[int, list[int]] = {i: [] for i in range(len(services))}
    in_degree = [0] * len(services)
    for i, svc in enumerate(services):
        if not svc.parent_name:
            continue
        parent_idx = index_by_name.get(svc.parent_name)
        if parent_idx is None:
            logger.warning(
                "Service '%s' names unknown parent '%s'", svc.name, svc.parent_name
            )
            continue
        if parent_idx == i:
            continue
        children[parent_idx].append(i)
        in_degree[i] = 1

    ready = [i for i, degree in enumerate(in_degree) if degree == 0]
    heapq.heapify(ready)
    ordered: list[int] = []
    while ready:
        i = heapq.heappop(ready)
        ordered.append(i)
        for child in children[i]:
            in_degree[child] -= 1
            if in_degree[child] == 0:
                heapq.heappush(ready, child)

    if len(ordered) != len(services):
        done = set(ordered)
        remaining = [i for i in range(len(services)) if i not in done]
        logger.warning(
            "Parent cycle detected involving services: %s",
            ", ".join(services[i].name for i in remaining),
        )
        ordered.extend(remaining)

    logger.debug("Service order: %s", [services[i].name for i in ordered])
    return [services[i] for i in ordered]


def declaration_order(services: list[ServiceExpr]) -> list[ServiceExpr]:
    """
    Stable insertion sort moving a service ahead of its direct child.

    Reproduces sorting with the comparator ``less(a, b) = b.parent_name ==
    a.name``: a service only moves left while its left neighbour names it as
    parent.

    This matches a stable sort with that comparator only up to 20 services.
    Go's ``sort.SliceStable`` insertion sorts blocks of 20 and then merges
    them with ``symMerge``; with a non-transitive comparator the merge can
    order longer lists differently, and that merge is not reproduced here.
    """
    ordered = list(services)
    for i in range(1, len(ordered)):
        j = i
        while j > 0 and ordered[j - 1].parent_name == ordered[j].name:
            ordered[j - 1], ordered[j] = ordered[j], ordered[j - 1]
            j -= 1
    return ordered
