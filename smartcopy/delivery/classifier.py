"""Terminal engine classification."""

import logging

from smartcopy.config import (
    get_max_tree_depth,
    get_max_tree_nodes,
    get_modern_tokens,
    get_classic_tokens,
)
from smartcopy.config.constants import CHILD_ACCESSORS
from smartcopy.delivery.probe import try_get_related, type_name
from smartcopy.delivery.types import EngineVariant

logger = logging.getLogger("smartcopy")


def children_of(node) -> list:
    """Child components of a node, or [] if it has none or they can't be read."""
    children = try_get_related(node, CHILD_ACCESSORS)
    if children is None or isinstance(children, (str, bytes)):
        return []
    try:
        return list(children)
    except TypeError:
        return []


def walk_tree(root, max_depth: int | None = None, max_nodes: int | None = None):
    """Depth-first, pre-order walk over a component tree.

    Bounded by depth and node count. Nodes already seen (by identity) are
    skipped so cyclic parent/child links can't loop.
    """
    if root is None:
        return
    max_depth = max_depth if max_depth is not None else get_max_tree_depth()
    max_nodes = max_nodes if max_nodes is not None else get_max_tree_nodes()

    # id -> node; holding the node keeps its id from being reused mid-walk
    seen = {}
    stack = [(root, 0)]
    while stack and len(seen) < max_nodes:
        node, depth = stack.pop()
        if id(node) in seen:
            continue
        seen[id(node)] = node
        yield node
        if depth >= max_depth:
            continue
        # reversed so the first child is visited first
        for child in reversed(children_of(node)):
            if child is not None and id(child) not in seen:
                stack.append((child, depth + 1))


def collect_type_names(root) -> list[str]:
    """Fully-qualified type names of every node, in visit order."""
    return [type_name(node) for node in walk_tree(root)]


def _matches(names: list[str], tokens: list[str]) -> bool:
    return any(token in name for name in names for token in tokens)


def classify(target) -> EngineVariant:
    """Decide which terminal engine family a target's component tree belongs to."""
    try:
        names = collect_type_names(target)
    except Exception as e:
        logger.debug("Component tree walk failed: %s", e)
        return EngineVariant.UNKNOWN

    logger.debug("Component tree: %s", names)

    if _matches(names, get_modern_tokens()):
        logger.info("Detected block terminal")
        return EngineVariant.MODERN_BLOCK

    if _matches(names, get_classic_tokens()):
        logger.info("Detected classic terminal")
        return EngineVariant.CLASSIC

    logger.info("Could not determine terminal engine")
    return EngineVariant.UNKNOWN
