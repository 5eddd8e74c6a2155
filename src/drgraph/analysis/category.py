"""Component category classification."""

from .. import config
from ..core.types import Category, Node, NodeType


def classify(node: Node) -> Category:
    """
    Derive the semantic category of a node.

    Unresolved nodes may carry no variant attributes at all, so the type is
    checked before any attribute is read.
    """
    if node.type == NodeType.UNRESOLVED:
        return Category.UNRESOLVED

    category = node.resolved_variant_attributes.get(config.CATEGORY_ATTRIBUTE)
    if category in config.LIBRARY_CATEGORIES:
        return Category.LIBRARY
    if category in config.PLATFORM_CATEGORIES:
        return Category.PLATFORM
    return Category.UNKNOWN
