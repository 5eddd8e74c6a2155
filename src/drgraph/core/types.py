"""
Core type definitions for drgraph.

Nodes and links mirror the records of a Gradle dependency-resolution report.
Field names follow Python conventions; the camelCase keys used in the report
are accepted as aliases so a report can be validated as-is.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .. import config

logger = logging.getLogger(__name__)


class NodeType(StrEnum):
    """Kinds of components found in a resolution result."""
    PROJECT = "project"
    MODULE = "module"
    UNRESOLVED = "unresolved"
    OTHER = "other"


class Category(StrEnum):
    """Semantic category derived from a node's type and variant attributes."""
    UNRESOLVED = "Unresolved"
    LIBRARY = "Library"
    PLATFORM = "Platform"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        """Display label used by the details panel."""
        if self is Category.UNRESOLVED:
            return "Unresolved dependency"
        return self.value


class SelectionReason(BaseModel):
    """Why the resolution engine picked a particular version."""
    cause: str = ""
    reason: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("cause", "reason", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Node(BaseModel):
    """
    A resolved or unresolved component.

    `visible`, `category` and `focus` are derived state owned by the
    analysis passes; `index` is the node's position in its graph.
    """
    id: str
    name: str = ""
    type: NodeType = NodeType.OTHER
    resolved_variant_attributes: Dict[str, str] = Field(
        default_factory=dict, alias="resolvedVariantAttributes"
    )
    resolved_variant_display_name: str = Field(default="", alias="resolvedVariantDisplayName")
    selection_reasons: List[SelectionReason] = Field(
        default_factory=list, alias="selectionReasons"
    )
    forced: bool = False
    composite: bool = False
    conflict: bool = False
    constraint: bool = False
    rule: bool = False

    # Derived
    visible: bool = True
    category: Category = Category.UNKNOWN
    focus: bool = False
    index: int = -1

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> Any:
        if isinstance(value, NodeType):
            return value
        try:
            return NodeType(str(value).lower())
        except ValueError:
            logger.warning(f"Unknown node type {value!r}, treating as '{NodeType.OTHER}'")
            return NodeType.OTHER

    @field_validator("resolved_variant_attributes", mode="before")
    @classmethod
    def _stringify_attributes(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value

    @field_validator("resolved_variant_display_name", mode="before")
    @classmethod
    def _none_display_name(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("selection_reasons", mode="before")
    @classmethod
    def _none_reasons(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def markers(self) -> List[str]:
        """Names of the resolution flags set on this node, in display order."""
        return [
            flag for flag in ("forced", "composite", "conflict", "constraint", "rule")
            if getattr(self, flag)
        ]

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if isinstance(other, Node):
            return self.id == other.id
        return False


class Link(BaseModel):
    """
    A directed dependency request from `source` to `target`.

    Constraint links express a version constraint rather than a hard
    requirement and never count towards shortest-path distances.
    """
    source: str
    target: str
    constraint: bool = False
    depth: int = Field(default=0, ge=0)
    requested: str = ""

    # Derived
    visible: bool = True
    focus: bool = False
    index: int = -1

    model_config = ConfigDict(extra="ignore")

    @field_validator("requested", mode="before")
    @classmethod
    def _none_requested(cls, value: Any) -> Any:
        return "" if value is None else value


class FilterOptions(BaseModel):
    """Viewer toggles that drive a visibility recomputation."""
    projects_only: bool = config.DEFAULT_PROJECTS_ONLY
    show_constraints: bool = config.DEFAULT_SHOW_CONSTRAINTS
    shortest_path_only: bool = config.DEFAULT_SHORTEST_PATH_ONLY

    model_config = ConfigDict(frozen=True, extra="forbid")


@dataclass
class Predecessors:
    """
    Node and link indices making up (part of) a node's dependency ancestry.

    Attributes:
        node_indices: Indices into `graph.nodes`.
        link_indices: Indices into `graph.links`.
    """

    node_indices: Set[int] = field(default_factory=set)
    link_indices: Set[int] = field(default_factory=set)


@dataclass
class NodeDetails:
    """Everything the details panel shows for a selected node."""

    name: str
    markers: List[str]
    requested: List[str]
    variant: str
    attributes: Dict[str, str]
    category: str
    selection_reasons: List[SelectionReason]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "markers": list(self.markers),
            "requested": list(self.requested),
            "variant": self.variant,
            "attributes": dict(self.attributes),
            "category": self.category,
            "selection_reasons": [r.model_dump() for r in self.selection_reasons],
        }
