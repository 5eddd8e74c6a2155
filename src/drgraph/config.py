"""
Global Configuration and Defaults.

Centralizes the constants shared by the loader, the classifier and the CLI:
the variant attribute used for categorization, where resolution reports are
written by the build, and the filter options a freshly opened graph starts with.
"""

from typing import Set

# --- Classification ---

# Variant attribute published by Gradle describing the component category
CATEGORY_ATTRIBUTE = "org.gradle.component.category"

LIBRARY_CATEGORIES: Set[str] = {"library"}

PLATFORM_CATEGORIES: Set[str] = {
    "platform",
    "enforced-platform",
}

# --- Report Locations ---

# Directory the build writes one JSON report per project/configuration into
DEFAULT_GRAPHS_DIR = "graphs"

# e.g. graphs/core_runtimeClasspath.json
GRAPH_FILE_PATTERN = "{project}_{configuration}.json"

# Fields every report must carry
REQUIRED_DOCUMENT_FIELDS = ("root", "nodes", "links")

# --- Filter Defaults ---

DEFAULT_PROJECTS_ONLY = False
DEFAULT_SHOW_CONSTRAINTS = True
DEFAULT_SHORTEST_PATH_ONLY = False
