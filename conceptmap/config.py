"""
Configuration constants for the concept map.

Input column names, rendering palette and logging setup live here so the
rest of the package never hard-codes them.
"""

import logging

# =============================================================================
# INPUT COLUMNS
# =============================================================================

REQUIRED_COLUMNS = {"concept", "dependencies"}

# column name -> ConceptRecord field
WEIGHT_COLUMNS = {
    "lecture weight": "lecture_weight",
    "lab weight": "lab_weight",
    "hw weight": "hw_weight",
}
COVERAGE_COLUMNS = {
    "lecture coverage": "lecture_coverage",
    "lab coverage": "lab_coverage",
    "hw coverage": "hw_coverage",
}
SCHEDULE_COLUMNS = {"week": "week", "earliest": "earliest", "latest": "latest"}

DEPENDENCY_SEPARATOR = ";"

# == ALIAS MAP FOR COLUMN NORMALIZATION ==
ALIAS_MAP = {
    # concept synonyms
    "name": "concept",
    "topic": "concept",
    "concept name": "concept",
    "unit": "concept",

    # dependencies synonyms
    "dependency": "dependencies",
    "prerequisite": "dependencies",
    "prerequisites": "dependencies",
    "prereqs": "dependencies",
    "depends on": "dependencies",
    "required before": "dependencies",

    # category synonyms
    "group": "category",
    "area": "category",
    "theme": "category",

    # weight synonyms
    "lecture": "lecture weight",
    "lab": "lab weight",
    "hw": "hw weight",
    "homework weight": "hw weight",
    "assignment weight": "hw weight",
}

# =============================================================================
# RENDERING
# =============================================================================

# one color per category; more categories than this is a configuration error
CATEGORY_PALETTE = (
    "cadetblue1",
    "chocolate1",
    "darkgoldenrod1",
    "darkorchid1",
    "deeppink",
    "dodgerblue2",
    "firebrick1",
    "gray38",
    "green3",
    "navy",
    "orchid",
    "teal",
    "violetred",
    "yellow1",
    "tomato1",
)

UNCATEGORIZED_LABEL = "uncategorized"
NODE_PENWIDTH = "2.5"
SUMMARY_FONTSIZE = "20"
SUMMARY_NODE = "summary"

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbosity: int = 0) -> None:
    """Set up root logging; 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
