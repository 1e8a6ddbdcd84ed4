"""
Shared constants for missing data pattern detection and plotting.
"""

from enum import Enum


class Where(Enum):
    """Status of a cell in a missing data pattern."""
    MISSING = "missing"
    OBSERVED = "observed"


# Column names used for the long-form pattern table and the md_pattern margins,
# a dataset may not use them
RESERVED_NAMES = (".x", ".y", ".where", ".opacity", "")

# Label of the summary row and of the missing count column in md_pattern output
SUMMARY_LABEL = ""

# Value of "vrb" selecting every column
ALL_VARIABLES = "all"

# Tile fill colours, RGBA hex like ggplot2
FILL_COLORS = {
    Where.OBSERVED.value: "#006CC2B3",
    Where.MISSING.value: "#B61A51B3",
}
TILE_EDGE_COLOR = "black"

# Range of the continuous alpha scale
ALPHA_RANGE = (0.1, 1.0)

# Axis titles
XLAB_BOTTOM = "Number of missing entries\nper column"
XLAB_TOP = "Column name"
YLAB_LEFT = "Pattern frequency"
YLAB_RIGHT = "Number of missing entries\nper pattern"

# Log file settings
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5
CONSOLE_LOG_FORMAT = '%(levelname)s - %(message)s'
FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
