"""
Plotting module for missing data patterns.

This module combines the missing data pattern plot and the helpers that
reshape pattern tables for plotting.
"""

from .pattern import plot_pattern
from .theme import theme_minimice
from .utils import (
    filter_top_patterns,
    cluster_opacity,
    pattern_to_long
)

__all__ = [
    # Plots
    'plot_pattern',
    'theme_minimice',
    # Utilities
    'filter_top_patterns',
    'cluster_opacity',
    'pattern_to_long'
]
