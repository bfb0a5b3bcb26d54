"""
hullfilter CLI - Command-line interface for the overlap filter.

Usage:
    hullfilter filter convex_hulls.json -o result_convex_hulls.json
    hullfilter --threshold 0.3 filter
    hullfilter ratios convex_hulls.json
"""

__version__ = "1.0.0"
