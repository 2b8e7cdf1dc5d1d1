"""
Debug module - terminal rendering for inspecting decisions.
"""

from coverage_explorer.debug.viz import render_candidates

__all__ = ["render_candidates"]
