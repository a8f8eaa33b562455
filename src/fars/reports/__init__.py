"""
FARS Reports Package

Orchestration over the data, analysis and plotting layers.

Modules:
- generators: month-by-year summaries and state maps (optionally saved)
"""

from .generators import (
    StateMapGenerator,
    fars_map_state,
    fars_summarize_years,
    save_summary,
)

__all__ = [
    'StateMapGenerator',
    'fars_map_state',
    'fars_summarize_years',
    'save_summary',
]
