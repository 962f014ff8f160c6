from __future__ import annotations

from .model_stats import format_model_stats, format_statistics
from .reporter import Reporter

__all__ = [
    "Reporter",
    "format_model_stats",
    "format_statistics",
]
