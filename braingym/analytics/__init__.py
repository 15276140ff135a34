"""
Analytics package exports.
"""

from braingym.analytics.service import build_dashboard
from braingym.analytics.types import DashboardData

__all__ = [
    "build_dashboard",
    "DashboardData",
]
