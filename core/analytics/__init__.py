"""
Analytics package exports.
"""

from core.analytics.constants import MODULE_TITLES
from core.analytics.metrics import compute_module_insights, get_recommendation
from core.analytics.service import build_insights, build_module_dashboard
from core.analytics.types import ModuleDashboardData, ModuleInsight

__all__ = [
    "MODULE_TITLES",
    "compute_module_insights",
    "get_recommendation",
    "build_insights",
    "build_module_dashboard",
    "ModuleDashboardData",
    "ModuleInsight",
]
