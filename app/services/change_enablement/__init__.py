"""
Change Enablement decision core.

Pure functions: no UI runtime, no persistence.
"""

from app.services.change_enablement.approval import resolve_approval_path
from app.services.change_enablement.classifier import classify, describe_category
from app.services.change_enablement.policy import (
    get_category_rules,
    get_mitigation_checklist,
    get_risk_dimensions,
    get_risk_tiers,
    get_workflows,
)
from app.services.change_enablement.risk import (
    assess_risk,
    format_composite_score,
    tier_badge_class,
    tier_for_score,
)

__all__ = [
    "assess_risk",
    "classify",
    "describe_category",
    "format_composite_score",
    "get_category_rules",
    "get_mitigation_checklist",
    "get_risk_dimensions",
    "get_risk_tiers",
    "get_workflows",
    "resolve_approval_path",
    "tier_badge_class",
    "tier_for_score",
]
