"""
Policy module for the Change Enablement Agent.
"""

from app.services.change_enablement.policy.loader import (
    DEFAULT_POLICY_PATH,
    load_policy,
    get_default_policy,
    get_category_rules,
    get_risk_dimensions,
    get_risk_tiers,
    get_workflows,
    get_mitigation_checklist,
)
from app.services.change_enablement.policy.types import (
    CategoryRule,
    RiskDimension,
    RiskTierRule,
    WorkflowDefinition,
)

__all__ = [
    "DEFAULT_POLICY_PATH",
    "load_policy",
    "get_default_policy",
    "get_category_rules",
    "get_risk_dimensions",
    "get_risk_tiers",
    "get_workflows",
    "get_mitigation_checklist",
    "CategoryRule",
    "RiskDimension",
    "RiskTierRule",
    "WorkflowDefinition",
]
