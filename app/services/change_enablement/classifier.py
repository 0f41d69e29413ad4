"""
Change classification (ITIL 4 decision tree).

    Is service currently down or critically degraded?
    ├─ YES → EMERGENCY
    └─ NO  → Is this a pre-approved change model?
              ├─ YES → STANDARD
              └─ NO  → NORMAL (assess risk tier)
"""

from typing import Any, Dict, Optional, Union

from app.core.logging import get_logger
from app.schemas.change import ChangeCategory, ClassificationDetails
from app.services.change_enablement.policy.loader import get_category_rules

logger = get_logger(__name__)


def classify(service_down: bool, pre_approved: bool) -> ChangeCategory:
    """Classify a change. First matching branch wins."""
    if service_down:
        return ChangeCategory.EMERGENCY
    if pre_approved:
        return ChangeCategory.STANDARD
    return ChangeCategory.NORMAL


def describe_category(
    category: Union[ChangeCategory, str, None],
    policy: Optional[Dict[str, Any]] = None,
) -> ClassificationDetails:
    """
    Look up the badge class and explanatory text for a category.

    Unrecognized values yield empty details rather than an error.
    """
    key = category.value if isinstance(category, ChangeCategory) else category
    rule = get_category_rules(policy).get(key) if key else None
    if rule is None:
        logger.debug("No classification details for %r", category)
        return ClassificationDetails()
    return ClassificationDetails(
        display_class=rule.display_class, description=rule.description
    )
