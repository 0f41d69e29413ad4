"""
Policy loading utilities.
"""

from typing import Dict, Any, List, Optional

from functools import lru_cache
import os
import yaml
from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import PolicyError
from app.core.logging import get_logger
from app.services.change_enablement.policy.types import (
    CategoryRule,
    RiskDimension,
    RiskTierRule,
    WorkflowDefinition,
)

logger = get_logger(__name__)

DEFAULT_POLICY_PATH = os.path.join(os.path.dirname(__file__), "policy.yaml")


@lru_cache(maxsize=4)
def load_policy(policy_path: str) -> Dict[str, Any]:
    """
    Load policy from YAML file.

    Args:
        policy_path: Path to the policy YAML file.

    Returns:
        Dictionary containing the policy.

    Raises:
        PolicyError: If the file cannot be read or parsed.
    """
    try:
        with open(policy_path, "r", encoding="utf-8") as f:
            policy = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load or parse policy %s: %s", policy_path, e)
        raise PolicyError(f"Cannot load policy from {policy_path}: {e}") from e

    if not isinstance(policy, dict):
        raise PolicyError(f"Policy file {policy_path} is not a mapping")
    return policy


def get_default_policy() -> Dict[str, Any]:
    """Load the policy configured in settings, or the bundled one."""
    return load_policy(settings.POLICY_PATH or DEFAULT_POLICY_PATH)


def _section(policy: Optional[Dict[str, Any]], name: str) -> Any:
    if policy is None:
        policy = get_default_policy()
    if name not in policy:
        raise PolicyError(f"Policy is missing the '{name}' section")
    return policy[name]


def get_category_rules(policy: Optional[Dict[str, Any]] = None) -> Dict[str, CategoryRule]:
    """
    Extract category display rules, keyed by category name.

    Args:
        policy: The policy dictionary. Defaults to the configured policy.
    """
    try:
        return {
            name: CategoryRule(category=name, **data)
            for name, data in _section(policy, "categories").items()
        }
    except (TypeError, ValidationError) as e:
        logger.error("Invalid category rules in policy: %s", e)
        raise PolicyError(f"Invalid category rules: {e}") from e


def get_risk_dimensions(policy: Optional[Dict[str, Any]] = None) -> List[RiskDimension]:
    """Extract the risk dimensions in display order."""
    try:
        return [RiskDimension(**data) for data in _section(policy, "risk_dimensions")]
    except (TypeError, ValidationError) as e:
        logger.error("Invalid risk dimensions in policy: %s", e)
        raise PolicyError(f"Invalid risk dimensions: {e}") from e


def get_risk_tiers(policy: Optional[Dict[str, Any]] = None) -> List[RiskTierRule]:
    """
    Extract risk tier thresholds.

    Order in the YAML is evaluation order: the first tier whose inclusive
    max_score is not exceeded wins.
    """
    try:
        tiers = [
            RiskTierRule(tier=name, **data)
            for name, data in _section(policy, "risk_tiers").items()
        ]
    except (TypeError, ValidationError) as e:
        logger.error("Invalid risk tiers in policy: %s", e)
        raise PolicyError(f"Invalid risk tiers: {e}") from e

    if not tiers or tiers[-1].max_score is not None:
        raise PolicyError("The last risk tier must be unbounded (max_score: null)")
    return tiers


def get_workflows(
    policy: Optional[Dict[str, Any]] = None,
) -> Dict[str, WorkflowDefinition]:
    """Extract approval workflows keyed by workflow id."""
    try:
        return {
            workflow_id: WorkflowDefinition(id=workflow_id, **data)
            for workflow_id, data in _section(policy, "workflows").items()
        }
    except (TypeError, ValidationError) as e:
        logger.error("Invalid workflows in policy: %s", e)
        raise PolicyError(f"Invalid workflows: {e}") from e


def get_mitigation_checklist(policy: Optional[Dict[str, Any]] = None) -> List[str]:
    """Extract the mitigation checklist items."""
    return list(_section(policy, "mitigation_checklist"))
