"""
Nodes package for the change assessment graph.
"""

from app.services.change_enablement.nodes.decision import (
    NODE_ASSESS_RISK,
    NODE_CLASSIFY,
    NODE_RESOLVE_PATH,
    assess_change_risk,
    classify_change,
    resolve_change_approval_path,
    route_after_classification,
)

__all__ = [
    "NODE_ASSESS_RISK",
    "NODE_CLASSIFY",
    "NODE_RESOLVE_PATH",
    "assess_change_risk",
    "classify_change",
    "resolve_change_approval_path",
    "route_after_classification",
]
