"""
Change Assessment Graph.

Builds the LangGraph StateGraph for the change enablement workflow:

    classify_change ─┬─ Normal + scores ─→ assess_change_risk ─┐
                     └────────────────────────────────────────┴→ resolve_approval_path
"""

from langgraph.graph import StateGraph, START, END

from app.services.change_enablement.state import AssessmentState
from app.services.change_enablement.nodes import (
    NODE_ASSESS_RISK,
    NODE_CLASSIFY,
    NODE_RESOLVE_PATH,
    assess_change_risk,
    classify_change,
    resolve_change_approval_path,
    route_after_classification,
)


# 1. Initialize Graph
workflow = StateGraph(AssessmentState)

# 2. Add Nodes
workflow.add_node(NODE_CLASSIFY, classify_change)
workflow.add_node(NODE_ASSESS_RISK, assess_change_risk)
workflow.add_node(NODE_RESOLVE_PATH, resolve_change_approval_path)

# 3. Add Edges
workflow.add_edge(START, NODE_CLASSIFY)
workflow.add_conditional_edges(
    NODE_CLASSIFY,
    route_after_classification,
    {NODE_ASSESS_RISK: NODE_ASSESS_RISK, NODE_RESOLVE_PATH: NODE_RESOLVE_PATH},
)
workflow.add_edge(NODE_ASSESS_RISK, NODE_RESOLVE_PATH)
workflow.add_edge(NODE_RESOLVE_PATH, END)

# 4. Compile
change_assessment_graph = workflow.compile()
