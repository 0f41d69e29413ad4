"""Shared utilities for change assessment nodes."""

from typing import Any, Dict, Optional

from langchain_core.runnables import RunnableConfig


def get_policy(config: Optional[RunnableConfig]) -> Optional[Dict[str, Any]]:
    """
    Get the policy override from config, or None for the configured default.

    Allows swapping the policy for testing.
    """
    if config and "configurable" in config and "policy" in config["configurable"]:
        return config["configurable"]["policy"]
    return None
