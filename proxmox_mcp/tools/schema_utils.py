"""Utility functions for building common schema patterns.

This module provides reusable schema components and side-effect hint presets
so every tool module declares its inputs the same way.
"""

from typing import Any, Dict, List, Optional

from mcp.types import ToolAnnotations

# =============================================================================
# SIDE-EFFECT HINTS
# =============================================================================

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False)
WRITE = ToolAnnotations(readOnlyHint=False, destructiveHint=False)
IDEMPOTENT_WRITE = ToolAnnotations(
    readOnlyHint=False, destructiveHint=False, idempotentHint=True
)
DESTRUCTIVE = ToolAnnotations(readOnlyHint=False, destructiveHint=True)


# =============================================================================
# PROPERTY BUILDERS
# =============================================================================


def get_string_property(description: str, **kwargs) -> Dict[str, Any]:
    """Get basic string property schema with description."""
    schema = {"type": "string", "description": description}
    schema.update(kwargs)
    return schema


def get_number_property(description: str, **kwargs) -> Dict[str, Any]:
    """Get number property schema with description."""
    schema: Dict[str, Any] = {"type": "number", "description": description}
    schema.update(kwargs)
    return schema


def get_boolean_property(description: str, **kwargs) -> Dict[str, Any]:
    """Get boolean property schema with description."""
    schema: Dict[str, Any] = {"type": "boolean", "description": description}
    schema.update(kwargs)
    return schema


def get_union_property(
    types: List[str], description: str, **kwargs
) -> Dict[str, Any]:
    """Get a property that accepts several JSON types."""
    schema: Dict[str, Any] = {"type": list(types), "description": description}
    schema.update(kwargs)
    return schema


def get_node_property(description: str = "The node name") -> Dict[str, Any]:
    return get_string_property(description)


def get_vmid_property(description: str = "The VM ID") -> Dict[str, Any]:
    return get_number_property(description)


def object_schema(
    properties: Optional[Dict[str, Dict[str, Any]]] = None,
    required: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Build a tool input schema from property definitions."""
    schema: Dict[str, Any] = {"type": "object", "properties": dict(properties or {})}
    if required:
        schema["required"] = list(required)
    return schema


# =============================================================================
# PARAMETER HELPERS
# =============================================================================


def pick(params: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    """Select the supplied parameters among ``keys``."""
    return {key: params[key] for key in keys if key in params}
