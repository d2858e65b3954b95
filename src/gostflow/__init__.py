"""Public API for gostflow."""
from .gostflow import (
    DEFAULT_SIZES,
    Flow,
    FlowEdge,
    FlowNode,
    GostflowSemanticError,
    NodeKind,
    build_svg,
    flow_from_dict,
    render_flowchart,
    wrap_text,
)

__all__ = [
    "DEFAULT_SIZES",
    "Flow",
    "FlowEdge",
    "FlowNode",
    "GostflowSemanticError",
    "NodeKind",
    "build_svg",
    "flow_from_dict",
    "render_flowchart",
    "wrap_text",
]
