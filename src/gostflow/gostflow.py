"""Render GOST 19.701-90 flowcharts as SVG."""
from __future__ import annotations

from dataclasses import dataclass
import enum
import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

try:
    from PIL import ImageFont
except ImportError:  # pragma: no cover - Pillow required via pyproject
    ImageFont = None

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)

DEFAULT_TITLE = "GOST 19.701-90 flowchart"
DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800

INK = "#111827"
NOTE_FILL = "#fffbeb"
NOTE_STROKE = "#f59e0b"
NOTE_INK = "#92400e"
STROKE_WIDTH = 2

FONT_SIZE = 14.0
LINE_HEIGHT = 18.0
NOTE_FONT_SIZE = 13.0
NOTE_LINE_HEIGHT = 16.0
EDGE_LABEL_SIZE = 13.0
EDGE_LABEL_RAISE = 6.0

CHAR_WIDTH_ESTIMATE = 7
MIN_LINE_CHARS = 8

TERMINAL_ROUNDING = 0.35
IO_SKEW = 16.0
PREDEFINED_BAR_INSET = 18.0

# Centres closer than this horizontally are treated as stacked.
VERTICAL_TOLERANCE = 4.0
ARROW_LENGTH = 10.0
ARROW_HALF_WIDTH = 6.0

Point = Tuple[float, float]


class NodeKind(str, enum.Enum):
    TERMINAL = "terminal"
    PROCESS = "process"
    IO = "io"
    DECISION = "decision"
    PREDEFINED = "predefined"
    CONNECTOR = "connector"
    NOTE = "note"


DEFAULT_SIZES: Dict[NodeKind, Tuple[float, float]] = {
    NodeKind.TERMINAL: (180.0, 56.0),
    NodeKind.PROCESS: (220.0, 70.0),
    NodeKind.IO: (220.0, 70.0),
    NodeKind.DECISION: (170.0, 170.0),
    NodeKind.PREDEFINED: (240.0, 70.0),
    NodeKind.CONNECTOR: (40.0, 40.0),
    NodeKind.NOTE: (220.0, 70.0),
}


class GostflowSemanticError(ValueError):
    """Structured error with a stable code, raised while coercing plain mappings."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class FlowNode:
    id: str
    kind: NodeKind
    x: float
    y: float
    text: str = ""
    w: Optional[float] = None
    h: Optional[float] = None


@dataclass
class FlowEdge:
    id: str
    source: str
    target: str
    label: Optional[str] = None
    # None lets the router add a dog-leg; an empty list forces a straight line.
    via: Optional[List[Point]] = None


@dataclass
class Flow:
    nodes: List[FlowNode]
    edges: List[FlowEdge]


@dataclass(frozen=True)
class ResolvedNode:
    """A node with concrete width and height."""

    id: str
    kind: NodeKind
    x: float
    y: float
    w: float
    h: float
    text: str

    @property
    def bbox(self) -> Tuple[float, float, float, float]:
        return (
            self.x - self.w / 2.0,
            self.y - self.h / 2.0,
            self.x + self.w / 2.0,
            self.y + self.h / 2.0,
        )


class _TextMeasurer:
    """Caches Pillow fonts by size and falls back to a heuristic width."""

    FONT_CANDIDATES = [
        "DejaVuSans.ttf",
        "Arial.ttf",
        "LiberationSans-Regular.ttf",
        "Helvetica.ttc",
    ]

    def __init__(self) -> None:
        self._font_cache: Dict[int, Optional["ImageFont.FreeTypeFont"]] = {}

    def font(self, size: float) -> Optional["ImageFont.FreeTypeFont"]:
        if ImageFont is None:
            return None
        key_size = max(1, int(round(size)))
        if key_size in self._font_cache:
            return self._font_cache[key_size]
        font = None
        for candidate in self.FONT_CANDIDATES:
            try:
                font = ImageFont.truetype(candidate, key_size)
                break
            except OSError:
                continue
        self._font_cache[key_size] = font
        return font

    def measure(self, text: str, size: float) -> float:
        font = self.font(size)
        if font is None:
            return _heuristic_width(text, size)
        return float(font.getlength(text))


_TEXT_MEASURER = _TextMeasurer()


def _q(tag: str) -> str:
    return f"{{{SVG_NS}}}{tag}"


# --- model -----------------------------------------------------------------


def node_size(node: FlowNode) -> Tuple[float, float]:
    default_w, default_h = DEFAULT_SIZES[NodeKind(node.kind)]
    w = node.w if node.w is not None else default_w
    h = node.h if node.h is not None else default_h
    return float(w), float(h)


def resolve_node(node: FlowNode) -> ResolvedNode:
    w, h = node_size(node)
    return ResolvedNode(
        id=node.id,
        kind=NodeKind(node.kind),
        x=float(node.x),
        y=float(node.y),
        w=w,
        h=h,
        text=node.text or "",
    )


def resolve_nodes(nodes: Iterable[FlowNode]) -> Dict[str, ResolvedNode]:
    """Index nodes by id with sizes filled in.

    A repeated id replaces the earlier node but keeps its slot in the order.
    """
    resolved: Dict[str, ResolvedNode] = {}
    for node in nodes:
        resolved[node.id] = resolve_node(node)
    return resolved


def flow_from_dict(data: Mapping[str, Any]) -> Flow:
    """Build a Flow from plain mappings keyed like ``{"nodes": [...], "edges": [...]}``."""
    nodes = [_node_from_mapping(item, idx) for idx, item in enumerate(data.get("nodes") or [])]
    edges = [_edge_from_mapping(item, idx) for idx, item in enumerate(data.get("edges") or [])]
    return Flow(nodes=nodes, edges=edges)


def _node_from_mapping(item: Mapping[str, Any], index: int) -> FlowNode:
    where = f"nodes[{index}]"
    node_id = str(_required(item, where, "id"))
    raw_kind = item.get("type", item.get("kind"))
    if raw_kind is None:
        raise GostflowSemanticError("E_FIELD_MISSING", f'{where} (id="{node_id}") is missing "type"')
    try:
        kind = NodeKind(raw_kind)
    except ValueError:
        allowed = ", ".join(k.value for k in NodeKind)
        raise GostflowSemanticError(
            "E_NODE_KIND",
            f'{where} (id="{node_id}") has unknown type "{raw_kind}"; expected one of: {allowed}',
        ) from None
    return FlowNode(
        id=node_id,
        kind=kind,
        x=_number(_required(item, where, "x"), where, "x"),
        y=_number(_required(item, where, "y"), where, "y"),
        text=str(item.get("text") or ""),
        w=_optional_number(item.get("w"), where, "w"),
        h=_optional_number(item.get("h"), where, "h"),
    )


def _edge_from_mapping(item: Mapping[str, Any], index: int) -> FlowEdge:
    where = f"edges[{index}]"
    edge_id = str(_required(item, where, "id"))
    source = item.get("from", item.get("source"))
    target = item.get("to", item.get("target"))
    if source is None:
        raise GostflowSemanticError("E_FIELD_MISSING", f'{where} (id="{edge_id}") is missing "from"')
    if target is None:
        raise GostflowSemanticError("E_FIELD_MISSING", f'{where} (id="{edge_id}") is missing "to"')
    label = item.get("label")
    raw_via = item.get("via")
    via: Optional[List[Point]] = None
    if raw_via is not None:
        via = [_point(p, f"{where}.via[{i}]") for i, p in enumerate(raw_via)]
    return FlowEdge(
        id=edge_id,
        source=str(source),
        target=str(target),
        label=str(label) if label is not None else None,
        via=via,
    )


def _required(item: Mapping[str, Any], where: str, key: str) -> Any:
    if key not in item or item[key] is None:
        raise GostflowSemanticError("E_FIELD_MISSING", f'{where} is missing "{key}"')
    return item[key]


def _number(value: Any, where: str, key: str) -> float:
    if isinstance(value, bool):
        raise GostflowSemanticError("E_FIELD_TYPE", f'{where}.{key} must be a number, got {value!r}')
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise GostflowSemanticError(
            "E_FIELD_TYPE", f"{where}.{key} must be a number, got {value!r}"
        ) from None
    if not math.isfinite(result):
        raise GostflowSemanticError("E_FIELD_TYPE", f"{where}.{key} must be finite, got {value!r}")
    return result


def _optional_number(value: Any, where: str, key: str) -> Optional[float]:
    if value is None:
        return None
    return _number(value, where, key)


def _point(value: Any, where: str) -> Point:
    if isinstance(value, Mapping):
        return (
            _number(_required(value, where, "x"), where, "x"),
            _number(_required(value, where, "y"), where, "y"),
        )
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (_number(value[0], where, "x"), _number(value[1], where, "y"))
    raise GostflowSemanticError("E_FIELD_TYPE", f"{where} must be an {{x, y}} mapping or an (x, y) pair")


# --- text ------------------------------------------------------------------


def line_char_budget(max_width: float) -> int:
    return max(MIN_LINE_CHARS, int(math.floor(max_width / CHAR_WIDTH_ESTIMATE)))


def wrap_text(text: str, max_width: float) -> List[str]:
    """Greedily pack words into lines no longer than the character budget.

    Words longer than the budget are split into budget-sized pieces.
    """
    budget = line_char_budget(max_width)
    lines: List[str] = []
    current = ""
    for word in re.split(r"\s+", text.strip()):
        if not word:
            continue
        while len(word) > budget:
            if current:
                lines.append(current)
                current = ""
            lines.append(word[:budget])
            word = word[budget:]
        candidate = f"{current} {word}" if current else word
        if len(candidate) > budget:
            if current:
                lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def text_block(
    lines: Sequence[str],
    *,
    font_size: float = FONT_SIZE,
    line_height: float = LINE_HEIGHT,
    fill: str = INK,
) -> ET.Element:
    text = ET.Element(
        _q("text"),
        {
            "text-anchor": "middle",
            "dominant-baseline": "middle",
            "font-size": _fmt(font_size),
            "fill": fill,
        },
    )
    lift = (len(lines) - 1) * line_height / 2.0
    for idx, line in enumerate(lines):
        dy = -lift if idx == 0 else line_height
        tspan = ET.SubElement(text, _q("tspan"), {"x": "0", "dy": _fmt(dy)})
        tspan.text = line
    return text


def measure_text(text: str, font_size: float) -> float:
    return _TEXT_MEASURER.measure(text, font_size)


def _heuristic_width(text: str, font_size: float) -> float:
    width = 0.0
    for ch in text:
        if ch.isspace():
            width += font_size * 0.33
        elif ch in "il":
            width += font_size * 0.3
        elif ch in "mwMW@#":
            width += font_size * 0.9
        else:
            width += font_size * 0.6
    return width


# --- geometry --------------------------------------------------------------


def anchor(node: ResolvedNode, side: str) -> Point:
    if side == "top":
        return (node.x, node.y - node.h / 2.0)
    if side == "bottom":
        return (node.x, node.y + node.h / 2.0)
    if side == "left":
        return (node.x - node.w / 2.0, node.y)
    if side == "right":
        return (node.x + node.w / 2.0, node.y)
    raise ValueError(f"invalid anchor side: {side}")


def is_vertical(source: ResolvedNode, target: ResolvedNode) -> bool:
    return abs(source.x - target.x) < VERTICAL_TOLERANCE or source.y < target.y


def route_edge(
    source: ResolvedNode,
    target: ResolvedNode,
    via: Optional[Sequence[Point]] = None,
) -> List[Point]:
    """Return the polyline from the source anchor to the target anchor.

    Downward or stacked edges leave the bottom and enter the top. Other edges
    leave and enter through the facing sides and get a right-angle dog-leg at
    the horizontal midpoint unless ``via`` is given.
    """
    if is_vertical(source, target):
        start = anchor(source, "bottom")
        end = anchor(target, "top")
    else:
        start = anchor(source, "right" if source.x < target.x else "left")
        end = anchor(target, "right" if target.x < source.x else "left")
        if via is None:
            mid_x = (start[0] + end[0]) / 2.0
            via = [(mid_x, start[1]), (mid_x, end[1])]
    points = [start]
    points.extend((float(px), float(py)) for px, py in (via or []))
    points.append(end)
    return points


def arrowhead(
    points: Sequence[Point],
    length: float = ARROW_LENGTH,
    half_width: float = ARROW_HALF_WIDTH,
) -> Tuple[Point, Point, Point]:
    tip = points[-1]
    prev = points[-2] if len(points) > 1 else points[0]
    angle = math.atan2(tip[1] - prev[1], tip[0] - prev[0])
    base_x = tip[0] - math.cos(angle) * length
    base_y = tip[1] - math.sin(angle) * length
    left = (
        base_x + math.cos(angle + math.pi / 2) * half_width,
        base_y + math.sin(angle + math.pi / 2) * half_width,
    )
    right = (
        base_x + math.cos(angle - math.pi / 2) * half_width,
        base_y + math.sin(angle - math.pi / 2) * half_width,
    )
    return tip, left, right


def label_position(points: Sequence[Point]) -> Point:
    mid = points[len(points) // 2]
    return (mid[0], mid[1] - EDGE_LABEL_RAISE)


def _points_to_path_d(points: Sequence[Point]) -> str:
    parts = []
    for idx, (px, py) in enumerate(points):
        parts.append(f"{'M' if idx == 0 else 'L'} {_fmt(px)} {_fmt(py)}")
    return " ".join(parts)


def _points_attr(points: Iterable[Point]) -> str:
    return " ".join(f"{_fmt(px)},{_fmt(py)}" for px, py in points)


# --- shapes ----------------------------------------------------------------


def _outline_attrs(**extra: str) -> Dict[str, str]:
    attrs = {"fill": "#fff", "stroke": INK, "stroke-width": _fmt(STROKE_WIDTH)}
    attrs.update(extra)
    return attrs


def _corner_group(node: ResolvedNode) -> ET.Element:
    return ET.Element(
        _q("g"),
        {
            "data-node-id": node.id,
            "data-kind": node.kind.value,
            "transform": f"translate({_fmt(node.x - node.w / 2.0)}, {_fmt(node.y - node.h / 2.0)})",
        },
    )


def _centre_group(node: ResolvedNode) -> ET.Element:
    return ET.Element(
        _q("g"),
        {
            "data-node-id": node.id,
            "data-kind": node.kind.value,
            "transform": f"translate({_fmt(node.x)}, {_fmt(node.y)})",
        },
    )


def _append_centred_label(
    group: ET.Element,
    node: ResolvedNode,
    max_width: float,
    **text_style: Any,
) -> None:
    holder = ET.SubElement(
        group,
        _q("g"),
        {"transform": f"translate({_fmt(node.w / 2.0)}, {_fmt(node.h / 2.0)})"},
    )
    holder.append(text_block(wrap_text(node.text, max_width), **text_style))


def draw_terminal(node: ResolvedNode) -> ET.Element:
    group = _corner_group(node)
    radius = _fmt(min(node.w, node.h) * TERMINAL_ROUNDING)
    ET.SubElement(
        group,
        _q("rect"),
        _outline_attrs(width=_fmt(node.w), height=_fmt(node.h), rx=radius, ry=radius),
    )
    _append_centred_label(group, node, node.w - 24)
    return group


def draw_process(node: ResolvedNode) -> ET.Element:
    group = _corner_group(node)
    ET.SubElement(group, _q("rect"), _outline_attrs(width=_fmt(node.w), height=_fmt(node.h)))
    _append_centred_label(group, node, node.w - 24)
    return group


def draw_io(node: ResolvedNode) -> ET.Element:
    group = _corner_group(node)
    w, h, skew = node.w, node.h, IO_SKEW
    points = [(skew, 0.0), (w, 0.0), (w - skew, h), (0.0, h)]
    ET.SubElement(group, _q("polygon"), _outline_attrs(points=_points_attr(points)))
    _append_centred_label(group, node, w - 32)
    return group


def draw_decision(node: ResolvedNode) -> ET.Element:
    group = _centre_group(node)
    half_w = node.w / 2.0
    half_h = node.h / 2.0
    points = [(0.0, -half_h), (half_w, 0.0), (0.0, half_h), (-half_w, 0.0)]
    ET.SubElement(group, _q("polygon"), _outline_attrs(points=_points_attr(points)))
    group.append(text_block(wrap_text(node.text, min(node.w, node.h) - 36)))
    return group


def draw_predefined(node: ResolvedNode) -> ET.Element:
    group = _corner_group(node)
    w, h, inset = node.w, node.h, PREDEFINED_BAR_INSET
    ET.SubElement(group, _q("rect"), _outline_attrs(width=_fmt(w), height=_fmt(h)))
    for bar_x in (inset, w - inset):
        ET.SubElement(
            group,
            _q("line"),
            {
                "x1": _fmt(bar_x),
                "y1": "0",
                "x2": _fmt(bar_x),
                "y2": _fmt(h),
                "stroke": INK,
                "stroke-width": _fmt(STROKE_WIDTH),
            },
        )
    _append_centred_label(group, node, w - 48)
    return group


def draw_connector(node: ResolvedNode) -> ET.Element:
    group = _centre_group(node)
    ET.SubElement(group, _q("circle"), _outline_attrs(r=_fmt(min(node.w, node.h) / 2.0)))
    # Connector marks are short references, never wrapped.
    if node.text:
        group.append(text_block([node.text]))
    return group


def draw_note(node: ResolvedNode) -> ET.Element:
    group = _corner_group(node)
    ET.SubElement(
        group,
        _q("rect"),
        {
            "width": _fmt(node.w),
            "height": _fmt(node.h),
            "fill": NOTE_FILL,
            "stroke": NOTE_STROKE,
            "stroke-dasharray": "6 4",
        },
    )
    _append_centred_label(
        group,
        node,
        node.w - 24,
        font_size=NOTE_FONT_SIZE,
        line_height=NOTE_LINE_HEIGHT,
        fill=NOTE_INK,
    )
    return group


SHAPE_RENDERERS = {
    NodeKind.TERMINAL: draw_terminal,
    NodeKind.PROCESS: draw_process,
    NodeKind.IO: draw_io,
    NodeKind.DECISION: draw_decision,
    NodeKind.PREDEFINED: draw_predefined,
    NodeKind.CONNECTOR: draw_connector,
    NodeKind.NOTE: draw_note,
}


def draw_node(node: ResolvedNode) -> ET.Element:
    return SHAPE_RENDERERS[node.kind](node)


# --- arrows ----------------------------------------------------------------


def draw_arrow(edge_id: str, points: Sequence[Point], label: Optional[str] = None) -> ET.Element:
    group = ET.Element(_q("g"), {"data-edge-id": edge_id})
    ET.SubElement(
        group,
        _q("path"),
        {
            "d": _points_to_path_d(points),
            "stroke": INK,
            "stroke-width": _fmt(STROKE_WIDTH),
            "fill": "none",
        },
    )
    ET.SubElement(group, _q("polygon"), {"points": _points_attr(arrowhead(points)), "fill": INK})
    if label:
        lx, ly = label_position(points)
        text = ET.SubElement(
            group,
            _q("text"),
            {
                "x": _fmt(lx),
                "y": _fmt(ly),
                "text-anchor": "middle",
                "font-size": _fmt(EDGE_LABEL_SIZE),
                "fill": INK,
                "font-weight": "600",
            },
        )
        text.text = label
    return group


# --- render ----------------------------------------------------------------


def build_svg(
    flow: Flow,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    *,
    fit: bool = False,
    padding: float = 20.0,
    title: str = DEFAULT_TITLE,
    shadow: bool = True,
) -> ET.Element:
    """Turn a flow description into an SVG element tree."""
    nodes = resolve_nodes(flow.nodes)

    svg_root = ET.Element(
        _q("svg"),
        {
            "viewBox": f"0 0 {_fmt(width)} {_fmt(height)}",
            "role": "img",
            "aria-label": title,
        },
    )
    canvas_attrs: Dict[str, str] = {}
    if shadow:
        _append_shadow_filter(svg_root)
        canvas_attrs["filter"] = "url(#softShadow)"
    canvas = ET.SubElement(svg_root, _q("g"), canvas_attrs)

    bbox: Optional[Tuple[float, float, float, float]] = None
    for edge in flow.edges:
        source = nodes.get(edge.source)
        target = nodes.get(edge.target)
        if source is None or target is None:
            missing = edge.source if source is None else edge.target
            logger.debug('skipping edge "%s": node "%s" not found', edge.id, missing)
            continue
        points = route_edge(source, target, edge.via)
        canvas.append(draw_arrow(edge.id, points, edge.label))
        if fit:
            bbox = _merge_bbox(bbox, _edge_bbox(points, edge.label))

    for node in nodes.values():
        canvas.append(draw_node(node))
        if fit:
            bbox = _merge_bbox(bbox, node.bbox)

    if fit:
        _apply_root_bounds(svg_root, bbox, padding)
    return svg_root


def render_flowchart(
    flow: Flow,
    width: float = DEFAULT_WIDTH,
    height: float = DEFAULT_HEIGHT,
    *,
    fit: bool = False,
    padding: float = 20.0,
    title: str = DEFAULT_TITLE,
    shadow: bool = True,
) -> str:
    """Render a flow description to SVG text."""
    svg_root = build_svg(
        flow,
        width,
        height,
        fit=fit,
        padding=padding,
        title=title,
        shadow=shadow,
    )
    return _pretty_xml(svg_root)


def _append_shadow_filter(svg_root: ET.Element) -> None:
    defs = ET.SubElement(svg_root, _q("defs"))
    flt = ET.SubElement(
        defs,
        _q("filter"),
        {"id": "softShadow", "x": "-20%", "y": "-20%", "width": "140%", "height": "140%"},
    )
    ET.SubElement(
        flt,
        _q("feDropShadow"),
        {"dx": "0", "dy": "1", "stdDeviation": "1", "flood-opacity": "0.12"},
    )


def _edge_bbox(points: Sequence[Point], label: Optional[str]) -> Tuple[float, float, float, float]:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    bbox = (min(xs), min(ys), max(xs), max(ys))
    # The arrowhead barbs stick out sideways from the final point.
    for px, py in arrowhead(points):
        bbox = _merge_bbox(bbox, (px, py, px, py))
    if label:
        lx, ly = label_position(points)
        half = measure_text(label, EDGE_LABEL_SIZE) / 2.0
        bbox = _merge_bbox(bbox, (lx - half, ly - EDGE_LABEL_SIZE, lx + half, ly))
    return bbox


def _merge_bbox(
    current: Optional[Tuple[float, float, float, float]],
    new: Optional[Tuple[float, float, float, float]],
) -> Optional[Tuple[float, float, float, float]]:
    if new is None:
        return current
    if current is None:
        return new
    return (
        min(current[0], new[0]),
        min(current[1], new[1]),
        max(current[2], new[2]),
        max(current[3], new[3]),
    )


def _apply_root_bounds(
    svg_root: ET.Element,
    bbox: Optional[Tuple[float, float, float, float]],
    padding: float,
) -> None:
    if bbox is None:
        return
    pad = max(padding, 0.0)
    min_x = bbox[0] - pad
    min_y = bbox[1] - pad
    width_needed = max(bbox[2] - bbox[0], 0.0) + 2 * pad
    height_needed = max(bbox[3] - bbox[1], 0.0) + 2 * pad
    if width_needed == 0.0 and height_needed == 0.0:
        return
    svg_root.set(
        "viewBox",
        f"{_fmt(min_x)} {_fmt(min_y)} {_fmt(width_needed)} {_fmt(height_needed)}",
    )
    svg_root.set("width", _fmt(width_needed))
    svg_root.set("height", _fmt(height_needed))


def _pretty_xml(element: ET.Element) -> str:
    ET.indent(element, space="  ")
    # Indentation inside <text> would render as spaces around each line.
    for text_node in element.iter(_q("text")):
        if len(text_node):
            text_node.text = None
            for tspan in text_node:
                tspan.tail = None
    return ET.tostring(element, encoding="unicode")


def _fmt(value: float) -> str:
    if math.isclose(value, round(value), abs_tol=1e-9):
        return str(int(round(value)))
    return f"{value:.3f}".rstrip("0").rstrip(".")


__all__ = [
    "DEFAULT_SIZES",
    "Flow",
    "FlowEdge",
    "FlowNode",
    "GostflowSemanticError",
    "NodeKind",
    "ResolvedNode",
    "anchor",
    "arrowhead",
    "build_svg",
    "flow_from_dict",
    "line_char_budget",
    "measure_text",
    "node_size",
    "render_flowchart",
    "resolve_nodes",
    "route_edge",
    "wrap_text",
]
