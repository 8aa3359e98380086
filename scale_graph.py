"""Render a balanced scale network as a Graphviz diagram."""

from graphviz import Digraph

from scales import Pan, ScaleCollection


def _side_label(side_name: str, pan: Pan) -> str:
    if pan.balance_mass:
        return f"{side_name} +{pan.balance_mass}"
    return side_name


def _add_scale_nodes(dot: Digraph, scales: ScaleCollection) -> dict[str, str]:
    """Add one box per scale and return {scale name: node id}."""
    node_ids = {}
    for idx, scale in enumerate(scales):
        node_id = f"S{idx}"
        node_ids[scale.name] = node_id
        dot.node(
            node_id,
            f"{scale.name}\nmass {scale.mass}",
            shape="box",
            style="filled",
            fillcolor="lightblue",
        )
    return node_ids


def design_scale_graph(scales: ScaleCollection) -> Digraph:
    """Draw every scale with edges to what hangs on its sides.

    Fixed weights become their own ellipse nodes; references point at the
    referenced scale's box. Edges are labelled with the side and, when one was
    needed, the counterweight added to it.

    Args:
        scales: balanced collection

    Returns:
        Digraph of the scale network
    """
    dot = Digraph()
    dot.attr(rankdir="TB")

    node_ids = _add_scale_nodes(dot, scales)

    for scale in scales:
        scale_id = node_ids[scale.name]
        for side_name, side in (("left", scale.left), ("right", scale.right)):
            pan = scales.resolve(side)
            if isinstance(side, Pan):
                target_id = f"{scale_id}{side_name[0].upper()}"
                dot.node(target_id, str(side.mass), shape="ellipse", style="filled", fillcolor="lightyellow")
            else:
                target_id = node_ids[side.name]
            dot.edge(scale_id, target_id, label=_side_label(side_name, pan))

    return dot
