"""Balance nested scales by adding counterweights to each lighter side."""

import logging

from tarjan import tarjan

from scales import MissingScaleError, Scale, ScaleCollection

_LOGGER = logging.getLogger("scalebalancer")


class ScaleCycleError(ValueError):
    """Scales reference each other in a loop, so none of them can be resolved first."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Scales reference each other in a cycle: {', '.join(cycle)}")


def _reference_graph(scales: ScaleCollection) -> dict[str, list[str]]:
    """Map each scale name to the names its sides reference.

    Scales are keyed in reverse first-mention order, which makes that order
    the tie-break of the traversal in balance_order.

    Raises:
        MissingScaleError: if a side references a scale not in the collection
    """
    graph = {}
    for scale in reversed(scales):
        references = scales.references(scale)
        for name in references:
            if name not in scales:
                raise MissingScaleError(
                    f"Scale '{scale.name}' references '{name}', which does not exist"
                )
        graph[scale.name] = references
    return graph


def balance_order(scales: ScaleCollection) -> list[Scale]:
    """Order scales so that every scale comes after the scales it references.

    Precondition:
        every ScaleRef in scales names a scale in scales

    Postcondition:
        returns every scale exactly once
        each scale appears after all scales its sides reference
        if reverse first-mention order already satisfies that, it is returned unchanged

    Args:
        scales: parsed collection

    Returns:
        list of scales in processing order

    Raises:
        ScaleCycleError: if scales reference each other in a loop
        MissingScaleError: if a side references a scale not in the collection
    """
    graph = _reference_graph(scales)
    # tarjan emits components depth-first, referenced scales before referrers
    components = tarjan(graph)

    for component in components:
        if len(component) > 1 or component[0] in graph[component[0]]:
            raise ScaleCycleError(sorted(component))

    return [scales[component[0]] for component in components]


def _balance_scale(scales: ScaleCollection, scale: Scale) -> None:
    """Top up the lighter side of scale and add everything it carries to its mass."""
    left = scales.resolve(scale.left)
    right = scales.resolve(scale.right)

    if left.mass > right.mass:
        right.balance_mass = left.mass - right.mass
    elif right.mass > left.mass:
        left.balance_mass = right.mass - left.mass

    scale.pan.mass += left.mass + right.mass + left.balance_mass + right.balance_mass

    _LOGGER.debug(
        "Balanced %s: left %s+%s, right %s+%s, total %s",
        scale.name, left.mass, left.balance_mass, right.mass, right.balance_mass, scale.pan.mass,
    )


def balance_each_scale(scales: ScaleCollection) -> None:
    """Balance every scale in place, referenced scales first.

    Precondition:
        scales has not been balanced before

    Postcondition:
        for every scale, the lighter resolved side has balance_mass equal to the
        difference between the two sides and the heavier side is untouched
        every scale's pan.mass is its self-mass plus both sides' masses and
        balance masses, so parents see the full weight of nested scales

    Raises:
        ScaleCycleError: if scales reference each other in a loop
    """
    order = balance_order(scales)
    for scale in order:
        _balance_scale(scales, scale)

    _LOGGER.info("Balanced %s scales", len(order))
