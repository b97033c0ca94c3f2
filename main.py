"""
Small walkthrough of digital objects on a 2D grid.
"""

import logging

from constants import DEBUG, DEMO_DOMAIN_SIZE, LOG_FORMAT, LOG_LEVEL
from kernel import DigitalSet, HyperRectDomain
from localtypes import Connectedness
from topology import DigitalObject, Z2i

logger = logging.getLogger(__name__)


def build_demo_object(size: int = DEMO_DOMAIN_SIZE) -> DigitalObject:
    """An L-shaped corner plus an isolated point, with the (4, 8) topology."""
    domain = HyperRectDomain((0, 0), (size - 1, size - 1))
    points = DigitalSet(domain, [(0, 0), (1, 0), (0, 1), (5, 5)])
    return DigitalObject(Z2i.dt4_8, points)


def run_demo(obj: DigitalObject) -> dict[str, object]:
    """Logs and returns a summary of the topological properties of obj."""
    logger.info(f"Object: {obj}")

    connectedness = obj.compute_connectedness()
    logger.info(f"Connectedness: {connectedness.name}")

    components: list[DigitalObject] = []
    count = obj.write_components(components.append)
    logger.info(f"{count} components")
    if DEBUG:
        for component in components:
            logger.debug(f"  {sorted(component.point_set)}")

    border = obj.border()
    logger.info(f"Border: {sorted(border.point_set)}")

    simple_points = [p for p in obj.point_set if obj.is_simple(p)]
    logger.info(f"Simple points: {simple_points}")

    return {
        "connected": connectedness == Connectedness.CONNECTED,
        "components": [sorted(c.point_set) for c in components],
        "border": sorted(border.point_set),
        "simple_points": simple_points,
    }


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else LOG_LEVEL,
        format=LOG_FORMAT,
    )
    run_demo(build_demo_object())
