import logging

from issue_map.config import DEFAULT_CENTER_LAT, DEFAULT_CENTER_LNG, MAP_RADIUS_KM
from issue_map.density import cluster_markers, group_by_cell
from issue_map.heatmap import HEAT_LAYER_OPTIONS, heat_points
from issue_map.issues import aggregate_issues
from issue_map.markers import issue_markers
from issue_map.proximity import ALL_PRIORITIES, filter_nearby

logger = logging.getLogger(__name__)

INDIVIDUAL = "individual"
DENSITY = "density"
HEATMAP = "heatmap"
VIEW_MODES = (INDIVIDUAL, DENSITY, HEATMAP)


def build_map_view(complaints, community_issues, position=None, view_mode=INDIVIDUAL,
                   priority=ALL_PRIORITIES, radius_km=MAP_RADIUS_KM):
    """
    Build the render instructions for one map view.

    fetched lists -> aggregate -> proximity filter -> markers | clusters | heat

    Args:
        complaints (list): Complaint records
        community_issues (list): Community issue records
        position (UserPosition): User location, or None if not resolved
        view_mode (str): "individual", "density" or "heatmap"
        priority (str): Priority to keep, or "all"
        radius_km (float): Radius around the user in kilometers

    Returns:
        dict: view_mode, center, count and the layer for that mode
    """
    if view_mode not in VIEW_MODES:
        raise ValueError(f"Unknown view mode: {view_mode}")

    issues = aggregate_issues(complaints, community_issues)
    nearby = filter_nearby(issues, position, radius_km, priority)
    logger.debug(f"{len(nearby)} of {len(issues)} issues on the {view_mode} map")

    if position is not None:
        center = {"lat": position.latitude, "lng": position.longitude}
    else:
        center = {"lat": DEFAULT_CENTER_LAT, "lng": DEFAULT_CENTER_LNG}

    view = {
        "view_mode": view_mode,
        "center": center,
        "radius_km": radius_km if position is not None else None,
        "count": len(nearby),
    }

    if view_mode == DENSITY:
        view["clusters"] = cluster_markers(group_by_cell(nearby))
    elif view_mode == HEATMAP:
        view["heat"] = [list(point) for point in heat_points(nearby)]
        view["heat_options"] = HEAT_LAYER_OPTIONS
    else:
        view["markers"] = issue_markers(nearby)

    return view
