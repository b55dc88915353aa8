import math

from issue_map.config import MAP_RADIUS_KM

EARTH_RADIUS_KM = 6371  # mean Earth radius

ALL_PRIORITIES = "all"


def haversine_km(lat1, lng1, lat2, lng2):
    """Calculate distance between two points in kilometers (Haversine)"""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lng = math.radians(lng2 - lng1)

    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) *
         math.sin(delta_lng / 2) ** 2)
    # float error can push a a hair past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_to(issue, position):
    """
    Distance from the user to an issue in kilometers.

    Returns:
        float or None: None when either side has no coordinates
    """
    if position is None or not issue.has_coordinates:
        return None
    return haversine_km(position.latitude, position.longitude,
                        issue.latitude, issue.longitude)


def matches_priority(issue, priority):
    priority = (priority or "").strip().lower()
    return priority in ("", ALL_PRIORITIES) or issue.priority == priority


def is_nearby(issue, position, radius_km=MAP_RADIUS_KM):
    """
    Check if an issue is within radius of the user.

    Issues without coordinates are never nearby. Without a user position the
    radius check is skipped, so everything with coordinates passes until the
    location resolves.
    """
    if not issue.has_coordinates:
        return False
    if position is None:
        return True
    return distance_to(issue, position) <= radius_km


def filter_nearby(issues, position=None, radius_km=MAP_RADIUS_KM, priority=ALL_PRIORITIES):
    """
    Keep the issues that belong on the map around the user.

    Args:
        issues (list): Aggregated Issue objects
        position (UserPosition): User location, or None if not resolved
        radius_km (float): Radius around the user in kilometers
        priority (str): Priority to keep, or "all"

    Returns:
        list: Issues with coordinates, inside the radius and matching the
              priority, in input order
    """
    return [
        issue for issue in issues
        if is_nearby(issue, position, radius_km) and matches_priority(issue, priority)
    ]
