CELL_PRECISION = 3  # decimal places, ~100 meters

# Cluster marker sizing (px)
CLUSTER_BASE_SIZE = 30
CLUSTER_SIZE_STEP = 2
CLUSTER_MAX_SIZE = 50

# Cluster color tiers by member count
CLUSTER_MID_THRESHOLD = 3    # count < 3 -> low
CLUSTER_HIGH_THRESHOLD = 7   # count > 7 -> high
CLUSTER_COLORS = {
    "low": "#eab308",
    "mid": "#f97316",
    "high": "#ef4444",
}


def cell_key(lat, lng):
    """Snap a coordinate pair to its density cell"""
    return (round(lat, CELL_PRECISION), round(lng, CELL_PRECISION))


def group_by_cell(issues):
    """
    Bucket issues into ~100m cells by rounding their coordinates.

    Args:
        issues (list): Issue objects, usually already proximity filtered

    Returns:
        dict: {(lat, lng): {"lat", "lng", "issues", "count"}} in order of
              each cell's first issue
    """
    cells = {}

    for issue in issues:
        if not issue.has_coordinates:
            continue

        key = cell_key(issue.latitude, issue.longitude)
        cell = cells.get(key)
        if cell is None:
            cell = {"lat": key[0], "lng": key[1], "issues": [], "count": 0}
            cells[key] = cell

        cell["issues"].append(issue)
        cell["count"] += 1

    return cells


def cluster_size(count):
    return min(CLUSTER_BASE_SIZE + count * CLUSTER_SIZE_STEP, CLUSTER_MAX_SIZE)


def cluster_tier(count):
    if count < CLUSTER_MID_THRESHOLD:
        return "low"
    if count <= CLUSTER_HIGH_THRESHOLD:
        return "mid"
    return "high"


def cluster_color(count):
    return CLUSTER_COLORS[cluster_tier(count)]


def cluster_markers(cells):
    """Turn density cells into cluster marker instructions for the map"""
    markers = []

    for cell in cells.values():
        count = cell["count"]
        markers.append({
            "lat": cell["lat"],
            "lng": cell["lng"],
            "count": count,
            "size": cluster_size(count),
            "color": cluster_color(count),
            "tier": cluster_tier(count),
            "issue_ids": [issue.id for issue in cell["issues"]],
        })

    return markers
