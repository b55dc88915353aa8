RESOLVED_COLOR = "#22c55e"   # green
DEFAULT_COLOR = "#6b7280"    # gray

PRIORITY_COLORS = {
    "urgent": "#ef4444",     # red
    "high": "#ef4444",       # red
    "medium": "#f97316",     # orange
    "low": "#eab308",        # yellow
}

PRIORITY_SIZES = {
    "urgent": 40,
    "high": 40,
    "medium": 32,
    "low": 28,
}
DEFAULT_SIZE = 24


def marker_color(status, priority):
    if status == "resolved":
        return RESOLVED_COLOR
    return PRIORITY_COLORS.get(priority, DEFAULT_COLOR)


def marker_size(priority):
    return PRIORITY_SIZES.get(priority, DEFAULT_SIZE)


def marker_glyph(priority):
    if priority in ("urgent", "high"):
        return "exclamation"
    if priority == "medium":
        return "info"
    return "check"


def marker_style(issue):
    """
    Visual encoding for one issue marker.

    Args:
        issue (Issue): Issue to draw

    Returns:
        dict: color, size (px) and glyph name
    """
    return {
        "color": marker_color(issue.status, issue.priority),
        "size": marker_size(issue.priority),
        "glyph": marker_glyph(issue.priority),
    }


def issue_markers(issues):
    """Individual marker instructions; issues without coordinates are skipped"""
    markers = []

    for issue in issues:
        if not issue.has_coordinates:
            continue

        marker = {
            "id": issue.id,
            "lat": issue.latitude,
            "lng": issue.longitude,
            "title": issue.title,
            "category": issue.category,
            "priority": issue.priority,
            "status": issue.status,
            "location": issue.location,
            "upvotes": issue.upvotes,
            "kind": issue.kind,
            "reporter": issue.reporter,
        }
        marker.update(marker_style(issue))
        markers.append(marker)

    return markers
