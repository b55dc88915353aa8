PRIORITY_WEIGHTS = {
    "urgent": 4,
    "high": 3,
    "medium": 2,
    "low": 1,
}
DEFAULT_WEIGHT = 1

# Rendering configuration for the heat layer; nothing here is computed
HEAT_LAYER_OPTIONS = {
    "radius": 25,
    "blur": 15,
    "maxZoom": 17,
    "max": max(PRIORITY_WEIGHTS.values()),
    "gradient": {
        "0.4": "blue",
        "0.6": "lime",
        "0.8": "orange",
        "1.0": "red",
    },
}


def priority_to_weight(priority):
    # Default weight if priority unknown or missing
    return PRIORITY_WEIGHTS.get(priority, DEFAULT_WEIGHT)


def heat_points(issues):
    """
    Returns [lat, lng, weight] triples for the heat layer.
    Issues without coordinates are left out.
    """
    return [
        (issue.latitude, issue.longitude, priority_to_weight(issue.priority))
        for issue in issues
        if issue.has_coordinates
    ]


def heat_features(issues):
    features = []

    for issue in issues:
        if not issue.has_coordinates:
            continue

        features.append({
            "type": "Feature",
            "properties": {
                "id": issue.id,
                "title": issue.title,
                "category": issue.category,
                "priority": issue.priority,
                "kind": issue.kind,
                "intensity": priority_to_weight(issue.priority)
            },
            "geometry": {
                "type": "Point",
                "coordinates": [issue.longitude, issue.latitude]
            }
        })

    return {
        "type": "FeatureCollection",
        "features": features
    }
