import logging
import math

from flask import Flask, jsonify, request
from flask_cors import CORS

from issue_map import config
from issue_map.heatmap import heat_features
from issue_map.issues import UserPosition, aggregate_issues, to_coordinate
from issue_map.proximity import filter_nearby
from issue_map.source import get_issue_lists
from issue_map.stats import city_stats, search_issues, sort_by_priority
from issue_map.view import INDIVIDUAL, build_map_view

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


def parse_position(args):
    """
    Read the user position from ?lat=&lng=.

    Both missing means the location has not resolved. Only one of them, or
    values that are not finite numbers, is a bad request.
    """
    lat = args.get("lat", "").strip()
    lng = args.get("lng", "").strip()

    if not lat and not lng:
        return None
    if not lat or not lng:
        raise ValueError("lat and lng must be given together")

    latitude = to_coordinate(lat)
    longitude = to_coordinate(lng)
    if latitude is None or longitude is None or abs(latitude) > 90 or abs(longitude) > 180:
        raise ValueError(f"Invalid position: lat={lat!r}, lng={lng!r}")

    return UserPosition(latitude=latitude, longitude=longitude)


def parse_radius(args):
    raw = args.get("radius_km", "").strip()
    if not raw:
        return config.MAP_RADIUS_KM
    try:
        radius_km = float(raw)
    except ValueError:
        raise ValueError(f"Invalid radius_km: {raw!r}")
    if not math.isfinite(radius_km) or radius_km < 0:
        raise ValueError("radius_km must be a finite, non-negative number")
    return radius_km


def issue_to_json(issue):
    return issue.model_dump()


def error_response(message, status):
    return jsonify({
        "success": False,
        "error": message
    }), status


@app.route("/")
def index():
    """Service status"""
    return jsonify({"status": "Issue map running"})


@app.route("/api/issues")
def get_issues():
    """
    All issues, with or without coordinates, most urgent first.
    Query parameters: q, status, priority, category
    """
    try:
        complaints, community_issues = get_issue_lists()
        issues = aggregate_issues(complaints, community_issues)
        issues = search_issues(
            issues,
            query=request.args.get("q", ""),
            status=request.args.get("status", "all"),
            priority=request.args.get("priority", "all"),
            category=request.args.get("category", "all"),
        )
        issues = sort_by_priority(issues)

        return jsonify({
            "success": True,
            "count": len(issues),
            "issues": [issue_to_json(issue) for issue in issues]
        })

    except Exception as e:
        logger.exception("Failed to list issues")
        return error_response(str(e), 500)


@app.route("/api/map")
def get_map():
    """
    Map layer around the user.
    Query parameters: lat, lng, mode, priority, radius_km
    """
    try:
        position = parse_position(request.args)
        radius_km = parse_radius(request.args)
    except ValueError as e:
        return error_response(str(e), 400)

    try:
        complaints, community_issues = get_issue_lists()
        view = build_map_view(
            complaints,
            community_issues,
            position=position,
            view_mode=request.args.get("mode", INDIVIDUAL),
            priority=request.args.get("priority", "all"),
            radius_km=radius_km,
        )
    except ValueError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.exception("Failed to build map view")
        return error_response(str(e), 500)

    view["success"] = True
    return jsonify(view)


@app.route("/data")
def data():
    """Heat layer as GeoJSON. Query parameters: lat, lng, priority, radius_km"""
    try:
        position = parse_position(request.args)
        radius_km = parse_radius(request.args)
    except ValueError as e:
        return error_response(str(e), 400)

    try:
        complaints, community_issues = get_issue_lists()
        issues = aggregate_issues(complaints, community_issues)
        nearby = filter_nearby(issues, position, radius_km, request.args.get("priority", "all"))
        return jsonify(heat_features(nearby))

    except Exception as e:
        logger.exception("Failed to build heat layer")
        return error_response(str(e), 500)


@app.route("/api/stats/city")
def get_city_stats():
    try:
        complaints, community_issues = get_issue_lists()
        return jsonify(city_stats(aggregate_issues(complaints, community_issues)))

    except Exception as e:
        logger.exception("Failed to compute city stats")
        return error_response(str(e), 500)


def main():
    logger.info(f"Starting issue map on {config.HOST}:{config.PORT}")
    app.run(host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
