import json
import logging

import requests

from issue_map import config

logger = logging.getLogger(__name__)

COMPLAINTS_PATH = "/api/complaints/all"
COMMUNITY_ISSUES_PATH = "/api/community-issues"


def fetch_list(url, timeout):
    """
    GET a JSON array from the issue API.

    A failed request or a payload that is not a list logs a warning and
    gives back an empty list, so one source going down never hides the other.
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.warning(f"Could not fetch {url}: {e}")
        return []

    if not isinstance(payload, list):
        logger.warning(f"Expected a list from {url}, got {type(payload).__name__}")
        return []

    return payload


def fetch_issue_lists(base_url, timeout=None):
    """Fetch complaints and community issues from the upstream API"""
    timeout = config.ISSUE_API_TIMEOUT if timeout is None else timeout
    base_url = base_url.rstrip("/")

    complaints = fetch_list(base_url + COMPLAINTS_PATH, timeout)
    community_issues = fetch_list(base_url + COMMUNITY_ISSUES_PATH, timeout)
    logger.info(f"Fetched {len(complaints)} complaints and "
                f"{len(community_issues)} community issues from {base_url}")

    return complaints, community_issues


def load_list(filepath):
    """Load a JSON array from a file; a missing file is an empty list"""
    try:
        with open(filepath, 'r') as f:
            payload = json.load(f)
    except FileNotFoundError:
        logger.info(f"{filepath} not found, treating as empty")
        return []

    if not isinstance(payload, list):
        logger.warning(f"Expected a list in {filepath}, got {type(payload).__name__}")
        return []

    return payload


def load_issue_lists(complaints_path=None, issues_path=None):
    complaints = load_list(complaints_path or config.COMPLAINTS_FILE)
    community_issues = load_list(issues_path or config.COMMUNITY_ISSUES_FILE)
    return complaints, community_issues


def get_issue_lists():
    """Read both lists from the upstream API if configured, else from local files"""
    if config.ISSUE_API_URL:
        return fetch_issue_lists(config.ISSUE_API_URL)
    return load_issue_lists()
