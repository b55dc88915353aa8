from datetime import datetime

from issue_map.issues import COMPLAINT

PRIORITY_ORDER = {"urgent": 0, "high": 1, "medium": 2, "low": 3}
UNKNOWN_PRIORITY_RANK = 4

ALL = "all"


def city_stats(issues):
    """
    Calculate city-wide statistics.

    Totals and priority counts cover complaints only; the category and
    status breakdowns cover every issue.

    Args:
        issues (list): Aggregated Issue objects

    Returns:
        dict: Counts keyed the way the dashboard reads them
    """
    complaints = [issue for issue in issues if issue.kind == COMPLAINT]

    by_category = {}
    by_status = {}
    for issue in issues:
        category = issue.category or "unknown"
        by_category[category] = by_category.get(category, 0) + 1
        by_status[issue.status] = by_status.get(issue.status, 0) + 1

    return {
        "totalComplaints": len(complaints),
        "resolvedComplaints": sum(1 for c in complaints if c.status == "resolved"),
        "averageResponseTime": format_response_time(average_response_hours(complaints)),
        "highPriorityCount": sum(1 for c in complaints if c.priority == "high"),
        "mediumPriorityCount": sum(1 for c in complaints if c.priority == "medium"),
        "lowPriorityCount": sum(1 for c in complaints if c.priority == "low"),
        "totalIssues": len(issues),
        "byCategory": by_category,
        "byStatus": by_status,
    }


def _timestamp(value):
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
    except (TypeError, ValueError):
        return None


def _created_timestamp(issue):
    created = _timestamp(issue.created_at)
    return float("-inf") if created is None else created


def average_response_hours(complaints):
    """
    Mean hours from filing to resolution over resolved complaints.

    Returns:
        float or None: None when no complaint has both timestamps
    """
    durations = []
    for complaint in complaints:
        if complaint.status != "resolved":
            continue
        created = _timestamp(complaint.created_at)
        resolved = _timestamp(complaint.resolved_at)
        if created is None or resolved is None or resolved < created:
            continue
        durations.append((resolved - created) / 3600)

    if not durations:
        return None
    return sum(durations) / len(durations)


def format_response_time(hours):
    if hours is None:
        return "N/A"
    return f"{hours:.1f}h"


def sort_by_priority(issues):
    """Most urgent first, then newest first; undated issues go last"""
    return sorted(
        issues,
        key=lambda issue: (PRIORITY_ORDER.get(issue.priority, UNKNOWN_PRIORITY_RANK),
                           -_created_timestamp(issue)),
    )


def _choice(value):
    """Dropdown value, lower-cased; "" when it means no filter"""
    value = (value or "").strip().lower()
    return "" if value == ALL else value


def search_issues(issues, query="", status=ALL, priority=ALL, category=ALL):
    """
    Filter issues the way the dashboard search box and dropdowns do.

    The query matches title, description or ticket number, case-insensitive.
    """
    needle = (query or "").strip().lower()
    status = _choice(status)
    priority = _choice(priority)
    category = _choice(category)
    results = []

    for issue in issues:
        if needle:
            haystacks = (issue.title, issue.description, issue.ticket_number or "")
            if not any(needle in text.lower() for text in haystacks):
                continue
        if status and issue.status != status:
            continue
        if priority and issue.priority != priority:
            continue
        if category and issue.category.strip().lower() != category:
            continue
        results.append(issue)

    return results
