import logging
import math
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)

COMPLAINT = "complaint"
COMMUNITY_ISSUE = "community_issue"


def to_coordinate(value):
    """
    Coerce a latitude/longitude value from an API record.

    Coordinates come through as numbers or as decimal strings. Anything
    blank, non-numeric or non-finite counts as a missing coordinate.

    Returns:
        float or None
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


class UserPosition(BaseModel):
    """Where the user is, once the browser has resolved it."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Issue(BaseModel):
    """One issue on the map, whichever list it came from."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    description: str = ""
    category: str = ""
    priority: str = ""
    status: str = "open"
    location: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    upvotes: int = 0
    downvotes: int = 0
    kind: Literal["complaint", "community_issue"]
    reporter: str = "Anonymous"
    ticket_number: Optional[str] = None
    created_at: Optional[str] = None
    resolved_at: Optional[str] = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_coordinate(cls, value):
        return to_coordinate(value)

    @field_validator("upvotes", "downvotes", mode="before")
    @classmethod
    def _coerce_count(cls, value):
        try:
            return int(value or 0)
        except (TypeError, ValueError):
            return 0

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


def _text(record: Mapping[str, Any], key: str, default: str = "") -> str:
    value = record.get(key)
    if value is None:
        return default
    return str(value)


def _common_fields(record: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "id": _text(record, "id"),
        "title": _text(record, "title"),
        "description": _text(record, "description"),
        "category": _text(record, "category"),
        "priority": _text(record, "priority").strip().lower(),
        "status": _text(record, "status", "open").strip().lower() or "open",
        "location": _text(record, "location"),
        "latitude": record.get("latitude"),
        "longitude": record.get("longitude"),
        "upvotes": record.get("upvotes"),
        "downvotes": record.get("downvotes"),
        "created_at": _text(record, "createdAt") or None,
        "resolved_at": _text(record, "resolvedAt") or None,
    }


def issue_from_complaint(record: Mapping[str, Any]) -> Issue:
    fields = _common_fields(record)
    fields["kind"] = COMPLAINT
    fields["reporter"] = _text(record, "userName").strip() or "Anonymous"
    fields["ticket_number"] = _text(record, "ticketNumber") or None
    return Issue(**fields)


def issue_from_community_issue(record: Mapping[str, Any]) -> Issue:
    fields = _common_fields(record)
    fields["kind"] = COMMUNITY_ISSUE
    fields["reporter"] = (_text(record, "authorName").strip() or
                          _text(record, "userName").strip() or "Anonymous")
    return Issue(**fields)


def _convert(records, converter, kind) -> List[Issue]:
    issues = []
    for record in records or []:
        if not isinstance(record, Mapping):
            logger.warning(f"Skipping {kind} record that is not an object: {record!r}")
            continue
        try:
            issues.append(converter(record))
        except ValidationError as e:
            logger.warning(f"Skipping {kind} record {record.get('id')!r}: {e}")
    return issues


def aggregate_issues(complaints: Iterable[Mapping[str, Any]],
                     community_issues: Iterable[Mapping[str, Any]]) -> List[Issue]:
    """
    Merge complaints and community issues into one list of Issue.

    Complaints come first, then community issues, each in input order and
    stamped with the list it came from. Issues without coordinates are kept;
    only the spatial views drop them.

    Args:
        complaints (list): Complaint records as returned by /api/complaints/all
        community_issues (list): Records as returned by /api/community-issues

    Returns:
        list: Issue objects
    """
    return (_convert(complaints, issue_from_complaint, COMPLAINT) +
            _convert(community_issues, issue_from_community_issue, COMMUNITY_ISSUE))
