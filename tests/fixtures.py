"""Records shaped like the responses of the complaint and community issue APIs."""

USER_LAT = 21.2514
USER_LNG = 81.6296


def complaint(**overrides):
    record = {
        "id": "c-1",
        "ticketNumber": "RSC-2024-ABC123",
        "title": "Pothole near Jaistambh Chowk",
        "description": "Deep pothole in the left lane",
        "category": "roads",
        "priority": "high",
        "status": "open",
        "location": "Jaistambh Chowk",
        "latitude": "21.26000000",
        "longitude": "81.64000000",
        "upvotes": 4,
        "downvotes": 0,
        "userName": "Asha Verma",
        "createdAt": "2024-03-01T10:00:00.000Z",
    }
    record.update(overrides)
    return record


def community_issue(**overrides):
    record = {
        "id": "ci-1",
        "title": "Streetlights out on GE Road",
        "description": "Whole stretch is dark after 8pm",
        "category": "electricity",
        "priority": "medium",
        "status": "open",
        "location": "GE Road",
        "latitude": 21.2550,
        "longitude": 81.6300,
        "upvotes": 12,
        "downvotes": 1,
        "commentsCount": 3,
        "authorName": "Ravi Sahu",
        "createdAt": "2024-03-02T08:30:00.000Z",
    }
    record.update(overrides)
    return record
