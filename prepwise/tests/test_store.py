"""
Tests for the Firestore accessors, run against the in-memory double.
"""
from prepwise.services.store import (
    get_feedback_by_interview_id,
    get_interview_by_id,
    get_interviews_by_user_id,
    get_latest_interviews,
    save_feedback,
)


def seed(db, doc_id, user_id, day, finalized=True):
    db.collection("interviews").document(doc_id).set({
        "role": "SWE",
        "type": "technical",
        "level": "junior",
        "techstack": [],
        "questions": [],
        "userId": user_id,
        "finalized": finalized,
        "coverImage": "/covers/adobe.png",
        "createdAt": f"2025-01-{day:02d}T10:00:00.000Z",
    })


def seed_feed(db):
    for day in range(1, 6):
        seed(db, f"u2-{day}", "u2", day)
    for day in range(6, 9):
        seed(db, f"u1-{day}", "u1", day)
    seed(db, "u1-draft-1", "u1", 9, finalized=False)
    seed(db, "u1-draft-2", "u1", 10, finalized=False)


def test_discovery_feed_excludes_caller_and_drafts(db):
    seed_feed(db)

    feed = get_latest_interviews(db, "u1")

    assert [i["id"] for i in feed] == ["u2-5", "u2-4", "u2-3", "u2-2", "u2-1"]


def test_discovery_feed_limit(db):
    seed_feed(db)
    assert [i["id"] for i in get_latest_interviews(db, "u1", limit=2)] == ["u2-5", "u2-4"]


def test_discovery_feed_without_user(db):
    seed_feed(db)
    assert get_latest_interviews(db, None) == []
    assert get_latest_interviews(db, "") == []


def test_interviews_by_user_newest_first(db):
    seed_feed(db)

    interviews = get_interviews_by_user_id(db, "u1")

    assert [i["id"] for i in interviews] == ["u1-draft-2", "u1-draft-1", "u1-8", "u1-7", "u1-6"]
    assert get_interviews_by_user_id(db, None) == []


def test_interview_by_id(db):
    seed(db, "abc", "u1", 1)

    assert get_interview_by_id(db, "abc")["userId"] == "u1"
    assert get_interview_by_id(db, "missing") is None


def test_feedback_lookup(db):
    feedback_id = save_feedback(db, {"interviewId": "i1", "userId": "u1", "totalScore": 80})
    save_feedback(db, {"interviewId": "i1", "userId": "u2", "totalScore": 40})

    found = get_feedback_by_interview_id(db, "i1", "u1")

    assert found["id"] == feedback_id
    assert found["totalScore"] == 80
    assert get_feedback_by_interview_id(db, "i1", "u3") is None
