import uuid
from datetime import datetime, timedelta

from conftest import auth_header
from models import db, Answer, Interview


def add_interview(user, score, role="backend", days_ago=0, status="completed", answers=()):
    when = datetime.utcnow() - timedelta(days=days_ago)
    interview = Interview(
        mock_id=str(uuid.uuid4()), user_id=user.id, role=role, experience_level="1-3",
        interview_type="technical", status=status, total_score=score,
        created_at=when, completed_at=when if status == "completed" else None,
    )
    db.session.add(interview)
    db.session.flush()
    for index, (t, c, d) in enumerate(answers):
        db.session.add(Answer(interview_id=interview.id, question_index=index,
                              question_text=f"Q{index}", user_answer="A",
                              technical_score=t, communication_score=c, depth_score=d))
    db.session.commit()
    return interview


def test_analytics_null_without_completed(client, user, headers):
    add_interview(user, None, status="in_progress")
    resp = client.get("/api/interview/analytics", headers=headers)
    assert resp.status_code == 200
    assert resp.get_json() is None


def test_analytics(client, user, headers):
    add_interview(user, 40, days_ago=5)
    add_interview(user, 50, days_ago=4)
    add_interview(user, 60, days_ago=3)
    add_interview(user, 80, days_ago=2, role="frontend", answers=[(8, 6, 4)])
    add_interview(user, 90, days_ago=1, answers=[(10, 8, 6)])

    body = client.get("/api/interview/analytics", headers=headers).get_json()

    assert body["overview"]["averageScore"] == 64
    assert body["overview"]["bestScore"] == 90
    assert body["overview"]["worstScore"] == 40
    # newest three avg 76.67 - oldest three avg 50
    assert body["overview"]["improvementRate"] == 27
    assert body["recentTrend"] == "improving"
    assert [p["score"] for p in body["scoreHistory"]] == [40, 50, 60, 80, 90]
    assert body["skillBreakdown"] == {"technical": 9, "communication": 7, "depth": 5}
    assert {"role": "Frontend Developer", "avgScore": 80, "count": 1} in body["scoreByRole"]


def test_leaderboard_ranks_approved_users(client, make_user):
    alice = make_user(email="alice@example.com", name="Alice")
    bob = make_user(email="bob@example.com", name=None)
    pending = make_user(email="pending@example.com", name="Pending", status="pending")
    add_interview(alice, 70)
    add_interview(alice, 90, role="frontend")
    add_interview(alice, 60, role="frontend")
    add_interview(bob, 95)
    add_interview(pending, 100)

    body = client.get("/api/interview/leaderboard", headers=auth_header(alice)).get_json()
    board = body["leaderboard"]

    assert [e["userId"] for e in board] == [bob.id, alice.id]
    assert board[0]["name"] == "Anonymous"
    assert board[0]["rank"] == 1
    assert board[1] == {
        "rank": 2, "userId": alice.id, "name": "Alice", "imageUrl": None,
        "averageScore": 73, "bestScore": 90, "totalInterviews": 3,
        "primaryRole": "Frontend Developer",
    }
    assert body["currentUserRank"] == 2
    assert body["totalUsers"] == 2


def test_leaderboard_period_filter(client, make_user):
    alice = make_user(email="alice@example.com", name="Alice")
    add_interview(alice, 70, days_ago=10)
    add_interview(alice, 90, days_ago=1)

    week = client.get("/api/interview/leaderboard?period=week", headers=auth_header(alice)).get_json()
    month = client.get("/api/interview/leaderboard?period=month", headers=auth_header(alice)).get_json()

    assert week["leaderboard"][0]["averageScore"] == 90
    assert month["leaderboard"][0]["averageScore"] == 80


def test_leaderboard_role_filter(client, make_user):
    alice = make_user(email="alice@example.com", name="Alice")
    add_interview(alice, 70, role="backend")
    add_interview(alice, 90, role="frontend")

    body = client.get("/api/interview/leaderboard?role=frontend", headers=auth_header(alice)).get_json()
    assert body["leaderboard"][0]["averageScore"] == 90


def test_leaderboard_user_without_scores(client, user, headers):
    body = client.get("/api/interview/leaderboard", headers=headers).get_json()
    assert body["leaderboard"] == []
    assert body["currentUserRank"] is None
