"""
leaderboard.py - Ranking of approved users by average completed-interview score
"""

from datetime import datetime, timedelta

from sqlalchemy import func

from catalog import role_display_name
from models import db, Interview, User
from utils import round_half_up

LEADERBOARD_SIZE = 50
PERIOD_DAYS = {"week": 7, "month": 30}


def _filters(period, role):
    conditions = [Interview.status == "completed", Interview.total_score.isnot(None)]
    days = PERIOD_DAYS.get(period)
    if days:
        conditions.append(Interview.completed_at >= datetime.utcnow() - timedelta(days=days))
    if role:
        conditions.append(Interview.role == role)
    return conditions


def _primary_roles(user_ids):
    """Most frequent completed-interview role per user."""
    if not user_ids:
        return {}
    rows = (
        db.session.query(Interview.user_id, Interview.role, func.count(Interview.id))
        .filter(Interview.status == "completed", Interview.user_id.in_(user_ids))
        .group_by(Interview.user_id, Interview.role)
        .all()
    )
    best = {}
    for user_id, role, count in rows:
        if user_id not in best or count > best[user_id][1]:
            best[user_id] = (role, count)
    return {uid: role_display_name(role) for uid, (role, _) in best.items()}


def build_leaderboard(current_user_id, period="all", role=None):
    conditions = _filters(period, role)
    avg_score = func.avg(Interview.total_score)

    rows = (
        db.session.query(
            Interview.user_id,
            User.name,
            User.image_url,
            avg_score.label("avg_score"),
            func.max(Interview.total_score).label("best_score"),
            func.count(Interview.id).label("total"),
        )
        .join(User, User.id == Interview.user_id)
        .filter(User.status == "approved", *conditions)
        .group_by(Interview.user_id, User.name, User.image_url)
        .order_by(avg_score.desc())
        .limit(LEADERBOARD_SIZE)
        .all()
    )

    roles = _primary_roles([r.user_id for r in rows])
    leaderboard = [
        {
            "rank": index + 1,
            "userId": r.user_id,
            "name": r.name or "Anonymous",
            "imageUrl": r.image_url,
            "averageScore": round_half_up(float(r.avg_score or 0)),
            "bestScore": int(r.best_score or 0),
            "totalInterviews": int(r.total or 0),
            "primaryRole": roles.get(r.user_id, "General"),
        }
        for index, r in enumerate(rows)
    ]

    current_rank = next((e["rank"] for e in leaderboard if e["userId"] == current_user_id), None)
    if current_rank is None:
        user_avg = (
            db.session.query(avg_score)
            .filter(Interview.user_id == current_user_id, *conditions)
            .scalar()
        )
        if user_avg is not None:
            user_avg = round_half_up(float(user_avg))
            current_rank = 1 + sum(1 for e in leaderboard if e["averageScore"] > user_avg)

    return {
        "leaderboard": leaderboard,
        "currentUserRank": current_rank,
        "currentUserId": current_user_id,
        "totalUsers": len(leaderboard),
    }
