from __future__ import annotations

import json
import logging
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from .models import QuizAnalytics, QuizResult
from .questions import QUESTION_COUNT, Question


logger = logging.getLogger(__name__)

MAX_SCORE = QUESTION_COUNT

# Highest threshold first; the first one met wins, A1 otherwise.
LEVEL_THRESHOLDS = [(31, "B2"), (21, "B1"), (11, "A2")]
DEFAULT_LEVEL = "A1"


def classify_level(score: int) -> str:
    score = max(0, min(int(score), MAX_SCORE))
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return DEFAULT_LEVEL


def record_answer(db: Session, session_id: str, question: Question, selected_option: str) -> QuizAnalytics:
    """Persist the outcome of one answered question.

    Database errors are not handled here; the caller decides whether a
    failed write should affect the response.
    """
    row = QuizAnalytics(
        question_id=question.id,
        selected_answer=selected_option,
        correct_answer=question.correct_option,
        is_correct=1 if selected_option == question.correct_option else 0,
        level=question.tier,
        session_id=session_id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.debug("recorded answer session=%s question=%d correct=%d", session_id, question.id, row.is_correct)
    return row


def session_analytics(db: Session, session_id: Optional[str], limit: int = 100) -> List[QuizAnalytics]:
    """Analytics rows of one session in answer order.

    With no session id this returns the most recent ``limit`` rows across
    every session instead, which is what the admin view wants.
    """
    query = db.query(QuizAnalytics)
    if session_id:
        return query.filter(QuizAnalytics.session_id == session_id).order_by(QuizAnalytics.id.asc()).all()
    return query.order_by(QuizAnalytics.id.desc()).limit(limit).all()


def total_correct(rows: Sequence[QuizAnalytics]) -> int:
    """Correct answers counted once per question; the latest answer wins.

    Rows must be in answer order, as returned by ``session_analytics``.
    """
    latest = {row.question_id: row for row in rows}
    score = sum(1 for row in latest.values() if row.is_correct == 1)
    return min(score, MAX_SCORE)


def find_result(db: Session, session_id: str) -> Optional[QuizResult]:
    return (
        db.query(QuizResult)
        .filter(QuizResult.session_id == session_id)
        .order_by(QuizResult.id.asc())
        .first()
    )


def recent_results(db: Session, limit: int = 50) -> List[QuizResult]:
    return db.query(QuizResult).order_by(QuizResult.id.desc()).limit(limit).all()


def save_result(
    db: Session,
    session_id: str,
    score: int,
    level: str,
    feedback: str,
    answers: Sequence[QuizAnalytics],
    ip_address: str = "unknown",
) -> QuizResult:
    snapshot = [row.to_dict() for row in answers]
    row = QuizResult(
        session_id=session_id,
        score=score,
        level=level,
        feedback=feedback,
        answers=json.dumps(snapshot, ensure_ascii=False),
        ip_address=ip_address or "unknown",
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("saved result session=%s score=%d level=%s", session_id, score, level)
    return row
