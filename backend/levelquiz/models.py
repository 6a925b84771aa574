from __future__ import annotations
import json
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Integer, Text
from .db import Base


def _utcnow() -> datetime:
	return datetime.now(timezone.utc)


class QuizAnalytics(Base):
	__tablename__ = "quiz_analytics"
	id = Column(Integer, primary_key=True, autoincrement=True)
	question_id = Column(Integer, nullable=False)
	selected_answer = Column(String(1), nullable=False)
	correct_answer = Column(String(1), nullable=False)
	# 0 or 1, summed directly when scoring a session
	is_correct = Column(Integer, default=0, nullable=False)
	level = Column(String(8), nullable=False)
	session_id = Column(String(64), nullable=False, index=True)
	answered_at = Column(DateTime, default=_utcnow, nullable=False)

	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"questionId": self.question_id,
			"selectedOption": self.selected_answer,
			"correctOption": self.correct_answer,
			"isCorrect": self.is_correct,
			"tier": self.level,
			"sessionId": self.session_id,
			"answeredAt": self.answered_at.isoformat() if self.answered_at else None,
		}


class QuizResult(Base):
	__tablename__ = "quiz_results"
	id = Column(Integer, primary_key=True, autoincrement=True)
	session_id = Column(String(64), nullable=False, index=True)
	score = Column(Integer, nullable=False)
	level = Column(String(8), nullable=False)
	feedback = Column(Text, nullable=False)
	answers = Column(Text, nullable=False)  # JSON string snapshot of the session's analytics
	ip_address = Column(String(64), default="unknown", nullable=False)
	completed_at = Column(DateTime, default=_utcnow, nullable=False)

	def to_dict(self) -> dict:
		return {
			"id": self.id,
			"sessionId": self.session_id,
			"score": self.score,
			"level": self.level,
			"feedback": self.feedback,
			"answers": json.loads(self.answers) if self.answers else [],
			"ipAddress": self.ip_address,
			"completedAt": self.completed_at.isoformat() if self.completed_at else None,
		}
