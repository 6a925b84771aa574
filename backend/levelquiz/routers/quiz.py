from __future__ import annotations
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from ..db import get_db
from ..feedback import Rephraser, compose_feedback
from ..gemini_client import get_rephraser
from ..questions import Question, QuestionBank, get_question_bank
from ..schemas import FeedbackResponse, QuestionResponse, QuizRequest
from ..scoring import classify_level, find_result, record_answer, save_result, session_analytics, total_correct
from ..settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["quiz"])


def _client_ip(request: Request) -> str:
	forwarded = request.headers.get("x-forwarded-for", "")
	if forwarded.strip():
		return forwarded.split(",")[0].strip()
	if request.client and request.client.host:
		return request.client.host
	return "unknown"


def _answered_question(req: QuizRequest, bank: QuestionBank) -> Optional[Question]:
	# Default protocol: the answer sent with question N belongs to question N-1.
	if req.answered_question_id is not None:
		return bank.get(req.answered_question_id)
	if req.question_index > 0:
		return bank.get(req.question_index - 1)
	return None


def _quiz_phase(req: QuizRequest, db: Session, bank: QuestionBank) -> QuestionResponse:
	session_id = req.session_id or uuid.uuid4().hex
	question = bank.get(req.question_index)
	if question is None:
		raise HTTPException(status_code=404, detail="Question not found")
	if req.answer is not None:
		answered = _answered_question(req, bank)
		if answered is not None:
			try:
				record_answer(db, session_id, answered, req.answer)
			except Exception:
				db.rollback()
				logger.warning("could not record answer for session %s, question %d", session_id, answered.id, exc_info=True)
	return QuestionResponse(question=question.prompt, options=list(question.options), session_id=session_id)


async def _feedback_phase(req: QuizRequest, request: Request, db: Session, rephrase: Optional[Rephraser]) -> FeedbackResponse:
	session_id = req.session_id
	existing = find_result(db, session_id)
	if existing is not None:
		logger.info("session %s already completed, returning stored feedback", session_id)
		return FeedbackResponse(feedback=existing.feedback, session_id=session_id, score=existing.score, level=existing.level)

	answers = session_analytics(db, session_id)
	score = total_correct(answers)
	level = classify_level(score)
	feedback = await compose_feedback(score, level, rephrase, timeout=settings.rephrase_timeout_seconds)
	try:
		save_result(db, session_id, score, level, feedback, answers, ip_address=_client_ip(request))
	except Exception:
		db.rollback()
		logger.error("could not save result for session %s", session_id, exc_info=True)
	return FeedbackResponse(feedback=feedback, session_id=session_id, score=score, level=level)


@router.post("/quiz")
async def quiz(
	req: QuizRequest,
	request: Request,
	db: Session = Depends(get_db),
	bank: QuestionBank = Depends(get_question_bank),
	rephrase: Optional[Rephraser] = Depends(get_rephraser),
):
	try:
		if req.phase == "quiz":
			return _quiz_phase(req, db, bank)
		return await _feedback_phase(req, request, db, rephrase)
	except HTTPException:
		raise
	except Exception:
		logger.exception("quiz request failed")
		raise HTTPException(status_code=400, detail="Invalid request data")
