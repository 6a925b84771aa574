from __future__ import annotations
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .questions import QUESTION_COUNT

QuestionIndex = Annotated[int, Field(strict=True, ge=0, le=QUESTION_COUNT - 1)]
Score = Annotated[int, Field(strict=True, ge=0, le=QUESTION_COUNT)]
SessionId = Annotated[str, Field(strict=True, min_length=1, max_length=64)]


class QuizRequest(BaseModel):
	"""Body of POST /api/quiz.

	``score`` is accepted from older clients but never trusted; the server
	recomputes it from stored analytics.
	"""

	model_config = ConfigDict(populate_by_name=True, extra="ignore")

	phase: Literal["quiz", "feedback"]
	question_index: Optional[QuestionIndex] = Field(default=None, alias="questionIndex")
	answer: Optional[Literal["A", "B", "C"]] = None
	answered_question_id: Optional[QuestionIndex] = Field(default=None, alias="answeredQuestionId")
	session_id: Optional[SessionId] = Field(default=None, alias="sessionId")
	score: Optional[Score] = None

	@model_validator(mode="after")
	def _check_phase_fields(self) -> "QuizRequest":
		if self.phase == "quiz" and self.question_index is None:
			raise ValueError("questionIndex is required for the quiz phase")
		if self.phase == "feedback" and not self.session_id:
			raise ValueError("sessionId is required for the feedback phase")
		return self


class QuestionResponse(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	question: str
	options: List[str]
	session_id: str = Field(alias="sessionId")


class FeedbackResponse(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	feedback: str
	session_id: str = Field(alias="sessionId")
	score: int
	level: str
