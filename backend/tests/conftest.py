"""Shared fixtures: an in-memory database and a scripted rephraser."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from levelquiz.db import Base, get_db
from levelquiz.gemini_client import get_rephraser
from levelquiz.main import app
from levelquiz.models import QuizAnalytics
from levelquiz.questions import QUESTIONS


class FakeRephraser:
    """Stands in for the Gemini-backed rephraser."""

    def __init__(self) -> None:
        self.reply: Optional[str] = None
        self.error: Optional[Exception] = None
        self.prompts: List[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def rephraser():
    return FakeRephraser()


@pytest.fixture
def client(session_factory, rephraser):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_rephraser] = lambda: rephraser
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_answers(db_session):
    """Insert analytics rows for a session: ``correct`` right answers, then wrong ones."""

    def _seed(session_id: str, correct: int, wrong: int = 0) -> None:
        for i in range(correct + wrong):
            question = QUESTIONS[i]
            is_correct = i < correct
            selected = question.correct_option if is_correct else next(
                letter for letter in "ABC" if letter != question.correct_option
            )
            db_session.add(
                QuizAnalytics(
                    question_id=question.id,
                    selected_answer=selected,
                    correct_answer=question.correct_option,
                    is_correct=1 if is_correct else 0,
                    level=question.tier,
                    session_id=session_id,
                )
            )
        db_session.commit()

    return _seed
