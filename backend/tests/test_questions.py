"""Tests for the static question bank."""

import pytest
from pydantic import ValidationError

from levelquiz.questions import QUESTIONS, Question, QuestionBank, get_question_bank, tier_for_index


EXPECTED_TIERS = {range(0, 10): "A1", range(10, 20): "A2", range(20, 30): "B1", range(30, 40): "B2"}


class TestDefaultBank:
    def test_has_forty_questions(self):
        assert len(get_question_bank()) == 40

    def test_ids_match_positions(self):
        bank = get_question_bank()
        for index in range(40):
            assert bank.get(index).id == index

    @pytest.mark.parametrize("indexes,tier", EXPECTED_TIERS.items())
    def test_tiers_follow_id_ranges(self, indexes, tier):
        bank = get_question_bank()
        for index in indexes:
            assert bank.get(index).tier == tier

    def test_every_question_has_three_options(self):
        for question in QUESTIONS:
            assert len(question.options) == 3
            assert question.correct_option in ("A", "B", "C")

    @pytest.mark.parametrize("index", [-1, 40, 100])
    def test_out_of_range_is_not_found(self, index):
        assert get_question_bank().get(index) is None

    def test_questions_are_immutable(self):
        question = get_question_bank().get(0)
        with pytest.raises(ValidationError):
            question.correct_option = "A"


class TestBankValidation:
    def test_rejects_id_position_mismatch(self):
        with pytest.raises(ValueError):
            QuestionBank([QUESTIONS[1]])

    def test_rejects_wrong_tier(self):
        bad = Question(id=0, prompt="?", options=("a", "b", "c"), correct_option="A", tier="B2")
        with pytest.raises(ValueError):
            QuestionBank([bad])

    def test_complete_bank_requires_every_question(self):
        with pytest.raises(ValueError):
            QuestionBank(QUESTIONS[:39], complete=True)

    def test_complete_bank_accepts_full_set(self):
        assert len(QuestionBank(QUESTIONS, complete=True)) == 40

    def test_accepts_prefix_of_default_bank(self):
        bank = QuestionBank(QUESTIONS[:5])
        assert len(bank) == 5
        assert bank.get(5) is None

    def test_tier_for_index(self):
        assert tier_for_index(0) == "A1"
        assert tier_for_index(19) == "A2"
        assert tier_for_index(20) == "B1"
        assert tier_for_index(39) == "B2"
