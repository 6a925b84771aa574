"""Static German question bank: 40 items in four contiguous CEFR tiers."""

from __future__ import annotations

from typing import List, Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict


TIERS: List[str] = ["A1", "A2", "B1", "B2"]
QUESTIONS_PER_TIER = 10
QUESTION_COUNT = QUESTIONS_PER_TIER * len(TIERS)
OPTION_LETTERS: Tuple[str, str, str] = ("A", "B", "C")


def tier_for_index(index: int) -> str:
    return TIERS[index // QUESTIONS_PER_TIER]


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    prompt: str
    options: Tuple[str, str, str]
    correct_option: Literal["A", "B", "C"]
    tier: Literal["A1", "A2", "B1", "B2"]


class QuestionBank:
    """Read-only, position-indexed collection of questions.

    Construction fails if ids do not match positions or a question sits in
    the wrong tier, so a bank that exists is always consistent.
    """

    def __init__(self, questions: Sequence[Question], *, complete: bool = False) -> None:
        if len(questions) > QUESTION_COUNT:
            raise ValueError(f"question bank holds at most {QUESTION_COUNT} questions")
        if complete and len(questions) != QUESTION_COUNT:
            raise ValueError(f"complete question bank needs exactly {QUESTION_COUNT} questions, got {len(questions)}")
        for position, question in enumerate(questions):
            if question.id != position:
                raise ValueError(f"question at position {position} has id {question.id}")
            expected = tier_for_index(position)
            if question.tier != expected:
                raise ValueError(f"question {position} is tier {question.tier}, expected {expected}")
        self._questions: Tuple[Question, ...] = tuple(questions)

    def get(self, index: int) -> Optional[Question]:
        if index < 0 or index >= len(self._questions):
            return None
        return self._questions[index]

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self):
        return iter(self._questions)


def _q(qid: int, prompt: str, options: Tuple[str, str, str], correct: str) -> Question:
    return Question(id=qid, prompt=prompt, options=options, correct_option=correct, tier=tier_for_index(qid))


QUESTIONS: Tuple[Question, ...] = (
    # A1
    _q(0, "Wie heißt du?", ("Ich bin müde", "Ich heiße Maria", "Ich komme später"), "B"),
    _q(1, "Wo wohnst du?", ("Ich wohne in Berlin", "Ich arbeite hier", "Ich spreche Deutsch"), "A"),
    _q(2, "Was ist das?", ("Das ist ein Buch", "Das sind müde", "Das hat Hunger"), "A"),
    _q(3, "Wie alt bist du?", ("Ich bin zwanzig Jahre alt", "Ich habe zwanzig", "Ich werde zwanzig"), "A"),
    _q(4, "Woher kommst du?", ("Ich gehe nach Deutschland", "Ich komme aus Brasilien", "Ich fahre nach Hause"), "B"),
    _q(5, "Was trinkst du gern?", ("Ich trinke gern Kaffee", "Ich esse gern Kaffee", "Ich schlafe gern Kaffee"), "A"),
    _q(6, "Wann stehst du auf?", ("Ich stehe um 7 Uhr auf", "Ich bin um 7 Uhr", "Ich gehe um 7 Uhr"), "A"),
    _q(7, "Welche Farbe hat das Auto?", ("Das Auto ist rot", "Das Auto hat rot", "Das Auto wird rot"), "A"),
    _q(8, "Wo ist der Schlüssel?", ("Der Schlüssel liegt auf dem Tisch", "Der Schlüssel ist müde", "Der Schlüssel trinkt Wasser"), "A"),
    _q(9, "Was kostet das Brot?", ("Das Brot kostet zwei Euro", "Das Brot ist zwei", "Das Brot hat zwei"), "A"),
    # A2
    _q(10, "Was machst du beruflich?", ("Ich bin Lehrer", "Ich habe Hunger", "Ich gehe spazieren"), "A"),
    _q(11, "Wie ist das Wetter heute?", ("Das Wetter ist schön und sonnig", "Das Wetter trinkt Kaffee", "Das Wetter arbeitet viel"), "A"),
    _q(12, "Was hast du gestern gemacht?", ("Ich habe einen Film gesehen", "Ich sehe einen Film", "Ich werde einen Film sehen"), "A"),
    _q(13, "Warum lernst du Deutsch?", ("Weil ich in Deutschland arbeiten möchte", "Dass ich in Deutschland arbeite", "Wenn ich in Deutschland arbeite"), "A"),
    _q(14, "Kannst du mir helfen?", ("Ja, natürlich kann ich dir helfen", "Ja, ich helfe dir können", "Ja, du kannst mir helfen"), "A"),
    _q(15, "Wann fährt der nächste Zug?", ("Der nächste Zug fährt um 15:30", "Der nächste Zug ist um 15:30", "Der nächste Zug hat um 15:30"), "A"),
    _q(16, "Was für Musik hörst du gern?", ("Ich höre gern klassische Musik", "Ich esse gern klassische Musik", "Ich trinke gern klassische Musik"), "A"),
    _q(17, "Wie lange lernst du schon Deutsch?", ("Ich lerne seit zwei Jahren Deutsch", "Ich lerne vor zwei Jahren Deutsch", "Ich lerne in zwei Jahren Deutsch"), "A"),
    _q(18, "Was würdest du gern machen?", ("Ich würde gern reisen", "Ich will gern reisen", "Ich muss gern reisen"), "A"),
    _q(19, "Wo warst du letztes Wochenende?", ("Ich war bei meinen Freunden", "Ich bin bei meinen Freunden", "Ich werde bei meinen Freunden"), "A"),
    # B1
    _q(20, "Wenn ich Zeit hätte, _____ ich mehr reisen.", ("werde", "würde", "will"), "B"),
    _q(21, "Das ist der Mann, _____ Auto gestohlen wurde.", ("dessen", "deren", "dem"), "A"),
    _q(22, "Obwohl es regnet, _____ wir spazieren.", ("gehen", "gingen", "gegangen"), "A"),
    _q(23, "Er tut so, _____ er alles wüsste.", ("als ob", "dass", "wenn"), "A"),
    _q(24, "Das Buch, _____ ich dir empfohlen habe, ist sehr interessant.", ("das", "den", "dem"), "A"),
    _q(25, "_____ des schlechten Wetters sind wir gegangen.", ("Wegen", "Trotz", "Während"), "B"),
    _q(26, "Sie arbeitet hart, _____ erfolgreich zu sein.", ("um", "damit", "dass"), "A"),
    _q(27, "Nachdem er _____ hatte, ging er schlafen.", ("gegessen", "essen", "isst"), "A"),
    _q(28, "Das Projekt _____ bis morgen fertig sein.", ("muss", "musste", "müsste"), "A"),
    _q(29, "Je mehr er lernt, _____ besser wird er.", ("desto", "als", "wie"), "A"),
    # B2
    _q(30, "Der Politiker, _____ Rede gestern gehalten wurde, ist sehr umstritten.", ("dessen", "deren", "dem"), "A"),
    _q(31, "Hätte ich das gewusst, _____ ich anders gehandelt.", ("wäre", "hätte", "würde"), "B"),
    _q(32, "Das Unternehmen sieht sich _____ Kritik ausgesetzt.", ("schwerer", "schwere", "schwerer"), "A"),
    _q(33, "_____ allem Anschein nach wird es regnen.", ("Aller", "Allem", "Allen"), "B"),
    _q(34, "Die Angelegenheit _____ einer gründlichen Untersuchung.", ("bedarf", "braucht", "benötigt"), "A"),
    _q(35, "_____ seiner Bemühungen konnte er das Ziel nicht erreichen.", ("Trotz", "Ungeachtet", "Außer"), "B"),
    _q(36, "Das lässt sich _____ anders lösen.", ("kaum", "kein", "nicht"), "A"),
    _q(37, "Die Verhandlungen _____ sich über Wochen hin.", ("zogen", "zog", "gezogen"), "A"),
    _q(38, "_____ des Protestes wurde das Gesetz verabschiedet.", ("Trotz", "Außer", "Ungeachtet"), "C"),
    _q(39, "Der Sachverhalt _____ einer eingehenden Prüfung.", ("unterzieht", "unterziehen", "unterzogen"), "A"),
)

_default_bank = QuestionBank(QUESTIONS, complete=True)


def get_question_bank() -> QuestionBank:
    return _default_bank
