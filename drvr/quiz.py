"""A quiz session over questions drawn from the bank, and its countdown timer."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from drvr.quizbank import ANSWERS_PER_QUESTION, Question, select_questions

QUIZ_LENGTH = 10
PROGRESS_STEP = 10
PROGRESS_MAXIMUM = 150
TIME_LIMIT_MINUTES = 1


class QuizSession:
    """Questions of one quiz, the one being shown and the answers given."""

    def __init__(
        self,
        bank: Sequence[Question],
        count: int = QUIZ_LENGTH,
        rng: random.Random | None = None,
    ) -> None:
        self.questions: list[Question] = select_questions(bank, count, rng)
        self.position = 1
        self.results: list[bool | None] = [None] * count
        self.selections: list[int | None] = [None] * count
        self.progress = 0

    @property
    def finished(self) -> bool:
        """True once the session has moved past the last question."""
        return self.position > len(self.questions)

    @property
    def current_question(self) -> Question | None:
        """The question being shown, or None past the last one."""
        if self.finished:
            return None
        return self.questions[self.position - 1]

    def next_question(self) -> Question | None:
        """Move to the next question; past the last one there is none."""
        if self.position <= len(self.questions):
            self.position += 1
        return self.current_question

    def jump_to(self, number: int) -> Question:
        """Show question ``number`` (counting from 1)."""
        if not 1 <= number <= len(self.questions):
            raise IndexError(f"question number {number} out of range")
        self.position = number
        return self.questions[number - 1]

    def select_answer(self, selection: int) -> bool:
        """Record answer ``selection`` (1 to 4) for the current question; True if correct."""
        question = self.current_question
        if question is None:
            raise LookupError("there is no question to answer")
        if not 1 <= selection <= ANSWERS_PER_QUESTION:
            raise ValueError(f"answer {selection} out of range")
        index = self.position - 1
        if self.results[index] is None:
            self.progress += PROGRESS_STEP
        self.selections[index] = selection
        correct = question.answer == question.answers[selection - 1]
        self.results[index] = correct
        return correct

    def reset(self) -> None:
        """Return to the first question with nothing answered."""
        self.position = 1
        self.results = [None] * len(self.questions)
        self.selections = [None] * len(self.questions)
        self.progress = 0


@dataclass
class QuizTimer:
    """Counts the quiz time up in seconds until the time limit is reached."""

    seconds: int = 0
    minutes: int = 0
    running: bool = True

    @property
    def display(self) -> str:
        """The time as minutes and two-digit seconds."""
        return f"{self.minutes}:{self.seconds:02d}"

    def tick(self) -> str:
        """Advance one second while running and return the display."""
        if not self.running:
            return self.display
        self.seconds += 1
        if self.seconds == 60:
            self.seconds = 0
            self.minutes += 1
        if self.minutes == TIME_LIMIT_MINUTES:
            self.running = False
        return self.display