"""Reading the quiz question bank and drawing questions from it."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from os import PathLike
from typing import Sequence

ANSWERS_PER_QUESTION = 4
NO_PICTURE = "N/A"

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Question:
    """A multiple-choice question with four answers."""

    description: str
    answers: tuple[str, ...]
    answer: str
    picture: bool = False
    picture_link: str = NO_PICTURE


class _Reader:
    """Cursor over the bank text that mimics stream extraction."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def integer(self) -> int:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1
        match = _INTEGER.match(self.text, self.pos)
        if match is None:
            raise ValueError(f"expected an integer at offset {self.pos}")
        self.pos = match.end()
        return int(match.group())

    def flag(self) -> bool:
        value = self.integer()
        if value not in (0, 1):
            raise ValueError(f"expected 0 or 1 for the picture flag, got {value}")
        return bool(value)

    def skip(self) -> None:
        if self.pos < len(self.text):
            self.pos += 1

    def field(self, delimiter: str = ",") -> str:
        end = self.text.find(delimiter, self.pos)
        if end == -1:
            raise ValueError(f"missing {delimiter!r} after offset {self.pos}")
        value = self.text[self.pos:end]
        self.pos = end + len(delimiter)
        return value


def parse_question_bank(text: str) -> list[Question]:
    """Parse the question bank format.

    The text starts with the number of questions; each question is
    ``picture,[link,]description,a1,a2,a3,a4,index`` where ``index``
    picks the correct answer (counting from 0).
    """
    reader = _Reader(text)
    total = reader.integer()
    bank: list[Question] = []
    for _ in range(total):
        picture = reader.flag()
        reader.skip()
        link = reader.field() if picture else NO_PICTURE
        description = reader.field()
        answers = tuple(reader.field() for _ in range(ANSWERS_PER_QUESTION))
        index = reader.integer()
        if not 0 <= index < ANSWERS_PER_QUESTION:
            raise ValueError(f"answer index {index} out of range in question {description!r}")
        bank.append(Question(description, answers, answers[index], picture, link))
    return bank


def read_question_bank(path: str | PathLike[str]) -> list[Question]:
    """Read and parse a question bank file."""
    with open(path, encoding="utf-8") as handle:
        return parse_question_bank(handle.read())


def select_questions(
    bank: Sequence[Question], count: int, rng: random.Random | None = None
) -> list[Question]:
    """Draw ``count`` distinct questions at random; ``bank`` is left untouched."""
    if count > len(bank):
        raise ValueError(f"cannot draw {count} questions from a bank of {len(bank)}")
    rng = rng if rng is not None else random.Random()
    remaining = list(bank)
    return [remaining.pop(rng.randrange(len(remaining))) for _ in range(count)]