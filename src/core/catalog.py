"""Question catalog for A.A. Rean's motivation survey.

Positions are stable and 0-based. Share tokens address answers by position,
so reordering or editing questions changes the catalog fingerprint and
invalidates links created against the old catalog.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import List, Sequence, Tuple

SURVEY_TITLE = "A.A. Rean's Motivation Survey"
SURVEY_SUBTITLE = "Assess your dominant motivation type"

INSTRUCTIONS = (
    "Answer “yes” or “no” to each question without overthinking. "
    "Your first instinct is usually the most accurate:"
)
INSTRUCTION_NOTES: Tuple[str, ...] = (
    "“yes” can mean either “I agree” or “more yes than no”",
    "“no” can mean either “I disagree” or “more no than yes”",
)


@dataclass(slots=True, frozen=True)
class Question:
    """A single catalog item.

    ``polarity`` is True when a "yes" answer counts toward the score and
    False when a "no" answer does.
    """

    position: int
    text: str
    polarity: bool

    @property
    def number(self) -> int:
        """1-based number shown to respondents."""
        return self.position + 1

    def as_dict(self) -> dict:
        return {
            "position": self.position,
            "number": self.number,
            "text": self.text,
            "polarity": self.polarity,
        }


def _build(items: Sequence[Tuple[str, bool]]) -> Tuple[Question, ...]:
    return tuple(Question(position=i, text=text, polarity=pol) for i, (text, pol) in enumerate(items))


QUESTIONS: Tuple[Question, ...] = _build([
    ("I have an optimism for success when starting a task.", True),
    ("I’m active in my job.", True),
    ("I show initiative.", True),
    ("In fulfilling the responsible tasks, I try to find justifiable reasons for refusing to fulfill these tasks.", False),
    ("I often choose extremes: either too easy or too complicated tasks.", False),
    ("I never leave obstacles while facing difficult situations, but I’m looking for ways to overcome them.", True),
    ("When the success is mixed with failing, I tend to overestimate my own success.", False),
    ("The productivity of my actions, above all, depends on my own purpose, not on external control.", True),
    ("Fulfilling difficult-enough tasks in a limited time frame, my work results get worse.", False),
    ("Usually I’m persistent in achieving the set goal.", True),
    ("I usually plan my future quite a long way ahead.", True),
    ("If I have to take risks, I do it carefully, mindfully, not impulsively, with prudence.", True),
    ("I am not particularly persistent in achieving the goal, especially in the absence of external control.", False),
    ("Typically, I put myself on either an averagely complex or very complicated but achievable task, rather than setting myself unrealistically high goals.", True),
    ("If, in the course of any task, I fail, then this task for me loses its attraction.", False),
    ("When the success is mixed with failing, I tend to exaggerate my failures.", True),
    ("I usually plan my future for the near future.", False),
    ("Working under limited time conditions, the results of my work tend to improve, even if the task is quite complicated.", True),
    ("If I fail to complete a task, I don’t give up on my goal.", True),
    ("If I have chosen a task myself, in the event of a failure, its attractiveness increases even more.", True),
])

CATALOG_LENGTH = len(QUESTIONS)


def catalog_fingerprint(catalog: Sequence[Question] = QUESTIONS) -> str:
    """
    Short, stable hash of the catalog's order, polarities and texts.

    Embedded in share tokens so that a token produced against a different
    catalog is detected instead of being reinterpreted.
    """
    digest = hashlib.sha256()
    for question in catalog:
        digest.update(f"{question.position}|{int(question.polarity)}|{question.text}\n".encode("utf-8"))
    return digest.hexdigest()[:8]


def catalog_as_list(catalog: Sequence[Question] = QUESTIONS) -> List[dict]:
    return [question.as_dict() for question in catalog]


__all__ = [
    "Question",
    "QUESTIONS",
    "CATALOG_LENGTH",
    "SURVEY_TITLE",
    "SURVEY_SUBTITLE",
    "INSTRUCTIONS",
    "INSTRUCTION_NOTES",
    "catalog_fingerprint",
    "catalog_as_list",
]
