"""Answer store for an interactive survey session."""
from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional, Sequence

from core.catalog import QUESTIONS, Question
from core.exceptions import InvalidPositionError
from core.types import AnswerSet, Response


class AnswerStore:
    """
    Mapping of question position to response.

    Entries are inserted or overwritten one at a time and only ever removed
    all together by ``reset``. The store does not know about session locking.
    """

    def __init__(
        self,
        catalog: Sequence[Question] = QUESTIONS,
        answers: Optional[Mapping[int, Any]] = None,
    ) -> None:
        self._catalog = catalog
        self._answers: AnswerSet = dict(answers or {})

    @property
    def catalog(self) -> Sequence[Question]:
        return self._catalog

    @property
    def catalog_length(self) -> int:
        return len(self._catalog)

    def set_answer(self, position: int, response: Response) -> None:
        """
        Record a response for a question.

        Raises:
            InvalidPositionError: If position is outside the catalog.
        """
        if not 0 <= position < self.catalog_length:
            raise InvalidPositionError(position, self.catalog_length)
        self._answers[position] = Response(response)

    def get(self, position: int) -> Optional[Any]:
        return self._answers.get(position)

    def reset(self) -> None:
        self._answers.clear()

    def is_complete(self) -> bool:
        return len(self._answers) == self.catalog_length

    def completion_fraction(self) -> float:
        return min(1.0, len(self._answers) / self.catalog_length)

    def as_dict(self) -> Dict[int, Any]:
        return dict(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __iter__(self) -> Iterator[int]:
        return iter(self._answers)

    def __contains__(self, position: object) -> bool:
        return position in self._answers

    def __repr__(self) -> str:
        return f"AnswerStore(answered={len(self)}, total={self.catalog_length})"
