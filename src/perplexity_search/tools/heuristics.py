"""Cheap local checks for answers that deserve a more capable model."""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from perplexity_search.utils.config import Settings


class AnswerHeuristic(BaseModel):
    """Flags answers that look like the model did not really answer.

    An answer is weak when any signal holds: it is shorter than
    ``min_length``, it has no line break (when ``require_line_break``), or it
    contains one of ``weak_phrases``.
    """

    min_length: int = Field(default=200, ge=0)
    require_line_break: bool = True
    weak_phrases: tuple[str, ...] = ("I apologize", "I'm not sure")

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AnswerHeuristic":
        return cls(
            min_length=settings.weak_answer_min_length,
            require_line_break=settings.weak_answer_require_line_break,
            weak_phrases=tuple(settings.weak_answer_phrases),
        )

    def weak_signals(self, answer: str) -> list[str]:
        """Return the names of every weak-answer signal present in ``answer``."""
        signals: list[str] = []
        if len(answer) < self.min_length:
            signals.append("too_short")
        if self.require_line_break and "\n" not in answer:
            signals.append("no_line_break")
        signals.extend(f"phrase:{phrase}" for phrase in self.weak_phrases if phrase in answer)
        return signals

    def is_weak(self, answer: str) -> bool:
        return bool(self.weak_signals(answer))
