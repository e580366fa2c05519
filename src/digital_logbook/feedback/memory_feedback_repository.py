from __future__ import annotations

from typing import Sequence

from ..core.exceptions import DatabaseUnavailable
from .model import Feedback
from .repository import FeedbackRepository


class InMemoryFeedbackRepository(FeedbackRepository):
    def create(self, **kwargs) -> int:
        raise DatabaseUnavailable("submitting feedback is not available in mock data mode")

    def list_all(self) -> Sequence[Feedback]:
        return []
