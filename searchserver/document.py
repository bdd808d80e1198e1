"""Search results and the lifecycle states of indexed documents."""

from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    """State of a document in the index."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


@dataclass
class Document:
    """A single search hit: document id, relevance score and average rating."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )