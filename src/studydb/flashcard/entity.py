from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class FlashcardImage:
    url: str
    caption: Optional[str] = None

    @classmethod
    def from_document(cls, document: dict) -> "FlashcardImage":
        return cls(url=document.get("url", ""), caption=document.get("caption"))


@dataclass
class Flashcard:
    id: str
    language: str
    front: str
    back: str
    difficulty: str
    hint: Optional[str] = None
    images: List[FlashcardImage] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    enabled: bool = False
    verified: bool = False
    created_by: str = ""
    verified_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, document: dict) -> "Flashcard":
        """Build a Flashcard from a `flashcards` document."""
        return cls(
            id=str(document["_id"]),
            language=document.get("language", ""),
            front=document.get("front", ""),
            back=document.get("back", ""),
            difficulty=document.get("difficulty", ""),
            hint=document.get("hint"),
            images=[FlashcardImage.from_document(i) for i in document.get("images") or []],
            tags=list(document.get("tags") or []),
            enabled=bool(document.get("enabled", False)),
            verified=bool(document.get("verified", False)),
            created_by=document.get("created_by", ""),
            verified_by=document.get("verified_by"),
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )


@dataclass
class FlashcardFilter:
    """Optional constraints for listing flashcards. None means unconstrained."""

    category_id: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    verified: Optional[bool] = None
    enabled: Optional[bool] = None
    tags: Optional[List[str]] = None
