"""
Flashcard

This module provides read access to flashcards and their category links.
"""

from studydb.flashcard.entity import Flashcard, FlashcardFilter, FlashcardImage
from studydb.flashcard.repository import FlashcardRepository

__all__ = ["Flashcard", "FlashcardFilter", "FlashcardImage", "FlashcardRepository"]
