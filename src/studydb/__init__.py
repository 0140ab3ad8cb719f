"""
studydb

Read-only access to flashcards, categories and products stored in MongoDB.
"""

from studydb.category import Category, CategoryFilter, CategoryRepository
from studydb.client import Client
from studydb.config import Config
from studydb.errors import InvalidIdError, NotFoundError
from studydb.flashcard import Flashcard, FlashcardFilter, FlashcardImage, FlashcardRepository
from studydb.product import Product, ProductFilter, ProductMetadata, ProductRepository

__all__ = [
    "Category",
    "CategoryFilter",
    "CategoryRepository",
    "Client",
    "Config",
    "Flashcard",
    "FlashcardFilter",
    "FlashcardImage",
    "FlashcardRepository",
    "InvalidIdError",
    "NotFoundError",
    "Product",
    "ProductFilter",
    "ProductMetadata",
    "ProductRepository",
]
