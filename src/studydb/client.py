"""
Client facade.

Owns the MongoDB connection and exposes the repository operations to
callers. Every method accepts an optional ``timeout`` in seconds that
bounds the store calls it makes.

Usage:
    with Client() as client:
        cards = client.get_flashcards_by_category("65a0c0ffee...")
"""

import logging
from typing import Iterable, List, Optional

from pymongo import MongoClient
from pymongo.database import Database

from studydb import db
from studydb.category import Category, CategoryFilter, CategoryRepository
from studydb.config import Config
from studydb.flashcard import Flashcard, FlashcardFilter, FlashcardRepository
from studydb.product import Product, ProductFilter, ProductRepository

logger = logging.getLogger(__name__)


class Client:
    def __init__(self, config: Optional[Config] = None):
        config = config or Config.from_env()
        self._mongo: Optional[MongoClient] = db.connect(config)
        self._bind(self._mongo[config.database_name])

    @classmethod
    def from_database(cls, database: Database) -> "Client":
        """Wrap an existing database handle. close() leaves its client open."""
        client = cls.__new__(cls)
        client._mongo = None
        client._bind(database)
        return client

    def _bind(self, database: Database) -> None:
        self.database = database
        self.flashcards = FlashcardRepository(database)
        self.categories = CategoryRepository(database)
        self.products = ProductRepository(database)

    def close(self) -> None:
        if self._mongo is not None:
            self._mongo.close()
            self._mongo = None
            logger.debug("Closed connection to %s", self.database.name)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # Flashcards

    def get_flashcard_by_id(self, flashcard_id: str, timeout: Optional[float] = None) -> Flashcard:
        with db.deadline(timeout):
            return self.flashcards.find_by_id(flashcard_id)

    def get_flashcards_by_ids(
        self, flashcard_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Flashcard]:
        with db.deadline(timeout):
            return self.flashcards.find_by_ids(flashcard_ids)

    def get_flashcards_by_category(
        self, category_id: str, timeout: Optional[float] = None
    ) -> List[Flashcard]:
        with db.deadline(timeout):
            return self.flashcards.find_by_category(category_id)

    def get_flashcards_by_categories(
        self, category_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Flashcard]:
        with db.deadline(timeout):
            return self.flashcards.find_by_categories(category_ids)

    def list_flashcards(
        self, filter: Optional[FlashcardFilter] = None, timeout: Optional[float] = None
    ) -> List[Flashcard]:
        with db.deadline(timeout):
            return self.flashcards.find_with_filters(filter or FlashcardFilter())

    # Categories

    def get_category_by_id(self, category_id: str, timeout: Optional[float] = None) -> Category:
        with db.deadline(timeout):
            return self.categories.find_by_id(category_id)

    def get_categories_by_ids(
        self, category_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Category]:
        with db.deadline(timeout):
            return self.categories.find_by_ids(category_ids)

    def get_categories_by_product(
        self, product_id: str, timeout: Optional[float] = None
    ) -> List[Category]:
        with db.deadline(timeout):
            return self.categories.find_by_product(product_id)

    def get_categories_by_products(
        self, product_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Category]:
        with db.deadline(timeout):
            return self.categories.find_by_products(product_ids)

    def get_categories_by_flashcard(
        self, flashcard_id: str, timeout: Optional[float] = None
    ) -> List[Category]:
        with db.deadline(timeout):
            return self.categories.find_by_flashcard(flashcard_id)

    def get_categories_by_flashcards(
        self, flashcard_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Category]:
        with db.deadline(timeout):
            return self.categories.find_by_flashcards(flashcard_ids)

    def list_categories(
        self, filter: Optional[CategoryFilter] = None, timeout: Optional[float] = None
    ) -> List[Category]:
        with db.deadline(timeout):
            return self.categories.find_with_filters(filter or CategoryFilter())

    # Products

    def get_product_by_id(self, product_id: str, timeout: Optional[float] = None) -> Product:
        with db.deadline(timeout):
            return self.products.find_by_id(product_id)

    def get_products_by_ids(
        self, product_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Product]:
        with db.deadline(timeout):
            return self.products.find_by_ids(product_ids)

    def get_products_by_category(
        self, category_id: str, timeout: Optional[float] = None
    ) -> List[Product]:
        with db.deadline(timeout):
            return self.products.find_by_category(category_id)

    def get_products_by_categories(
        self, category_ids: Iterable[str], timeout: Optional[float] = None
    ) -> List[Product]:
        with db.deadline(timeout):
            return self.products.find_by_categories(category_ids)

    def list_products(
        self, filter: Optional[ProductFilter] = None, timeout: Optional[float] = None
    ) -> List[Product]:
        with db.deadline(timeout):
            return self.products.find_with_filters(filter or ProductFilter())
