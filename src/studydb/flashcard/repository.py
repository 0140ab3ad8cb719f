from typing import Iterable, List, Optional

from pymongo.database import Database

from studydb import db
from studydb.errors import NotFoundError
from studydb.flashcard.entity import Flashcard, FlashcardFilter
from studydb.relation import FLASHCARD_CATEGORIES


class FlashcardRepository:
    """
    Repository for flashcard data access.
    Encapsulates all queries for the flashcards and flashcard_categories collections.
    """

    collection_name = "flashcards"

    def __init__(self, database: Optional[Database] = None):
        self._database = database

    @property
    def database(self) -> Database:
        return self._database if self._database is not None else db.get_database()

    def find_by_id(self, flashcard_id: str) -> Flashcard:
        """Get a flashcard by ID. Raises NotFoundError if it does not exist."""
        object_id = db.to_object_id(flashcard_id)
        flashcard = db.fetch_one(
            self.database[self.collection_name], {"_id": object_id}, Flashcard
        )
        if flashcard is None:
            raise NotFoundError(self.collection_name, flashcard_id)
        return flashcard

    def find_by_ids(self, flashcard_ids: Iterable[str]) -> List[Flashcard]:
        """Get every flashcard whose ID is in flashcard_ids."""
        object_ids = db.to_object_ids(flashcard_ids)
        if not object_ids:
            return []
        return self._find_in(self.database, object_ids)

    def find_by_category(self, category_id: str) -> List[Flashcard]:
        """Get the flashcards linked to a category."""
        return self.find_by_categories([category_id])

    def find_by_categories(self, category_ids: Iterable[str]) -> List[Flashcard]:
        """Get the flashcards linked to any of the categories, each once."""
        database = self.database
        flashcard_ids = FLASHCARD_CATEGORIES.resolve(database, category_ids)
        if not flashcard_ids:
            return []
        return self._find_in(database, flashcard_ids)

    def find_with_filters(self, filter: FlashcardFilter) -> List[Flashcard]:
        """
        List flashcards matching every constraint set on the filter.

        Tags match when a flashcard carries any of them. A category
        constraint is always applied, so a category with no flashcards
        yields an empty list.
        """
        database = self.database
        query = {}

        if filter.difficulty is not None:
            query["difficulty"] = filter.difficulty

        if filter.language is not None:
            query["language"] = filter.language

        if filter.verified is not None:
            query["verified"] = filter.verified

        if filter.enabled is not None:
            query["enabled"] = filter.enabled

        if filter.tags:
            query["tags"] = {"$in": list(filter.tags)}

        if filter.category_id is not None:
            flashcard_ids = FLASHCARD_CATEGORIES.resolve(database, filter.category_id)
            query["_id"] = {"$in": flashcard_ids}

        return db.fetch_all(database[self.collection_name], query, Flashcard)

    def _find_in(self, database: Database, object_ids: list) -> List[Flashcard]:
        return db.fetch_all(
            database[self.collection_name], {"_id": {"$in": object_ids}}, Flashcard
        )
