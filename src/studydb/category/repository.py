from typing import Iterable, List, Optional

from pymongo.database import Database

from studydb import db
from studydb.category.entity import Category, CategoryFilter
from studydb.errors import NotFoundError
from studydb.relation import CATEGORY_PRODUCTS, FLASHCARD_CATEGORIES, Relation


class CategoryRepository:
    """
    Repository for category data access.
    Encapsulates all queries for the categories collection and the
    category_products and flashcard_categories links.
    """

    collection_name = "categories"

    def __init__(self, database: Optional[Database] = None):
        self._database = database

    @property
    def database(self) -> Database:
        return self._database if self._database is not None else db.get_database()

    def find_by_id(self, category_id: str) -> Category:
        """Get a category by ID. Raises NotFoundError if it does not exist."""
        object_id = db.to_object_id(category_id)
        category = db.fetch_one(self.database[self.collection_name], {"_id": object_id}, Category)
        if category is None:
            raise NotFoundError(self.collection_name, category_id)
        return category

    def find_by_ids(self, category_ids: Iterable[str]) -> List[Category]:
        """Get every category whose ID is in category_ids."""
        object_ids = db.to_object_ids(category_ids)
        if not object_ids:
            return []
        return db.fetch_all(
            self.database[self.collection_name], {"_id": {"$in": object_ids}}, Category
        )

    def find_by_product(self, product_id: str) -> List[Category]:
        """Get the categories a product contains."""
        return self.find_by_products([product_id])

    def find_by_products(self, product_ids: Iterable[str]) -> List[Category]:
        """Get the categories contained in any of the products, each once."""
        return self._find_related(CATEGORY_PRODUCTS, product_ids)

    def find_by_flashcard(self, flashcard_id: str) -> List[Category]:
        """Get the categories a flashcard belongs to."""
        return self.find_by_flashcards([flashcard_id])

    def find_by_flashcards(self, flashcard_ids: Iterable[str]) -> List[Category]:
        """Get the categories any of the flashcards belong to, each once."""
        return self._find_related(FLASHCARD_CATEGORIES.reversed(), flashcard_ids)

    def find_with_filters(self, filter: CategoryFilter) -> List[Category]:
        """
        List categories matching every constraint set on the filter.
        A product constraint is always applied, even when the product has no categories.
        """
        database = self.database
        query = {}

        if filter.type is not None:
            query["type"] = filter.type

        if filter.parent_id is not None:
            query["parent_id"] = filter.parent_id

        if filter.enabled is not None:
            query["enabled"] = filter.enabled

        if filter.product_id is not None:
            query["_id"] = {"$in": CATEGORY_PRODUCTS.resolve(database, filter.product_id)}

        return db.fetch_all(database[self.collection_name], query, Category)

    def _find_related(self, relation: Relation, related_ids: Iterable[str]) -> List[Category]:
        database = self.database
        category_ids = relation.resolve(database, related_ids)
        if not category_ids:
            return []
        return db.fetch_all(
            database[self.collection_name], {"_id": {"$in": category_ids}}, Category
        )
