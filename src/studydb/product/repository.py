from typing import Iterable, List, Optional

from pymongo.database import Database

from studydb import db
from studydb.errors import NotFoundError
from studydb.product.entity import Product, ProductFilter
from studydb.relation import CATEGORY_PRODUCTS

PRODUCTS_BY_CATEGORY = CATEGORY_PRODUCTS.reversed()


class ProductRepository:
    """
    Repository for product data access.
    Encapsulates all queries for the products collection and its category_products links.
    """

    collection_name = "products"

    def __init__(self, database: Optional[Database] = None):
        self._database = database

    @property
    def database(self) -> Database:
        return self._database if self._database is not None else db.get_database()

    def find_by_id(self, product_id: str) -> Product:
        """Get a product by ID. Raises NotFoundError if it does not exist."""
        object_id = db.to_object_id(product_id)
        product = db.fetch_one(self.database[self.collection_name], {"_id": object_id}, Product)
        if product is None:
            raise NotFoundError(self.collection_name, product_id)
        return product

    def find_by_ids(self, product_ids: Iterable[str]) -> List[Product]:
        """Get every product whose ID is in product_ids."""
        object_ids = db.to_object_ids(product_ids)
        if not object_ids:
            return []
        return db.fetch_all(
            self.database[self.collection_name], {"_id": {"$in": object_ids}}, Product
        )

    def find_by_category(self, category_id: str) -> List[Product]:
        """Get the products that bundle a category."""
        return self.find_by_categories([category_id])

    def find_by_categories(self, category_ids: Iterable[str]) -> List[Product]:
        """Get the products bundling any of the categories, each once."""
        database = self.database
        product_ids = PRODUCTS_BY_CATEGORY.resolve(database, category_ids)
        if not product_ids:
            return []
        return db.fetch_all(
            database[self.collection_name], {"_id": {"$in": product_ids}}, Product
        )

    def find_with_filters(self, filter: ProductFilter) -> List[Product]:
        """List products matching every constraint set on the filter."""
        database = self.database
        query = {}

        if filter.type is not None:
            query["metadata.type"] = filter.type

        if filter.language is not None:
            query["metadata.languages"] = filter.language

        if filter.area_ids:
            query["area_ids"] = {"$in": list(filter.area_ids)}

        if filter.enabled is not None:
            query["enabled"] = filter.enabled

        if filter.category_id is not None:
            query["_id"] = {"$in": PRODUCTS_BY_CATEGORY.resolve(database, filter.category_id)}

        return db.fetch_all(database[self.collection_name], query, Product)
