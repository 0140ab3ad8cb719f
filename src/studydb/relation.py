"""
Relations: many-to-many id resolution

A relation collection holds one document per association edge, e.g.
{"flashcard_id": "...", "category_id": "..."}. Ids in these rows are hex
strings written by an external process; nothing guarantees the rows are
unique or that the ids they name still exist.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Union

from bson import ObjectId
from pymongo.database import Database

from studydb import db

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relation:
    """One direction of a join collection: from_field ids -> to_field ids."""

    collection: str
    from_field: str
    to_field: str

    def reversed(self) -> "Relation":
        return Relation(self.collection, self.to_field, self.from_field)

    def resolve(self, database: Database, from_ids: Union[str, Iterable[str]]) -> list[ObjectId]:
        """
        Return the keys on the to_field side linked to any of from_ids.

        Duplicate edges collapse to one key. Ids that cannot be converted
        to an ObjectId are skipped, so a partially corrupt join collection
        still yields every valid key. Store errors propagate.
        """
        if isinstance(from_ids, str):
            from_ids = [from_ids]
        # None would match rows missing from_field entirely
        from_ids = list(dict.fromkeys(i for i in from_ids if isinstance(i, str)))
        if not from_ids:
            return []

        rows = database[self.collection].find(
            {self.from_field: {"$in": from_ids}},
            {self.to_field: 1, "_id": 0},
        )
        to_ids = set()
        dropped = 0
        for row in rows:
            to_id = row.get(self.to_field)
            if isinstance(to_id, str) and db.parse_object_id(to_id) is not None:
                to_ids.add(to_id)
            else:
                dropped += 1

        keys = [ObjectId(to_id) for to_id in to_ids]

        if dropped:
            logger.warning(
                "Skipped %d rows with malformed %s in %s", dropped, self.to_field, self.collection
            )
        logger.debug(
            "Resolved %d %s to %d %s via %s",
            len(from_ids), self.from_field, len(keys), self.to_field, self.collection,
        )
        return keys


FLASHCARD_CATEGORIES = Relation("flashcard_categories", "category_id", "flashcard_id")
CATEGORY_PRODUCTS = Relation("category_products", "product_id", "category_id")
