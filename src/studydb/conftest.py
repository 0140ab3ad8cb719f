# src/studydb/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides fixtures available to all tests in the package.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["STUDYDB_ENV"] = "test"

from datetime import datetime

import mongomock
import pytest
from bson import ObjectId

from studydb import db

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def mongo_db():
    """
    Provide an empty in-memory database for each test.

    The db module is pointed at it, so repositories created without an
    explicit database read from it too.
    """
    database = mongomock.MongoClient().get_database("study_test")
    db.set_database_override(database)

    yield database

    db.clear_database_override()


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def flashcard_repo(mongo_db):
    """Provide a FlashcardRepository instance."""
    from studydb.flashcard import FlashcardRepository

    return FlashcardRepository()


@pytest.fixture
def category_repo(mongo_db):
    """Provide a CategoryRepository instance."""
    from studydb.category import CategoryRepository

    return CategoryRepository()


@pytest.fixture
def product_repo(mongo_db):
    """Provide a ProductRepository instance."""
    from studydb.product import ProductRepository

    return ProductRepository()


# =============================================================================
# Seed Data Fixtures
# =============================================================================

CREATED_AT = datetime(2024, 1, 1, 9, 30)
UPDATED_AT = datetime(2024, 2, 1, 12, 0)


def make_flashcard(**overrides) -> dict:
    """Helper to build a flashcards document with sensible defaults."""
    document = {
        "_id": ObjectId(),
        "language": "en",
        "front": "What is 2 + 2?",
        "back": "4",
        "difficulty": "easy",
        "tags": [],
        "enabled": True,
        "verified": False,
        "created_by": "author-1",
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    document.update(overrides)
    return document


def make_category(**overrides) -> dict:
    """Helper to build a categories document with sensible defaults."""
    document = {
        "_id": ObjectId(),
        "name": "Arithmetic",
        "description": "Basic arithmetic",
        "type": "topic",
        "total_questions": 0,
        "enabled": True,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    document.update(overrides)
    return document


def make_product(**overrides) -> dict:
    """Helper to build a products document with sensible defaults."""
    document = {
        "_id": ObjectId(),
        "name": "Math Pack",
        "description": "Everything math",
        "area_ids": [1],
        "metadata": {
            "type": "exam",
            "total_questions": 0,
            "total_categories": 0,
            "languages": ["en"],
        },
        "enabled": True,
        "created_at": CREATED_AT,
        "updated_at": UPDATED_AT,
    }
    document.update(overrides)
    return document


@pytest.fixture
def sample_flashcards(mongo_db) -> list[dict]:
    """
    Seed three flashcards with distinct tags, languages and difficulties.

    f1: en/easy, tags [x], verified
    f2: en/hard, tags [y, z]
    f3: es/easy, tags [z], disabled
    """
    flashcards = [
        make_flashcard(front="f1", tags=["x"], verified=True, verified_by="reviewer-1"),
        make_flashcard(front="f2", difficulty="hard", tags=["y", "z"], hint="think"),
        make_flashcard(front="f3", language="es", tags=["z"], enabled=False),
    ]
    mongo_db["flashcards"].insert_many(flashcards)
    return flashcards


@pytest.fixture
def sample_categories(mongo_db) -> list[dict]:
    """Seed two categories: c1 a root topic, c2 a child of c1."""
    c1 = make_category(name="c1")
    c2 = make_category(name="c2", type="subtopic", parent_id=str(c1["_id"]), enabled=False)
    mongo_db["categories"].insert_many([c1, c2])
    return [c1, c2]


@pytest.fixture
def sample_products(mongo_db) -> list[dict]:
    """Seed two products: p1 (exam, en, area 1) and p2 (course, en+es, areas 2 and 3)."""
    p1 = make_product(name="p1")
    p2 = make_product(
        name="p2",
        area_ids=[2, 3],
        metadata={"type": "course", "total_questions": 10, "total_categories": 2,
                  "languages": ["en", "es"]},
        enabled=False,
    )
    mongo_db["products"].insert_many([p1, p2])
    return [p1, p2]


@pytest.fixture
def sample_graph(mongo_db, sample_flashcards, sample_categories, sample_products) -> dict:
    """
    Seed relation rows linking the sample entities.

    flashcard_categories: (f1,c1), (f2,c1), (f1,c2)
    category_products:    (c1,p1), (c1,p2), (c2,p2)

    Returns:
        dict of hex string ids keyed f1..f3, c1..c2, p1..p2
    """
    ids = {}
    for prefix, documents in (("f", sample_flashcards), ("c", sample_categories), ("p", sample_products)):
        for i, document in enumerate(documents, start=1):
            ids[f"{prefix}{i}"] = str(document["_id"])

    mongo_db["flashcard_categories"].insert_many([
        {"flashcard_id": ids["f1"], "category_id": ids["c1"]},
        {"flashcard_id": ids["f2"], "category_id": ids["c1"]},
        {"flashcard_id": ids["f1"], "category_id": ids["c2"]},
    ])
    mongo_db["category_products"].insert_many([
        {"category_id": ids["c1"], "product_id": ids["p1"]},
        {"category_id": ids["c1"], "product_id": ids["p2"]},
        {"category_id": ids["c2"], "product_id": ids["p2"]},
    ])
    return ids
