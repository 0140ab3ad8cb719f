"""
Category

This module provides read access to categories, resolved either directly
or through the products and flashcards they are linked to.
"""

from studydb.category.entity import Category, CategoryFilter
from studydb.category.repository import CategoryRepository

__all__ = ["Category", "CategoryFilter", "CategoryRepository"]
