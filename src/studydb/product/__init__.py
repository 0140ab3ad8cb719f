"""
Product

This module provides read access to products and the categories they bundle.
"""

from studydb.product.entity import Product, ProductFilter, ProductMetadata
from studydb.product.repository import ProductRepository

__all__ = ["Product", "ProductFilter", "ProductMetadata", "ProductRepository"]
