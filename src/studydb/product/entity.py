from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class ProductMetadata:
    type: str = ""
    total_questions: int = 0
    total_categories: int = 0
    languages: List[str] = field(default_factory=list)

    @classmethod
    def from_document(cls, document: dict) -> "ProductMetadata":
        return cls(
            type=document.get("type", ""),
            total_questions=int(document.get("total_questions") or 0),
            total_categories=int(document.get("total_categories") or 0),
            languages=list(document.get("languages") or []),
        )


@dataclass
class Product:
    id: str
    name: str
    description: str
    area_ids: List[int] = field(default_factory=list)
    metadata: ProductMetadata = field(default_factory=ProductMetadata)
    enabled: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, document: dict) -> "Product":
        return cls(
            id=str(document["_id"]),
            name=document.get("name", ""),
            description=document.get("description", ""),
            area_ids=[int(a) for a in document.get("area_ids") or []],
            metadata=ProductMetadata.from_document(document.get("metadata") or {}),
            enabled=bool(document.get("enabled", False)),
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )


@dataclass
class ProductFilter:
    """
    Optional constraints for listing products.

    language matches products whose metadata lists it; area_ids matches
    products in any of the given areas.
    """

    category_id: Optional[str] = None
    type: Optional[str] = None
    language: Optional[str] = None
    area_ids: Optional[List[int]] = None
    enabled: Optional[bool] = None
