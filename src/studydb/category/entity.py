from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Category:
    id: str
    name: str
    description: str
    type: str
    icon: Optional[str] = None
    color: Optional[str] = None
    # Not enforced: the parent may not exist
    parent_id: Optional[str] = None
    total_questions: int = 0
    enabled: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, document: dict) -> "Category":
        return cls(
            id=str(document["_id"]),
            name=document.get("name", ""),
            description=document.get("description", ""),
            type=document.get("type", ""),
            icon=document.get("icon"),
            color=document.get("color"),
            parent_id=document.get("parent_id"),
            total_questions=int(document.get("total_questions") or 0),
            enabled=bool(document.get("enabled", False)),
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )


@dataclass
class CategoryFilter:
    product_id: Optional[str] = None
    type: Optional[str] = None
    parent_id: Optional[str] = None
    enabled: Optional[bool] = None
