from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    price: int = Field(ge=0)  # whole currency units, as stored in the catalogue file
    title: str
    description: str = ""


class Button(BaseModel):
    text: str
    callback_data: str  # Address.to_text() of the target node


class Keyboard(BaseModel):
    rows: List[List[Button]] = Field(default_factory=list)


class Reply(BaseModel):
    text: str
    keyboard: Optional[Keyboard] = None
    meta: Dict[str, Any] = Field(default_factory=dict)


class Candidate(BaseModel):
    kind: Literal["item", "group"]
    address: str
    display: str
    score: float
