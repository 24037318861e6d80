# File: onboard/schemas/path.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class ChecklistItem(BaseModel):
    title: str
    description: str


class PathRead(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    checklist: list[ChecklistItem]


class ChecklistItemProgress(ChecklistItem):
    index: int
    completed: bool = False
    completed_at: Optional[datetime] = None


class ChecklistProgressUpdate(BaseModel):
    completed: bool = True
