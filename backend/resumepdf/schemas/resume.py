from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from resumepdf.models.resume import load_sections


class ResumeBase(BaseModel):
    name: str
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    sections: Optional[List[Any]] = None


class ResumeCreate(ResumeBase):
    username: str


class ResumeUpdate(ResumeBase):
    pass


class Resume(ResumeBase):
    id: int
    username: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("sections", mode="before")
    @classmethod
    def parse_sections(cls, value: Any) -> Any:
        # Rows carry the serialized blob
        if value is None or isinstance(value, str):
            return load_sections(value)
        return value


class ResumeCreated(BaseModel):
    id: int
    message: str
    created_at: datetime


class ResumeUpdated(BaseModel):
    message: str
    updated_at: datetime


class DeleteAllRequest(BaseModel):
    username: str


class Message(BaseModel):
    message: str


class DeletedAll(Message):
    deleted: int
