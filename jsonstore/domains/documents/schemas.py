from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    name: Optional[str] = Field(None, max_length=255)
    data: Any = None

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if v else v


class DocumentUpdate(BaseModel):
    """Схема для частичного обновления; пустые поля не меняются"""
    name: Optional[str] = Field(None, max_length=255)
    data: Any = None

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        return v.strip() if v else v


class DocumentResponse(BaseModel):
    """Схема документа в ответе"""
    id: str
    user_id: str
    name: str
    data: Any
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
