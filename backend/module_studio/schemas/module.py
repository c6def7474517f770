from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ModuleContent(BaseModel):
    """Display text for one language"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: Optional[str] = None
    input_placeholder: Optional[str] = Field(None, alias="inputPlaceholder")


class ModuleData(BaseModel):
    """Content fields supplied on create and update"""
    prompt: str
    en: ModuleContent
    kn: ModuleContent


class ModuleCreate(ModuleData):
    pass


class Module(ModuleData):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    def to_wire(self) -> dict:
        """Serialize to the JSON shape sent over HTTP"""
        return self.model_dump(mode="json", by_alias=True)


class ModuleContentPayload(BaseModel):
    """Lenient request body part; required fields are checked by the validators"""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    input_placeholder: Optional[str] = Field(None, alias="inputPlaceholder")


class ModulePayload(BaseModel):
    """Request body for POST and PUT"""
    prompt: Optional[str] = None
    en: Optional[ModuleContentPayload] = None
    kn: Optional[ModuleContentPayload] = None
