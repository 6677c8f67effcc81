"""Session and message payload models

The backend owns these schemas. Only the fields this client reads or
writes are declared; everything else passes through untouched.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """Session as returned by the backend"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    title: Optional[str] = None
    parent_id: Optional[str] = Field(default=None, alias="parentID")


class CreateSessionRequest(BaseModel):
    """Body for POST /session"""
    model_config = ConfigDict(populate_by_name=True)

    parent_id: Optional[str] = Field(default=None, alias="parentID")
    title: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Wire form, without unset fields"""
        return self.model_dump(by_alias=True, exclude_none=True)


class SendMessageRequest(BaseModel):
    """Body for POST /session/{id}/message"""
    model_config = ConfigDict(extra="allow")

    def to_payload(self) -> Dict[str, Any]:
        """Wire form"""
        return self.model_dump()


class Message(BaseModel):
    """Message as returned by the backend"""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None


class ProvidersResponse(BaseModel):
    """Available providers and their models"""
    model_config = ConfigDict(extra="allow")

    providers: List[Dict[str, Any]] = Field(default_factory=list)
