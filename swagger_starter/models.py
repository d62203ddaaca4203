"""
Swagger Starter Data Models

Pydantic models for the provider API. Field aliases keep the camelCase wire
names the app accelerator expects (groupId, artifactId).
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Scope(str, Enum):
    PROVIDED = "PROVIDED"
    RUNTIME = "RUNTIME"


class Dependency(BaseModel):
    """A build dependency contributed by this technology."""
    model_config = ConfigDict(populate_by_name=True)

    group_id: str = Field(..., alias="groupId")
    artifact_id: str = Field(..., alias="artifactId")
    version: str
    scope: Scope


class Provider(BaseModel):
    description: str
    dependencies: List[Dependency] = Field(default_factory=list)

    def by_scope(self, scope: Scope) -> List[Dependency]:
        return [d for d in self.dependencies if d.scope == scope]


class Tag(BaseModel):
    """One element of server.xml, e.g. featureManager containing feature tags."""
    name: str
    value: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)


Tag.model_rebuild()


class ServerConfig(BaseModel):
    tags: List[Tag] = Field(default_factory=list)


class Sample(BaseModel):
    base: str = ""
    locations: List[str] = Field(default_factory=list)
