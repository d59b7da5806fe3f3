from pydantic import BaseModel, Field
from typing import List

class RouteAlias(BaseModel):
    method: str = Field(description="HTTP method, upper case")
    path: str = Field(description="Path relative to the route prefix")

class HealthResponse(BaseModel):
    status: str
    service: str

class ServiceInfo(BaseModel):
    service: str
    version: str
    base_address: str
    endpoints: List[str] = Field(default_factory=list, description="Public routes as 'METHOD /path'")
