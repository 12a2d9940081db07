"""
Pydantic models for catalog entries.

Seed records may carry additional keys (descriptions, prices, ratings);
they are kept and returned unchanged.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict


class ServiceRead(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    name: str


class ProfessionalRead(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    name: str
    service_id: Union[int, str]
