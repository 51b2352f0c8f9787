# backend/schemas/villages.py
from typing import Dict, List, NewType, Optional

from pydantic import Field, constr

from schemas.base import CamelModel, ORMModel

VillageName = NewType("VillageName", constr(strip_whitespace=True, min_length=1, max_length=255))


class VillageOut(ORMModel):
    id: str
    name: str
    district: str


class VillageFull(VillageOut):
    description: Optional[str] = None
    population: Optional[int] = None
    area: Optional[str] = None
    order: int = 0
    is_active: bool = True


class VillageCreate(CamelModel):
    name: VillageName
    district: VillageName
    description: Optional[str] = None
    population: Optional[int] = Field(default=None, ge=0)
    area: Optional[str] = None
    is_active: bool = True
    order: int = 0


class VillageUpdate(CamelModel):
    name: Optional[VillageName] = None
    district: Optional[VillageName] = None
    description: Optional[str] = None
    population: Optional[int] = Field(default=None, ge=0)
    area: Optional[str] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None


class VillageLookup(CamelModel):
    villages: List[VillageOut]
    grouped: Dict[str, List[VillageOut]]


class AdminVillageList(CamelModel):
    villages: List[VillageFull]
    districts: List[str]
