"""Schémas Société / Company schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CompanyBase(BaseModel):
    name: str = Field(max_length=100)
    country_id: int | None = None


class CompanyCreate(CompanyBase):
    pass


class CompanyUpdate(CompanyBase):
    """Remplacement complet, identifiant inclus / Full replacement, id included."""
    id: int


class CompanyRead(CompanyBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
