"""Schémas Pays / Country schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CountryBase(BaseModel):
    name: str = Field(max_length=100)


class CountryCreate(CountryBase):
    pass


class CountryUpdate(CountryBase):
    """Remplacement complet, identifiant inclus / Full replacement, id included."""
    id: int


class CountryRead(CountryBase):
    model_config = ConfigDict(from_attributes=True)
    id: int


class CompanyStatistics(BaseModel):
    """Nombre de contacts par société / Contact count per company."""
    model_config = ConfigDict(from_attributes=True)
    company_name: str
    contact_count: int
