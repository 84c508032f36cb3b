"""Schémas Contact / Contact schemas.

Deux formes de lecture distinctes / Two distinct read shapes:
ContactSummary (id + nom) pour les listes simples, ContactDetail avec
société et pays pour les requêtes enrichies.
"""

from pydantic import BaseModel, ConfigDict, Field

from companies_info.schemas.company import CompanyRead
from companies_info.schemas.country import CountryRead


class ContactBase(BaseModel):
    name: str = Field(max_length=100)
    company_id: int
    country_id: int


class ContactCreate(ContactBase):
    pass


class ContactUpdate(ContactBase):
    """Remplacement complet, identifiant inclus / Full replacement, id included."""
    id: int


class ContactSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str


class ContactRead(ContactBase):
    model_config = ConfigDict(from_attributes=True)
    id: int


class ContactDetail(ContactRead):
    company: CompanyRead | None = None
    country: CountryRead | None = None
