"""
Dépendances des services / Service dependencies.
Chaque requête construit son propre DataContext sur sa session DB.
Each request builds its own DataContext on its own DB session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from companies_info.database import get_db
from companies_info.persistence import DataContext
from companies_info.services.company_service import CompanyService
from companies_info.services.contact_service import ContactService
from companies_info.services.country_service import CountryService


def get_context(db: AsyncSession = Depends(get_db)) -> DataContext:
    return DataContext(db)


def get_company_service(context: DataContext = Depends(get_context)) -> CompanyService:
    return CompanyService(context)


def get_country_service(context: DataContext = Depends(get_context)) -> CountryService:
    return CountryService(context)


def get_contact_service(context: DataContext = Depends(get_context)) -> ContactService:
    return ContactService(context)
