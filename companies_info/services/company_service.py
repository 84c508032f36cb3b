"""
Service Sociétés / Company service.
Lecture et écriture des sociétés via le contexte de persistance.
"""

import logging

from companies_info.models.company import Company
from companies_info.persistence import DataContext
from companies_info.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate

logger = logging.getLogger(__name__)


class CompanyService:
    """CRUD des sociétés / Company CRUD."""

    def __init__(self, context: DataContext):
        self.context = context

    async def list_companies(self) -> list[CompanyRead]:
        """Lister les sociétés par ordre d'insertion / List companies in insertion order."""
        result = await self.context.execute(self.context.companies.query().order_by(Company.id))
        return [CompanyRead.model_validate(company) for company in result.scalars().all()]

    async def get_company(self, company_id: int) -> CompanyRead | None:
        company = await self.context.companies.find(company_id)
        if company is None:
            return None
        return CompanyRead.model_validate(company)

    async def create_company(self, data: CompanyCreate) -> CompanyRead:
        company = Company(**data.model_dump())
        self.context.companies.add(company)
        await self.context.save()
        logger.info("Company %s created", company.id)
        return CompanyRead.model_validate(company)

    async def update_company(self, data: CompanyUpdate) -> bool:
        """Remplacer une société / Replace a company. False si absente / False if absent."""
        self.context.companies.update(data.id, data.model_dump(exclude={"id"}))
        return await self.context.save() > 0

    async def delete_company(self, company_id: int) -> bool:
        """Supprimer une société et ses contacts / Delete a company and its contacts."""
        company = await self.context.companies.find(company_id)
        if company is None:
            return False
        self.context.companies.remove(company)
        deleted = await self.context.save() > 0
        if deleted:
            logger.info("Company %s deleted", company_id)
        return deleted
