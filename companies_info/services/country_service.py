"""
Service Pays / Country service.
CRUD des pays et statistiques des sociétés par pays.
"""

import logging

from sqlalchemy import func, select

from companies_info.models.company import Company
from companies_info.models.contact import Contact
from companies_info.models.country import Country
from companies_info.persistence import DataContext, in_id_range
from companies_info.schemas.country import CompanyStatistics, CountryCreate, CountryRead, CountryUpdate

logger = logging.getLogger(__name__)


class CountryService:
    """CRUD des pays / Country CRUD."""

    def __init__(self, context: DataContext):
        self.context = context

    async def list_countries(self) -> list[CountryRead]:
        result = await self.context.execute(self.context.countries.query().order_by(Country.id))
        return [CountryRead.model_validate(country) for country in result.scalars().all()]

    async def get_country(self, country_id: int) -> CountryRead | None:
        country = await self.context.countries.find(country_id)
        if country is None:
            return None
        return CountryRead.model_validate(country)

    async def create_country(self, data: CountryCreate) -> CountryRead:
        country = Country(**data.model_dump())
        self.context.countries.add(country)
        await self.context.save()
        logger.info("Country %s created", country.id)
        return CountryRead.model_validate(country)

    async def update_country(self, data: CountryUpdate) -> bool:
        self.context.countries.update(data.id, data.model_dump(exclude={"id"}))
        return await self.context.save() > 0

    async def delete_country(self, country_id: int) -> bool:
        """Supprimer un pays / Delete a country.

        La base supprime en cascade ses sociétés et tous les contacts liés.
        The store cascades to its companies and every related contact.
        """
        country = await self.context.countries.find(country_id)
        if country is None:
            return False
        self.context.countries.remove(country)
        deleted = await self.context.save() > 0
        if deleted:
            logger.info("Country %s deleted", country_id)
        return deleted

    async def get_company_statistics(self, country_id: int) -> list[CompanyStatistics]:
        """Nombre de contacts par société d'un pays / Contact count per company of a country.

        Groupement depuis Company avec LEFT OUTER JOIN vers Contact : les
        sociétés sans contact apparaissent avec 0.
        Grouped from Company with a LEFT OUTER JOIN to Contact so companies
        without contacts still show up with a count of 0.
        """
        if not in_id_range(country_id):
            return []
        stmt = (
            select(
                Company.name.label("company_name"),
                func.count(Contact.id).label("contact_count"),
            )
            .select_from(Company)
            .outerjoin(Contact, Contact.company_id == Company.id)
            .where(Company.country_id == country_id)
            .group_by(Company.id, Company.name)
            .order_by(Company.id)
        )
        result = await self.context.execute(stmt)
        return [CompanyStatistics.model_validate(row) for row in result.all()]
