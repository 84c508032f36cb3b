"""
Service Contacts / Contact service.
CRUD des contacts, liste enrichie (société + pays) et filtre pays/société.
"""

import logging

from sqlalchemy.orm import joinedload

from companies_info.models.contact import Contact
from companies_info.persistence import DataContext, in_id_range
from companies_info.schemas.contact import (
    ContactCreate,
    ContactDetail,
    ContactRead,
    ContactSummary,
    ContactUpdate,
)

logger = logging.getLogger(__name__)


class ContactService:
    """CRUD et lectures des contacts / Contact CRUD and reads."""

    def __init__(self, context: DataContext):
        self.context = context

    def _summary_query(self):
        return self.context.contacts.query().with_only_columns(Contact.id, Contact.name)

    def _detail_query(self):
        return self.context.contacts.query().options(
            joinedload(Contact.company),
            joinedload(Contact.country),
        )

    async def list_contacts(self) -> list[ContactSummary]:
        """Lister les contacts (id + nom) / List contacts (id + name)."""
        result = await self.context.execute(self._summary_query().order_by(Contact.id))
        return [ContactSummary.model_validate(row) for row in result.all()]

    async def get_contact(self, contact_id: int) -> ContactSummary | None:
        if not in_id_range(contact_id):
            return None
        result = await self.context.execute(self._summary_query().where(Contact.id == contact_id))
        row = result.first()
        return ContactSummary.model_validate(row) if row is not None else None

    async def create_contact(self, data: ContactCreate) -> ContactRead:
        contact = Contact(**data.model_dump())
        self.context.contacts.add(contact)
        await self.context.save()
        logger.info("Contact %s created", contact.id)
        return ContactRead.model_validate(contact)

    async def update_contact(self, data: ContactUpdate) -> bool:
        self.context.contacts.update(data.id, data.model_dump(exclude={"id"}))
        return await self.context.save() > 0

    async def delete_contact(self, contact_id: int) -> bool:
        contact = await self.context.contacts.find(contact_id)
        if contact is None:
            return False
        self.context.contacts.remove(contact)
        deleted = await self.context.save() > 0
        if deleted:
            logger.info("Contact %s deleted", contact_id)
        return deleted

    async def list_contacts_with_company_and_country(self) -> list[ContactDetail]:
        """Contacts avec société et pays / Contacts with company and country populated."""
        result = await self.context.execute(self._detail_query().order_by(Contact.id))
        return [ContactDetail.model_validate(contact) for contact in result.scalars().all()]

    async def filter_contacts(self, country_id: int, company_id: int) -> list[ContactDetail]:
        """Contacts d'un pays ET d'une société / Contacts matching both country and company.

        Liste vide si aucun résultat / Empty list when nothing matches.
        """
        if not (in_id_range(country_id) and in_id_range(company_id)):
            return []
        stmt = (
            self._detail_query()
            .where(Contact.country_id == country_id, Contact.company_id == company_id)
            .order_by(Contact.id)
        )
        result = await self.context.execute(stmt)
        return [ContactDetail.model_validate(contact) for contact in result.scalars().all()]
