"""Routes Contacts / Contact API routes."""

from fastapi import APIRouter, Depends, HTTPException, Response

from companies_info.api.deps import get_contact_service
from companies_info.schemas.contact import (
    ContactCreate,
    ContactDetail,
    ContactRead,
    ContactSummary,
    ContactUpdate,
)
from companies_info.services.contact_service import ContactService

router = APIRouter()


@router.get("", response_model=list[ContactSummary])
async def list_contacts(service: ContactService = Depends(get_contact_service)):
    """Lister tous les contacts / List all contacts."""
    return await service.list_contacts()


# Declaree avant /{contact_id} / Declared before /{contact_id}
@router.get("/contacts-with-company-and-country", response_model=list[ContactDetail])
async def list_contacts_with_company_and_country(service: ContactService = Depends(get_contact_service)):
    """Contacts avec société et pays / Contacts with company and country."""
    return await service.list_contacts_with_company_and_country()


@router.get("/{country_id}/{company_id}/filter-contacts", response_model=list[ContactDetail])
async def filter_contacts(
    country_id: int,
    company_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """Filtrer par pays et société / Filter by country and company."""
    contacts = await service.filter_contacts(country_id, company_id)
    if not contacts:
        raise HTTPException(status_code=404, detail="No contacts found for this country and company")
    return contacts


@router.get("/{contact_id}", response_model=ContactSummary)
async def get_contact(contact_id: int, service: ContactService = Depends(get_contact_service)):
    """Obtenir un contact par ID / Get contact by ID."""
    contact = await service.get_contact(contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.post("", response_model=ContactRead, status_code=201)
async def create_contact(
    data: ContactCreate,
    response: Response,
    service: ContactService = Depends(get_contact_service),
):
    """Créer un contact / Create a contact."""
    contact = await service.create_contact(data)
    response.headers["Location"] = f"/contacts/{contact.id}"
    return contact


@router.put("/{contact_id}", status_code=204)
async def update_contact(
    contact_id: int,
    data: ContactUpdate,
    service: ContactService = Depends(get_contact_service),
):
    """Modifier un contact / Update a contact."""
    if contact_id != data.id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")
    if not await service.update_contact(data):
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=204)


@router.delete("/{contact_id}", status_code=204)
async def delete_contact(contact_id: int, service: ContactService = Depends(get_contact_service)):
    """Supprimer un contact / Delete a contact."""
    if not await service.delete_contact(contact_id):
        raise HTTPException(status_code=404, detail="Contact not found")
    return Response(status_code=204)
