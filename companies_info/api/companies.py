"""Routes Sociétés / Company API routes."""

from fastapi import APIRouter, Depends, HTTPException, Response

from companies_info.api.deps import get_company_service
from companies_info.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from companies_info.services.company_service import CompanyService

router = APIRouter()


@router.get("", response_model=list[CompanyRead])
async def list_companies(service: CompanyService = Depends(get_company_service)):
    """Lister toutes les sociétés / List all companies."""
    return await service.list_companies()


@router.get("/{company_id}", response_model=CompanyRead)
async def get_company(company_id: int, service: CompanyService = Depends(get_company_service)):
    """Obtenir une société par ID / Get company by ID."""
    company = await service.get_company(company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.post("", response_model=CompanyRead, status_code=201)
async def create_company(
    data: CompanyCreate,
    response: Response,
    service: CompanyService = Depends(get_company_service),
):
    """Créer une société / Create a company."""
    company = await service.create_company(data)
    response.headers["Location"] = f"/companies/{company.id}"
    return company


@router.put("/{company_id}", status_code=204)
async def update_company(
    company_id: int,
    data: CompanyUpdate,
    service: CompanyService = Depends(get_company_service),
):
    """Modifier une société / Update a company."""
    if company_id != data.id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")
    if not await service.update_company(data):
        raise HTTPException(status_code=404, detail="Company not found")
    return Response(status_code=204)


@router.delete("/{company_id}", status_code=204)
async def delete_company(company_id: int, service: CompanyService = Depends(get_company_service)):
    """Supprimer une société et ses contacts / Delete a company and its contacts."""
    if not await service.delete_company(company_id):
        raise HTTPException(status_code=404, detail="Company not found")
    return Response(status_code=204)
