"""Routes Pays / Country API routes."""

from fastapi import APIRouter, Depends, HTTPException, Response

from companies_info.api.deps import get_country_service
from companies_info.schemas.country import CompanyStatistics, CountryCreate, CountryRead, CountryUpdate
from companies_info.services.country_service import CountryService

router = APIRouter()


@router.get("", response_model=list[CountryRead])
async def list_countries(service: CountryService = Depends(get_country_service)):
    """Lister tous les pays / List all countries."""
    return await service.list_countries()


@router.get("/{country_id}", response_model=CountryRead)
async def get_country(country_id: int, service: CountryService = Depends(get_country_service)):
    """Obtenir un pays par ID / Get country by ID."""
    country = await service.get_country(country_id)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.post("", response_model=CountryRead, status_code=201)
async def create_country(
    data: CountryCreate,
    response: Response,
    service: CountryService = Depends(get_country_service),
):
    """Créer un pays / Create a country."""
    country = await service.create_country(data)
    response.headers["Location"] = f"/countries/{country.id}"
    return country


@router.put("/{country_id}", status_code=204)
async def update_country(
    country_id: int,
    data: CountryUpdate,
    service: CountryService = Depends(get_country_service),
):
    """Modifier un pays / Update a country."""
    if country_id != data.id:
        raise HTTPException(status_code=400, detail="Route id does not match body id")
    if not await service.update_country(data):
        raise HTTPException(status_code=404, detail="Country not found")
    return Response(status_code=204)


@router.delete("/{country_id}", status_code=204)
async def delete_country(country_id: int, service: CountryService = Depends(get_country_service)):
    """Supprimer un pays (cascade sociétés et contacts) / Delete a country (cascades)."""
    if not await service.delete_country(country_id):
        raise HTTPException(status_code=404, detail="Country not found")
    return Response(status_code=204)


@router.get("/{country_id}/company-statistics", response_model=list[CompanyStatistics])
async def get_company_statistics(country_id: int, service: CountryService = Depends(get_country_service)):
    """Nombre de contacts par société du pays / Contact count per company in the country."""
    stats = await service.get_company_statistics(country_id)
    if not stats:
        raise HTTPException(status_code=404, detail="No companies found for this country.")
    return stats
