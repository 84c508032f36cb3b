"""Routes API / API routes."""

from fastapi import APIRouter

from companies_info.api import companies, contacts, countries

api_router = APIRouter()

api_router.include_router(companies.router, prefix="/companies", tags=["companies"])
api_router.include_router(countries.router, prefix="/countries", tags=["countries"])
api_router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
