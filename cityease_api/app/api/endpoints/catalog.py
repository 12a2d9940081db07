"""
Catalog endpoints.

Public, read‑only listings of services and professionals.  The data
is loaded once at startup by ``CatalogService.load``.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from cityease_api.app.schemas.catalog import ProfessionalRead, ServiceRead
from cityease_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/services", response_model=List[ServiceRead])
async def list_services() -> List[ServiceRead]:
    return await CatalogService.list_services()


@router.get("/professionals", response_model=List[ProfessionalRead])
async def list_professionals(
    service: Optional[str] = Query(None, description="Only professionals offering this service"),
) -> List[ProfessionalRead]:
    """List professionals, optionally filtered by service name.

    An unknown service name returns an empty list.
    """
    return await CatalogService.list_professionals(service)
