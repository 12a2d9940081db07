"""
Read‑only catalog of services and professionals.

The catalog is loaded once from two JSON seed files when the
application starts and is never modified afterwards.  A professional
points at the service it offers through ``service_id``.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from cityease_api.app.schemas.catalog import ProfessionalRead, ServiceRead

logger = logging.getLogger(__name__)


class CatalogService:
    """Serves the static catalog loaded at startup."""

    _services: Tuple[ServiceRead, ...] = ()
    _professionals: Tuple[ProfessionalRead, ...] = ()

    @classmethod
    def load(cls, services_path: str, professionals_path: str) -> None:
        """Read both seed files and replace the in‑memory catalog.

        Raises ``OSError`` if a file cannot be read and
        ``ValueError`` if its content is not a list of valid records.
        """
        try:
            services = [ServiceRead.model_validate(item) for item in cls._read_seed(services_path)]
            professionals = [
                ProfessionalRead.model_validate(item) for item in cls._read_seed(professionals_path)
            ]
        except (OSError, ValueError):
            logger.exception("Could not load catalog seed %s / %s", services_path, professionals_path)
            raise
        cls._services = tuple(services)
        cls._professionals = tuple(professionals)
        logger.info(
            "Catalog loaded: %d services, %d professionals",
            len(cls._services),
            len(cls._professionals),
        )

    @staticmethod
    def _read_seed(path: str) -> list:
        with Path(path).open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"Seed file {path} must contain a JSON array")
        return data

    @classmethod
    async def list_services(cls) -> List[ServiceRead]:
        return list(cls._services)

    @classmethod
    async def list_professionals(cls, service_name: Optional[str] = None) -> List[ProfessionalRead]:
        """Return professionals, optionally only those offering ``service_name``.

        The name must match a service exactly.  An unknown name yields
        an empty list rather than an error.
        """
        if not service_name:
            return list(cls._professionals)
        service = next((s for s in cls._services if s.name == service_name), None)
        if service is None:
            return []
        return [p for p in cls._professionals if p.service_id == service.id]
