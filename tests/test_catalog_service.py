import json

import pytest

from cityease_api.app.core.config import settings
from cityease_api.app.services.catalog_service import CatalogService


@pytest.fixture
def catalog(tmp_path):
    services = [
        {"id": 1, "name": "Cleaning", "description": "Homes"},
        {"id": 2, "name": "Plumbing"},
        {"id": 3, "name": "Gardening"},
    ]
    professionals = [
        {"id": 10, "name": "Ravi", "service_id": 1, "rating": 4.5},
        {"id": 11, "name": "Sunita", "service_id": 1},
        {"id": 12, "name": "Amit", "service_id": 2},
    ]
    services_path = tmp_path / "services.json"
    professionals_path = tmp_path / "professionals.json"
    services_path.write_text(json.dumps(services), encoding="utf-8")
    professionals_path.write_text(json.dumps(professionals), encoding="utf-8")
    CatalogService.load(str(services_path), str(professionals_path))
    yield
    CatalogService.load(settings.services_seed, settings.professionals_seed)


@pytest.mark.asyncio
async def test_list_services_unfiltered(catalog):
    services = await CatalogService.list_services()
    assert [s.name for s in services] == ["Cleaning", "Plumbing", "Gardening"]
    assert services[0].model_dump()["description"] == "Homes"


@pytest.mark.asyncio
async def test_list_professionals_without_filter(catalog):
    assert len(await CatalogService.list_professionals()) == 3


@pytest.mark.asyncio
async def test_list_professionals_by_service_name(catalog):
    professionals = await CatalogService.list_professionals("Cleaning")
    assert [p.name for p in professionals] == ["Ravi", "Sunita"]


@pytest.mark.asyncio
async def test_unknown_service_returns_empty(catalog):
    assert await CatalogService.list_professionals("Astrology") == []


@pytest.mark.asyncio
async def test_service_without_professionals_returns_empty(catalog):
    assert await CatalogService.list_professionals("Gardening") == []


def test_load_rejects_non_list_seed(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"id": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        CatalogService.load(str(bad), str(bad))


def test_bundled_seed_files_are_consistent():
    CatalogService.load(settings.services_seed, settings.professionals_seed)
    service_ids = {s.id for s in CatalogService._services}
    assert service_ids
    assert all(p.service_id in service_ids for p in CatalogService._professionals)


def test_load_logs_missing_seed_file(tmp_path, caplog):
    missing = tmp_path / "missing.json"
    with caplog.at_level("ERROR", logger="cityease_api.app.services.catalog_service"):
        with pytest.raises(OSError):
            CatalogService.load(str(missing), str(missing))
    assert "Could not load catalog seed" in caplog.text
