import pytest

from module_studio.exceptions import StorageError
from module_studio.services import DEFAULT_MODULES, SeedService


@pytest.fixture
def seeder(module_service):
    return SeedService(module_service)


def test_store_starts_empty(seeder):
    assert seeder.is_empty()


def test_seed_creates_defaults_in_order(seeder, module_service):
    created = seeder.seed()

    assert [module.en.name for module in created] == ["Text Summarizer", "Email Writer", "Image Analysis"]
    assert [module.id for module in created] == sorted(module.id for module in created)
    assert not seeder.is_empty()
    assert len(module_service.list_modules()) == len(DEFAULT_MODULES)


def test_seed_is_idempotent(seeder, module_service):
    seeder.seed()

    assert seeder.seed() == []
    assert seeder.seed() == []
    assert len(module_service.list_modules()) == len(DEFAULT_MODULES)


def test_seed_skips_store_with_user_modules(seeder, module_service, module_payload):
    module_service.create_module(module_payload)

    assert seeder.seed() == []
    assert len(module_service.list_modules()) == 1


def test_force_seed_ignores_existing_data(seeder, module_service):
    seeder.seed()

    created = seeder.force_seed()

    assert len(created) == len(DEFAULT_MODULES)
    assert len(module_service.list_modules()) == 2 * len(DEFAULT_MODULES)


def test_seed_stops_on_first_failure(seeder, module_service, monkeypatch):
    real_create = module_service.create_module
    calls = []

    def flaky_create(module_data):
        calls.append(module_data.en.name)
        if len(calls) == 2:
            raise StorageError("disk full")
        return real_create(module_data)

    monkeypatch.setattr(module_service, "create_module", flaky_create)

    with pytest.raises(StorageError):
        seeder.seed()

    assert calls == ["Text Summarizer", "Email Writer"]
    remaining = module_service.list_modules()
    assert [module.en.name for module in remaining] == ["Text Summarizer"]
