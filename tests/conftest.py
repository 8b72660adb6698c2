# tests/conftest.py
import httpx
import pytest

from moverhub.adapters.repos.movers import InMemoryMoverRepository
from moverhub.config import Settings
from moverhub.domain.types import Mover
from moverhub.entrypoints.fastapi_app import create_app
from moverhub.service_layer.demo_seed import demo_movers
from moverhub.service_layer.unit_of_work import InMemoryUnitOfWork


@pytest.fixture
def uow():
    return InMemoryUnitOfWork()


@pytest.fixture
def seeded_uow():
    return InMemoryUnitOfWork(InMemoryMoverRepository(demo_movers()))


@pytest.fixture
def small_uow():
    return InMemoryUnitOfWork(
        InMemoryMoverRepository(
            [
                Mover(id=3, name="Gamma", rating=4.0, phone_number="+100", jobs_done=10),
                Mover(id=1, name="Alpha", rating=4.5, phone_number="+101", jobs_done=20),
                Mover(id=2, name="Beta", rating=4.0, phone_number="+102", jobs_done=5),
            ]
        )
    )


@pytest.fixture
def app_settings():
    return Settings(SEED_DEMO=False, EMPTY_LIST_IS_ERROR=True, VALIDATE_RATING_ON_CREATE=False)


@pytest.fixture
async def client(seeded_uow, app_settings):
    """
    In-process client against the ASGI app. The store is injected directly,
    so no startup hook has to run.
    """
    app = create_app(seeded_uow, app_settings=app_settings, seed=False)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
