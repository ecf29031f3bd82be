import os
from pathlib import Path

# Defaults for the test run; set before the domain or auth settings load.
os.environ.setdefault("AUTH_TOKEN_SECRET", "test-signing-secret-0123456789-abcdefghijklmnopqrstuvwxyz")
os.environ.setdefault("AUTH_BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _marketplace_domain():
    """Initialize the marketplace domain once per session."""
    from marketplace.domain import marketplace

    marketplace.init()
    return marketplace


@pytest.fixture(scope="session", autouse=True)
def setup_db(_marketplace_domain):
    from marketplace.utils.db import drop_db, setup_db

    setup_db(_marketplace_domain)

    yield

    drop_db(_marketplace_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_marketplace_domain):
    """Push domain context before each test, cleanup after."""
    from marketplace.identity.auth import reset_token_service

    ctx = _marketplace_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()

    reset_token_service()


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------
@pytest.fixture()
def client(_marketplace_domain):
    """TestClient over every router, wired like the application."""
    from fastapi import FastAPI, Request
    from fastapi.testclient import TestClient
    from marketplace.catalogue.api import category_router, product_router
    from marketplace.identity.api import client_router, developer_router, user_router
    from marketplace.ordering.api import cart_router, order_router
    from marketplace.talent.api import onboarding_router, skill_router
    from marketplace.utils.errors import register_error_handlers
    from protean.integrations.fastapi import register_exception_handlers

    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with _marketplace_domain.domain_context():
            return await call_next(request)

    for router in (
        user_router,
        client_router,
        developer_router,
        onboarding_router,
        category_router,
        product_router,
        cart_router,
        order_router,
        skill_router,
    ):
        app.include_router(router)

    register_exception_handlers(app)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def login_as(client):
    """Register and log in an account; returns ``(account_id, headers)``."""

    def _login_as(kind="user", email="shopper@example.com", password="secret-pass", name="Shopper"):
        prefix = f"/{kind}s"
        client.post(f"{prefix}/register", json={"name": name, "email": email, "password": password})
        response = client.post(f"{prefix}/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        data = response.json()
        return data["account_id"], {"Authorization": f"Bearer {data['token']}"}

    return _login_as
