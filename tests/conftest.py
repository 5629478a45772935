import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    # Test clients talk plain HTTP, so cookies must not be flagged Secure
    os.environ.setdefault("COOKIE_SECURE", "false")
    os.environ.pop("REDIS_URL", None)
    os.environ.pop("SMTP_HOST", None)


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def _reset_adapters():
    """Drop cached settings and swapped-in adapters after every test."""
    yield

    from shared.auth.revocation import reset_revocation_list
    from shared.config import reset_settings

    reset_settings()
    reset_revocation_list()


@pytest.fixture()
def make_token():
    """Build an access token for a caller with the given role."""
    from shared.auth.tokens import issue_token

    def _make(user_id="user-001", role="user", username=None, email=None):
        return issue_token(
            user_id=user_id,
            username=username or f"{role}-{user_id}",
            email=email or f"{user_id}@example.com",
            role=role,
        )

    return _make


@pytest.fixture()
def auth_headers(make_token):
    """Return ``Authorization`` headers for a caller with the given role."""

    def _headers(user_id="user-001", role="user", **kwargs):
        return {"Authorization": f"Bearer {make_token(user_id=user_id, role=role, **kwargs).token}"}

    return _headers
