from __future__ import annotations

import logging

import pytest
import pytest_asyncio

from embedclient.log import LOGGER_NAME
from tests.utils import make_client, recording_transport


@pytest.fixture(autouse=True)
def _reset_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_ORGANIZATION",
        "EMBEDCLIENT_TIMEOUT_S",
        "EMBEDCLIENT_DEBUG",
        "EMBEDCLIENT_DEFAULT_MODEL",
    ):
        # setenv first so teardown also removes values a test loads from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest_asyncio.fixture
async def recorded_client():
    transport, seen = recording_transport()
    client = make_client(transport)
    yield client, seen
    await client.aclose()
