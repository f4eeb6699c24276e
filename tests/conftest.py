"""Shared fixtures for the helper server tests."""

import pytest
from aiohttp.test_utils import TestClient, TestServer
from solders.keypair import Keypair

from api.server import create_app


def keypair_from_byte(value: int) -> Keypair:
    """Deterministic keypair whose seed is 32 copies of one byte."""
    return Keypair.from_seed(bytes([value]) * 32)


@pytest.fixture
def alice() -> Keypair:
    return keypair_from_byte(1)


@pytest.fixture
def bob() -> Keypair:
    return keypair_from_byte(2)


@pytest.fixture
def mint_keypair() -> Keypair:
    return keypair_from_byte(3)


@pytest.fixture
async def client():
    async with TestClient(TestServer(create_app())) as client:
        yield client
