"""
Test Configuration

Shared fixtures: every test gets its own registry, cache and engine so
runtime TLD merges and cached results never leak between tests.
"""

import httpx
import pytest

from email_autocorrect.core.cache import CorrectionCache
from email_autocorrect.core.corrector import EmailCorrector, default_corrector
from email_autocorrect.core.registry import DomainRegistry


@pytest.fixture
def registry():
    return DomainRegistry()


@pytest.fixture
def cache():
    return CorrectionCache()


@pytest.fixture
def corrector(registry, cache):
    return EmailCorrector(registry=registry, cache=cache)


@pytest.fixture(autouse=True)
def reset_default_cache():
    default_corrector.clear_cache()
    yield
    default_corrector.clear_cache()


@pytest.fixture
def tld_client():
    """
    Build an httpx.AsyncClient whose responses come from a handler.

    Usage:
        async with tld_client(handler) as client:
            await registry.load_tlds(client=client)
    """
    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
