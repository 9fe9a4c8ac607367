"""Shared fixtures for the Chunk Lab test suite."""

import pytest
from fastapi.testclient import TestClient

from chunklab.domain.samples import SAMPLES


@pytest.fixture(scope="session")
def client():
    from chunklab.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture(params=sorted(SAMPLES))
def sample_text(request):
    """Each bundled sample document in turn."""
    return SAMPLES[request.param]
