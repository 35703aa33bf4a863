"""
Pytest configuration for the unit tests.
"""

import pytest

from skyanswers import SkysmartSession
from tests.helpers import FakeTransport


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def session(transport):
    return SkysmartSession(http=transport)
