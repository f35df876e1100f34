"""Shared fixtures for get-tui tests."""

import pytest

from tests.harness.transports import failing_transport, json_transport


@pytest.fixture
def seen_urls():
    return []


@pytest.fixture
def ok_transport(seen_urls):
    return json_transport(seen=seen_urls)


@pytest.fixture
def broken_transport():
    return failing_transport()
