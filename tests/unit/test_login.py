"""
Tests for the login check (handlers/login).
"""

from unittest.mock import Mock

import pytest

from event_backend.core import StoreResult
from event_backend.handlers.login import LoginApi
from event_backend.handlers.participants import ParticipantWriteApi
from event_backend.models import ParticipantRegistration


@pytest.fixture
def registered(mock_config, storage, sample_registration):
    return ParticipantWriteApi(mock_config, storage).register(ParticipantRegistration(**sample_registration)).data


@pytest.fixture
def login_api(mock_config, storage):
    return LoginApi(mock_config, storage)


def test_matching_credentials(login_api, registered):
    result = login_api.verify(registered['email'], registered['password'])

    assert result == StoreResult(success=True, data=True)


def test_wrong_password(login_api, registered):
    wrong = 'zzzzzz' if registered['password'] != 'zzzzzz' else 'yyyyyy'

    assert login_api.verify(registered['email'], wrong).data is False


def test_email_is_compared_exactly(login_api, registered):
    assert login_api.verify(registered['email'].upper(), registered['password']).data is False


def test_unknown_email(login_api):
    assert login_api.verify('nobody@example.com', 'abcde').data is False


def test_store_failure_is_reported(mock_config):
    storage = Mock()
    storage.scan_and_filter.return_value = StoreResult(success=False, message="boom")

    assert LoginApi(mock_config, storage).verify('a@example.com', 'abcde').success is False
