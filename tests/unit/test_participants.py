"""
Tests for the participant read/write APIs (handlers/participants).
"""

import re
from unittest.mock import Mock

import pytest

from event_backend.core import StoreResult
from event_backend.handlers.participants import ParticipantReadApi, ParticipantWriteApi
from event_backend.models import ParticipantRegistration


@pytest.fixture
def write_api(mock_config, storage):
    return ParticipantWriteApi(mock_config, storage)


@pytest.fixture
def read_api(mock_config, storage):
    return ParticipantReadApi(mock_config, storage)


class TestParticipantWriteApi:

    def test_register_generates_password_and_defaults(self, write_api, sample_registration):
        result = write_api.register(ParticipantRegistration(**sample_registration))

        assert result.success is True
        assert re.fullmatch(r'[a-z0-9]{5}', result.data['password'])
        assert result.data['checked_in'] is False
        for field, value in sample_registration.items():
            assert result.data[field] == value

    def test_register_ignores_client_supplied_server_fields(self, write_api):
        registration = ParticipantRegistration.model_validate(
            {'email': 'b@example.com', 'password': 'chosen', 'checked_in': True}
        )

        result = write_api.register(registration)

        assert result.data['password'] != 'chosen'
        assert result.data['checked_in'] is False

    def test_register_twice_overwrites(self, write_api, read_api):
        write_api.register(ParticipantRegistration(email='a@example.com', name='First', team='red', hotel='Inn'))
        second = write_api.register(ParticipantRegistration(email='a@example.com', name='Second'))

        records = read_api.list_all().data

        assert len(records) == 1
        assert records[0] == second.data
        assert 'team' not in records[0]
        assert 'hotel' not in records[0]

    def test_register_omits_missing_fields(self, write_api, participant_table):
        write_api.register(ParticipantRegistration(email='c@example.com'))

        stored = participant_table.get_item(Key={'email': 'c@example.com'})['Item']
        assert set(stored) == {'email', 'password', 'checked_in'}

    def test_register_without_email_fails(self, write_api):
        result = write_api.register(ParticipantRegistration(name='Nobody'))

        assert result.success is False
        assert result.data is None

    def test_delete_by_email(self, write_api, read_api, sample_registration):
        write_api.register(ParticipantRegistration(**sample_registration))

        result = write_api.delete_by_email(sample_registration['email'])

        assert result.success is True
        assert read_api.list_all().data == []

    def test_delete_unknown_email_succeeds(self, write_api):
        assert write_api.delete_by_email('ghost@example.com').success is True


class TestParticipantReadApi:

    def test_list_all_returns_records_verbatim(self, write_api, read_api, sample_registration):
        registered = write_api.register(ParticipantRegistration(**sample_registration)).data

        assert read_api.list_all().data == [registered]

    def test_get_by_email_lowercases_input(self, write_api, read_api, sample_registration):
        registered = write_api.register(ParticipantRegistration(**sample_registration)).data

        result = read_api.get_by_email('ADA@Example.com')

        assert result.success is True
        assert result.data == registered

    def test_get_by_email_does_not_match_mixed_case_registration(self, write_api, read_api):
        write_api.register(ParticipantRegistration(email='Grace@Example.com'))

        result = read_api.get_by_email('Grace@Example.com')

        assert result.success is True
        assert result.data == {}

    def test_get_by_email_not_found_is_empty(self, read_api):
        result = read_api.get_by_email('nobody@example.com')

        assert result == StoreResult(success=True, data={})

    def test_get_by_email_last_match_wins(self, mock_config):
        storage = Mock()
        first = {'email': 'dup@example.com', 'name': 'First'}
        last = {'email': 'dup@example.com', 'name': 'Last'}
        storage.scan_and_filter.return_value = StoreResult(success=True, data=[first, last])

        result = ParticipantReadApi(mock_config, storage).get_by_email('dup@example.com')

        assert result.data == last

    def test_read_failure_is_reported(self, mock_config):
        storage = Mock()
        storage.read_items.return_value = StoreResult(success=False, message="boom")
        storage.scan_and_filter.return_value = StoreResult(success=False, message="boom")
        api = ParticipantReadApi(mock_config, storage)

        assert api.list_all().success is False
        assert api.get_by_email('a@example.com').success is False
