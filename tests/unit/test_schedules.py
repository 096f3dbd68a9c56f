"""
Tests for the schedule read/write APIs (handlers/schedules).
"""

from unittest.mock import Mock

import pytest

from event_backend.core import StoreResult
from event_backend.handlers.schedules import ScheduleReadApi, ScheduleWriteApi
from event_backend.models import ScheduleEntryCreate


@pytest.fixture
def write_api(mock_config, storage):
    return ScheduleWriteApi(mock_config, storage)


@pytest.fixture
def read_api(mock_config, storage):
    return ScheduleReadApi(mock_config, storage)


def _add(write_api, team, event):
    return write_api.create(ScheduleEntryCreate(team=team, event=event)).data


def _remaining(storage, mock_config):
    items = storage.read_items(mock_config.schedule_table).data
    return sorted((item['event'], item['team']) for item in items)


class TestScheduleWriteApi:

    def test_create_assigns_uuid_and_timestamp(self, write_api):
        result = write_api.create(ScheduleEntryCreate(team='A', event='Opening'))

        assert result.success is True
        assert set(result.data) == {'uuid', 'team', 'event', 'timestamp'}

    def test_delete_by_event_and_team_removes_only_double_matches(self, write_api, storage, mock_config):
        _add(write_api, 'T1', 'E1')
        _add(write_api, 'T2', 'E1')
        _add(write_api, 'T1', 'E2')

        result = write_api.delete_matching(event='E1', team='T1')

        assert result.success is True
        assert [(item['event'], item['team']) for item in result.data] == [('E1', 'T1')]
        assert _remaining(storage, mock_config) == [('E1', 'T2'), ('E2', 'T1')]

    def test_delete_by_event_removes_all_teams(self, write_api, storage, mock_config):
        _add(write_api, 'T1', 'E1')
        _add(write_api, 'T2', 'E1')
        _add(write_api, 'T1', 'E2')

        result = write_api.delete_matching(event='E1')

        assert result.success is True
        assert len(result.data) == 2
        assert _remaining(storage, mock_config) == [('E2', 'T1')]

    def test_delete_without_filters_fails_and_deletes_nothing(self, write_api, storage, mock_config):
        _add(write_api, 'T1', 'E1')

        result = write_api.delete_matching()

        assert result.success is False
        assert _remaining(storage, mock_config) == [('E1', 'T1')]

    def test_delete_by_team_only_is_unsupported(self, write_api, storage, mock_config):
        _add(write_api, 'T1', 'E1')

        result = write_api.delete_matching(team='T1')

        assert result.success is False
        assert _remaining(storage, mock_config) == [('E1', 'T1')]

    def test_delete_with_no_matches_fails(self, write_api, storage, mock_config):
        _add(write_api, 'T1', 'E1')

        result = write_api.delete_matching(event='E9')

        assert result.success is False
        assert result.data == []
        assert _remaining(storage, mock_config) == [('E1', 'T1')]

    def test_partial_delete_failure_is_aggregated(self, mock_config):
        storage = Mock()
        storage.scan_and_filter.return_value = StoreResult(success=True, data=[
            {'uuid': 'u1', 'team': 'T1', 'event': 'E1', 'timestamp': 't'},
            {'uuid': 'u2', 'team': 'T2', 'event': 'E1', 'timestamp': 't'},
        ])
        storage.delete_item.side_effect = [
            StoreResult(success=True, data={}),
            StoreResult(success=False, message="throttled"),
        ]

        result = ScheduleWriteApi(mock_config, storage).delete_matching(event='E1')

        assert result.success is False
        assert [item['uuid'] for item in result.data] == ['u1']
        assert storage.delete_item.call_count == 2
        assert "1 of 2" in result.message

    def test_scan_failure_is_reported(self, mock_config):
        storage = Mock()
        storage.scan_and_filter.return_value = StoreResult(success=False, message="boom")

        result = ScheduleWriteApi(mock_config, storage).delete_matching(event='E1')

        assert result.success is False
        storage.delete_item.assert_not_called()


class TestScheduleReadApi:

    def test_list_by_team_projects_and_filters(self, write_api, read_api, storage, mock_config):
        _add(write_api, 'A', 'Opening')
        _add(write_api, 'B', 'Judging')
        _add(write_api, 'A', 'Demo')
        storage.add_item(
            {'uuid': 'extra', 'team': 'A', 'event': 'Dinner', 'timestamp': 't', 'room': '101'},
            mock_config.schedule_table,
        )

        result = read_api.list_by_team('A')

        assert result.success is True
        assert sorted(item['event'] for item in result.data) == ['Demo', 'Dinner', 'Opening']
        for item in result.data:
            assert set(item) == {'uuid', 'team', 'event', 'timestamp'}
            assert item['team'] == 'A'

    def test_list_by_team_preserves_scan_order(self, write_api, read_api, storage, mock_config):
        for n in range(5):
            _add(write_api, 'A' if n % 2 == 0 else 'B', f'event-{n}')

        scanned = [item['uuid'] for item in storage.read_items(mock_config.schedule_table).data
                   if item['team'] == 'A']

        assert [item['uuid'] for item in read_api.list_by_team('A').data] == scanned

    def test_list_unknown_team_is_empty(self, write_api, read_api):
        _add(write_api, 'A', 'Opening')

        assert read_api.list_by_team('Z') == StoreResult(success=True, data=[])
