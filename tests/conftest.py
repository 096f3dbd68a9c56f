"""
Test configuration and fixtures for the event backend.

Provides an in-memory DynamoDB (moto) with the three event tables, a storage
adapter bound to it and a FastAPI TestClient over the whole application.
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import event_backend
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from event_backend import EventStoreConfig, StorageAdapter
from event_backend.api import create_app
from tests.helpers import ANNOUNCEMENT_TABLE, PARTICIPANT_TABLE, SCHEDULE_TABLE


@pytest.fixture
def mock_config():
    """Event store configuration for mocked testing."""
    return EventStoreConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        participant_table=PARTICIPANT_TABLE,
        announcement_table=ANNOUNCEMENT_TABLE,
        schedule_table=SCHEDULE_TABLE,
        host="127.0.0.1",
        port=3001,
        enable_debug_logging=False,
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


def _create_table(resource, name, key_field):
    return resource.create_table(
        TableName=name,
        KeySchema=[{'AttributeName': key_field, 'KeyType': 'HASH'}],
        AttributeDefinitions=[{'AttributeName': key_field, 'AttributeType': 'S'}],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def participant_table(mock_dynamodb_resource):
    """Create the participant table, keyed by email."""
    return _create_table(mock_dynamodb_resource, PARTICIPANT_TABLE, 'email')


@pytest.fixture
def announcement_table(mock_dynamodb_resource):
    """Create the announcement table, keyed by uuid."""
    return _create_table(mock_dynamodb_resource, ANNOUNCEMENT_TABLE, 'uuid')


@pytest.fixture
def schedule_table(mock_dynamodb_resource):
    """Create the schedule table, keyed by uuid."""
    return _create_table(mock_dynamodb_resource, SCHEDULE_TABLE, 'uuid')


@pytest.fixture
def all_tables(participant_table, announcement_table, schedule_table):
    """Create all DynamoDB tables the backend uses."""
    return {
        'participant': participant_table,
        'announcement': announcement_table,
        'schedule': schedule_table,
    }


@pytest.fixture
def storage(mock_config, all_tables):
    """Storage adapter backed by the mocked tables."""
    return StorageAdapter(mock_config)


@pytest.fixture
def client(mock_config, storage):
    """HTTP client over the full application."""
    app = create_app(config=mock_config, storage=storage)
    with TestClient(app) as test_client:
        yield test_client


# Sample Data Fixtures

@pytest.fixture
def sample_registration():
    """Registration body for a participant."""
    return {
        "email": "ada@example.com",
        "name": "Ada Lovelace",
        "team": "engines",
        "hotel": "Harbour Inn",
        "stamp": 3,
        "diet": "vegetarian",
    }
