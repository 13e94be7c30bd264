import pytest

from ingest.models import TicketSource
from mappings.models import MasterUserMapping, OrganizationMapping, UserMapping
from tests.factories import PROJECT_A


@pytest.fixture(autouse=True)
def utc_source_timezone(settings):
    settings.TICKET_SOURCE_TIMEZONE = 'UTC'
    settings.TICKET_PRIORITY_CODES = ('SR', 'INC', 'CR', 'PR')


@pytest.fixture
def remedy(db):
    source, _ = TicketSource.objects.get_or_create(
        name='Remedy',
        defaults={'description': 'BMC Remedy ITSM ticketing system'},
    )
    return source


@pytest.fixture
def team_a_mapping(remedy):
    return OrganizationMapping.objects.create(
        source=remedy,
        project_id=PROJECT_A,
        source_organization_value='IT Support Team A',
    )


@pytest.fixture
def john_master_mapping(remedy):
    return MasterUserMapping.objects.create(
        source=remedy,
        source_assignee_value='john.doe',
        mapped_user_email='john.doe@company.com',
    )


@pytest.fixture
def alice_user_mapping(team_a_mapping):
    return UserMapping.objects.create(
        mapping=team_a_mapping,
        user_email='alice@company.com',
        source_assignee_value='alice.w',
    )
