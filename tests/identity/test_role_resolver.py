import pytest

from attendance_ledger.core.enums import Role
from attendance_ledger.core.exceptions import InvalidIdentity
from attendance_ledger.identity.resolver import RoleResolver
from attendance_ledger.participants.memory_participant_repository import InMemoryParticipantRepository


@pytest.fixture
def participants():
    repo = InMemoryParticipantRepository()
    repo.create_or_reactivate(identity="0xb", display_name="Bob", registered_at=0)
    repo.create_or_reactivate(identity="0xc", display_name="Carol", registered_at=0)
    repo.deactivate("0xc")
    return repo


def test_admin_is_fixed_and_case_insensitive(participants):
    resolver = RoleResolver("0xAdmin", participants)

    assert resolver.admin_identity == "0xadmin"
    assert resolver.is_admin("0XADMIN") is True
    assert resolver.is_admin("0xB") is False


def test_admin_needs_no_participant_record(participants):
    resolver = RoleResolver("0xAdmin", participants)

    assert resolver.is_registered("0xAdmin") is False
    assert resolver.resolve_role("0xAdmin") == Role.ADMIN


def test_registered_only_for_active_records(participants):
    resolver = RoleResolver("0xAdmin", participants)

    assert resolver.is_registered("0xB") is True
    assert resolver.is_registered("0xC") is False
    assert resolver.is_registered("0xD") is False
    assert resolver.resolve_role("0xB") == Role.PARTICIPANT
    assert resolver.resolve_role("0xC") == Role.GUEST


def test_malformed_identity(participants):
    resolver = RoleResolver("0xAdmin", participants)

    with pytest.raises(InvalidIdentity):
        resolver.is_admin("")
    with pytest.raises(InvalidIdentity):
        resolver.is_registered("has space")


def test_admin_identity_must_be_valid(participants):
    with pytest.raises(InvalidIdentity):
        RoleResolver("", participants)
