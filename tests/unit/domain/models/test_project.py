"""
Unit tests for Project domain model.
"""

import pytest
from datetime import datetime, timedelta, timezone
from projecthub.domain.models.base import ValidationError, DuplicateEntityError
from projecthub.domain.models.project import Project, ProjectStatus
from projecthub.domain.models.value_objects import new_id


@pytest.fixture
def owner_id():
    return new_id()


@pytest.fixture
def project(owner_id):
    return Project(owner_id=owner_id, name="Trip")


class TestProject:
    """Test cases for Project domain model."""

    def test_create_project_defaults(self, owner_id):
        """Test project creation with defaults."""
        before = datetime.utcnow()
        project = Project(owner_id=owner_id, name="Trip")

        assert project.status == ProjectStatus.NEW
        assert project.members == []
        assert project.end_date is None
        assert project.description is None
        assert project.start_date >= before

    def test_name_and_description_are_trimmed(self, owner_id):
        project = Project(owner_id=owner_id, name="  Trip  ", description="  Summer plans ")

        assert project.name == "Trip"
        assert project.description == "Summer plans"

    def test_name_required(self, owner_id):
        with pytest.raises(ValidationError) as exc_info:
            Project(owner_id=owner_id, name="   ")

        assert exc_info.value.field == "name"

    def test_owner_required(self):
        with pytest.raises(ValidationError):
            Project(owner_id="", name="Trip")

    def test_create_rejects_end_before_start(self, owner_id):
        with pytest.raises(ValidationError):
            Project.create(
                owner_id=owner_id,
                name="Trip",
                start_date=datetime(2024, 3, 1),
                end_date=datetime(2024, 2, 1),
            )

    def test_create_with_only_end_date_skips_order_check(self, owner_id):
        """A past end date is accepted when no start date was given."""
        project = Project.create(owner_id=owner_id, name="Past", end_date=datetime(2020, 1, 1))

        assert project.end_date == datetime(2020, 1, 1)
        assert project.start_date > project.end_date

    def test_stored_project_with_end_before_start_loads(self, owner_id):
        project = Project(
            owner_id=owner_id,
            name="Past",
            start_date=datetime(2024, 3, 1),
            end_date=datetime(2020, 1, 1),
        )

        project.update_info(name="Renamed")

        assert project.name == "Renamed"

    def test_end_date_equal_to_start_date(self, owner_id):
        day = datetime(2024, 3, 1)

        project = Project(owner_id=owner_id, name="Trip", start_date=day, end_date=day)

        assert project.end_date == day

    def test_aware_dates_are_stored_as_naive_utc(self, owner_id):
        start = datetime(2024, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=-3)))

        project = Project(owner_id=owner_id, name="Trip", start_date=start)

        assert project.start_date == datetime(2024, 3, 1, 15, 0)
        assert project.start_date.tzinfo is None

    def test_status_from_string(self, owner_id):
        project = Project(owner_id=owner_id, name="Trip", status="Delete")

        assert project.status == ProjectStatus.DELETE

    def test_invalid_status(self, owner_id):
        with pytest.raises(ValidationError) as exc_info:
            Project(owner_id=owner_id, name="Trip", status="Archived")

        assert exc_info.value.field == "status"

    def test_ownership(self, project, owner_id):
        assert project.is_owner(owner_id)
        assert project.is_owner(owner_id.upper())
        assert not project.is_owner(new_id())
        assert not project.is_owner(None)

    def test_owner_is_not_implicitly_a_member(self, project, owner_id):
        assert not project.has_member(owner_id)


class TestProjectMembers:
    """Test cases for member list handling."""

    def test_add_member_keeps_order(self, project):
        first, second = new_id(), new_id()

        project.add_member(first)
        project.add_member(second)

        assert project.members == [first, second]
        assert project.has_member(second)

    def test_add_existing_member(self, project):
        member = new_id()
        project.add_member(member)

        with pytest.raises(DuplicateEntityError):
            project.add_member(member)

    def test_add_malformed_member(self, project):
        with pytest.raises(ValidationError):
            project.add_member("not-an-id")

    def test_remove_members(self, project):
        keep, drop = new_id(), new_id()
        project.add_member(keep)
        project.add_member(drop)

        removed = project.remove_members([drop, "garbage", 17])

        assert removed == [drop]
        assert project.members == [keep]

    def test_remove_unknown_member_is_noop(self, project):
        member = new_id()
        project.add_member(member)

        assert project.remove_members([new_id()]) == []
        assert project.members == [member]

    def test_duplicate_members_rejected(self, owner_id):
        member = new_id()

        with pytest.raises(ValidationError):
            Project(owner_id=owner_id, name="Trip", members=[member, member])


class TestProjectUpdate:
    """Test cases for update_info."""

    def test_update_fields(self, project):
        project.update_info(name=" Holiday ", description="Beach", status="Delete")

        assert project.name == "Holiday"
        assert project.description == "Beach"
        assert project.status == ProjectStatus.DELETE

    def test_update_clears_description(self, project):
        project.update_info(description="Beach")
        project.update_info(description=None)

        assert project.description is None

    def test_update_empty_name(self, project):
        with pytest.raises(ValidationError):
            project.update_info(name="")

    def test_update_end_before_start(self, project):
        with pytest.raises(ValidationError):
            project.update_info(end_date=project.start_date - timedelta(days=1))

    def test_update_null_status(self, project):
        with pytest.raises(ValidationError):
            project.update_info(status=None)

    def test_update_unknown_field(self, project):
        with pytest.raises(ValidationError):
            project.update_info(owner_id=new_id())

    def test_update_touches_updated_at(self, project):
        project.updated_at = datetime.utcnow() - timedelta(hours=1)
        previous = project.updated_at

        project.update_info(name="Holiday")

        assert project.updated_at > previous
