"""
Unit tests for the project access policy.
"""

import pytest
from projecthub.domain.models.base import EntityNotFoundError
from projecthub.domain.models.project import Project
from projecthub.domain.models.value_objects import new_id
from projecthub.domain.services.project_access import ProjectAccessPolicy


class TestProjectAccessPolicy:
    """Test cases for owner/member access decisions."""

    def setup_method(self):
        self.policy = ProjectAccessPolicy()
        self.owner = new_id()
        self.member = new_id()
        self.outsider = new_id()
        self.project = Project(id=new_id(), owner_id=self.owner, name="Trip", members=[self.member])

    def test_owner_can_read_and_modify(self):
        assert self.policy.require_read(self.project, self.owner) is self.project
        assert self.policy.require_owner(self.project, self.owner) is self.project

    def test_member_can_read_only(self):
        assert self.policy.require_read(self.project, self.member) is self.project

        with pytest.raises(EntityNotFoundError):
            self.policy.require_owner(self.project, self.member)

    def test_outsider_gets_not_found(self):
        with pytest.raises(EntityNotFoundError):
            self.policy.require_read(self.project, self.outsider)

        with pytest.raises(EntityNotFoundError):
            self.policy.require_owner(self.project, self.outsider)

    def test_missing_project_gets_not_found(self):
        with pytest.raises(EntityNotFoundError) as exc_info:
            self.policy.require_read(None, self.owner, "missing")

        assert exc_info.value.entity_type == "Project"
        assert exc_info.value.entity_id == "missing"
