"""Tests for field-level user change detection."""

from datetime import date

from tests.factories import UserFactory
from usermanagement.users import FieldChange, diff_users, render_changes


class TestDiffUsers:
    """Tests for diff_users."""

    def test_identical_users_have_no_changes(self):
        """Should return an empty list when every field matches."""
        user = UserFactory.create()

        assert diff_users(user, user.model_copy()) == []

    def test_identity_is_ignored(self):
        """Should not report a change of id."""
        assert diff_users(UserFactory.create(id=1), UserFactory.create(id=2)) == []

    def test_single_change(self):
        """Should report the changed field with old and new values."""
        changes = diff_users(
            UserFactory.create(forename="A"), UserFactory.create(forename="B")
        )

        assert changes == [FieldChange(field="forename", old_value="A", new_value="B")]

    def test_fixed_field_order(self):
        """Should report fields in forename, surname, email, is_active, date_of_birth order."""
        old = UserFactory.create(
            forename="A", surname="S", email="a@x.io", is_active=True,
            date_of_birth=date(1990, 1, 1),
        )
        new = UserFactory.create(
            forename="B", surname="T", email="b@x.io", is_active=False,
            date_of_birth=date(1991, 2, 2),
        )

        fields = [c.field for c in diff_users(old, new)]

        assert fields == ["forename", "surname", "email", "is_active", "date_of_birth"]

    def test_string_comparison_is_case_sensitive(self):
        """Should treat a case-only difference as a change."""
        changes = diff_users(
            UserFactory.create(email="a@example.com"),
            UserFactory.create(email="A@example.com"),
        )

        assert [c.field for c in changes] == ["email"]

    def test_inputs_not_modified(self):
        """Should be free of side effects."""
        old = UserFactory.create(forename="A")
        new = UserFactory.create(forename="B")

        diff_users(old, new)

        assert old.forename == "A"
        assert new.forename == "B"


class TestRender:
    """Tests for rendering changes."""

    def test_render_forename(self):
        """Should render 'Forename changed from A to B'."""
        change = FieldChange(field="forename", old_value="A", new_value="B")

        assert change.render() == "Forename changed from A to B"

    def test_render_flag_and_date(self):
        """Should render booleans and dates readably."""
        active = FieldChange(field="is_active", old_value=True, new_value=False)
        born = FieldChange(
            field="date_of_birth", old_value=date(1990, 1, 1), new_value=date(1991, 2, 3)
        )

        assert active.render() == "Active changed from True to False"
        assert born.render() == "Date of birth changed from 1990-01-01 to 1991-02-03"

    def test_render_changes_joined(self):
        """Should join rendered changes with '; '."""
        changes = [
            FieldChange(field="forename", old_value="A", new_value="B"),
            FieldChange(field="surname", old_value="C", new_value="D"),
        ]

        assert render_changes(changes) == (
            "Forename changed from A to B; Surname changed from C to D"
        )

    def test_render_no_changes(self):
        """Should render an empty list as an empty string."""
        assert render_changes([]) == ""
