# =============================================================================
# Login Form State Tests
# =============================================================================

import pytest

from login_tui.core import (
    FILL_BOTH_FIELDS,
    PASSWORD_EMPTY,
    USERNAME_EMPTY,
    FormState,
    Welcome,
    edit_password,
    edit_username,
    field_errors,
    password_too_short_message,
    submit,
    toggle_password_visibility,
)

TOO_SHORT = "Password must be at least 6 characters long"


class TestSubmit:
    """Validation order and outcomes."""

    @pytest.mark.parametrize(
        "username, password",
        [
            ("", ""),
            ("alice", ""),
            ("", "secret1"),
            ("   ", "secret1"),
            ("alice", "      "),
        ],
    )
    def test_blank_field_asks_for_both(self, username, password):
        result = submit(FormState(username=username, password=password))
        assert result.route is None
        assert not result.ok
        assert result.state.error_message == FILL_BOTH_FIELDS

    @pytest.mark.parametrize("password", ["1", "123", "12345"])
    def test_short_password(self, password):
        result = submit(FormState(username="alice", password=password))
        assert result.route is None
        assert result.state.error_message == TOO_SHORT

    def test_blank_check_wins_over_length(self):
        # "abc" is short, but the empty username is reported first
        result = submit(FormState(username="", password="abc"))
        assert result.state.error_message == FILL_BOTH_FIELDS

    def test_valid_form_routes_to_welcome(self, filled_state):
        result = submit(filled_state)
        assert result.ok
        assert result.route == Welcome("alice")
        assert result.state == filled_state

    def test_exactly_min_length_is_accepted(self):
        result = submit(FormState(username="bob", password="123456"))
        assert result.route == Welcome("bob")

    def test_username_is_passed_as_typed(self):
        result = submit(FormState(username=" alice ", password="secret1"))
        assert result.route == Welcome(" alice ")

    def test_custom_min_length(self):
        state = FormState(username="alice", password="secret1")
        result = submit(state, min_password_length=8)
        assert result.route is None
        assert result.state.error_message == password_too_short_message(8)
        assert "at least 8 characters" in result.state.error_message

    def test_submit_keeps_field_values(self):
        result = submit(FormState(username="alice", password="123", password_visible=True))
        assert result.state.username == "alice"
        assert result.state.password == "123"
        assert result.state.password_visible is True


class TestReducers:
    """Edits clear the error, toggles don't."""

    def test_edit_username_clears_error(self, failed_state):
        state = edit_username(failed_state, "")
        assert state.username == ""
        assert state.error_message == ""

    def test_edit_password_clears_error(self, failed_state):
        state = edit_password(failed_state, "x")
        assert state.password == "x"
        assert state.error_message == ""

    def test_edit_after_short_password_failure(self):
        failed = submit(FormState(username="alice", password="123")).state
        assert failed.error_message == TOO_SHORT
        assert edit_password(failed, "1234").error_message == ""

    def test_toggle_visibility(self, failed_state):
        state = toggle_password_visibility(failed_state)
        assert state.password_visible is True
        assert state.error_message == FILL_BOTH_FIELDS
        assert toggle_password_visibility(state).password_visible is False

    def test_reducers_do_not_mutate(self, empty_state):
        edit_username(empty_state, "alice")
        assert empty_state.username == ""

    def test_repr_hides_password(self):
        assert "secret1" not in repr(FormState(username="alice", password="secret1"))


class TestFieldErrors:
    """Per-field error lines."""

    def test_nothing_shown_initially(self, empty_state):
        errors = field_errors(empty_state)
        assert errors.username is None
        assert errors.password is None

    def test_both_empty_after_failed_submit(self, failed_state):
        errors = field_errors(failed_state)
        assert errors.username == USERNAME_EMPTY
        assert errors.password == PASSWORD_EMPTY

    def test_short_password_shown_while_typing(self):
        errors = field_errors(FormState(username="alice", password="123"))
        assert errors.username is None
        assert errors.password == TOO_SHORT

    def test_empty_password_takes_precedence(self):
        # Whitespace is blank but non-empty and short: "cannot be empty" wins
        state = FormState(username="alice", password="   ", error_message=FILL_BOTH_FIELDS)
        assert field_errors(state).password == PASSWORD_EMPTY

    def test_blank_password_without_error_reports_length(self):
        state = FormState(username="alice", password="   ")
        assert field_errors(state).password == TOO_SHORT

    def test_field_line_can_differ_from_form_error(self):
        # Username missing, password short: the form says "fill in both",
        # while the password line still reports the length
        state = submit(FormState(username="", password="123")).state
        errors = field_errors(state)
        assert state.error_message == FILL_BOTH_FIELDS
        assert errors.username == USERNAME_EMPTY
        assert errors.password == TOO_SHORT

    def test_long_enough_password_shows_nothing(self):
        state = FormState(username="", password="secret1", error_message=FILL_BOTH_FIELDS)
        assert field_errors(state).password is None
