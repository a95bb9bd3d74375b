# =============================================================================
# Login Form State
# =============================================================================
# The state held by the login screen, and the pure functions that move it
# from one value to the next in response to user input.
#
# The screen owns exactly one FormState at a time. Every event (typing into a
# field, toggling password visibility, pressing Submit) is turned into a call
# to one of the reducer functions below, and the screen re-renders from the
# returned state. Nothing here touches Textual, so it can be tested directly.
#
# Validation is never signalled with exceptions: a failed submit simply
# produces a state whose error_message is set.
# =============================================================================

from dataclasses import dataclass, replace

from login_tui.core.routes import Route, Welcome


# =============================================================================
# Messages
# =============================================================================

MIN_PASSWORD_LENGTH = 6

FILL_BOTH_FIELDS = "Please fill in both fields"
USERNAME_EMPTY = "Username cannot be empty"
PASSWORD_EMPTY = "Password cannot be empty"


def password_too_short_message(min_length: int = MIN_PASSWORD_LENGTH) -> str:
    """Message shown when the password is shorter than min_length."""
    return f"Password must be at least {min_length} characters long"


def is_blank(value: str) -> bool:
    """True for an empty string or one made only of whitespace."""
    return not value.strip()


# =============================================================================
# State
# =============================================================================

@dataclass(frozen=True)
class FormState:
    """
    Everything the login form remembers while it is on screen.

    Attributes:
        username: Current contents of the username field.
        password: Current contents of the password field.
        password_visible: Whether the password is shown in clear text.
        error_message: Form-level error from the last submit. Empty unless
                       the most recent action was a failed submit.
    """
    username: str = ""
    password: str = ""
    password_visible: bool = False
    error_message: str = ""

    def __repr__(self) -> str:
        # Keep passwords out of logs and tracebacks
        return (
            f"FormState(username={self.username!r}, "
            f"password=<{len(self.password)} chars>, "
            f"password_visible={self.password_visible}, "
            f"error_message={self.error_message!r})"
        )


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of a submit.

    Attributes:
        state: The form state after validation.
        route: Where to navigate next, or None to stay on the form.
    """
    state: FormState
    route: Route | None = None

    @property
    def ok(self) -> bool:
        return self.route is not None


@dataclass(frozen=True)
class FieldErrors:
    """Field-level error lines rendered under each input (None = hidden)."""
    username: str | None = None
    password: str | None = None


# =============================================================================
# Reducers
# =============================================================================

def edit_username(state: FormState, value: str) -> FormState:
    """Store a new username and clear any pending error."""
    return replace(state, username=value, error_message="")


def edit_password(state: FormState, value: str) -> FormState:
    """Store a new password and clear any pending error."""
    return replace(state, password=value, error_message="")


def toggle_password_visibility(state: FormState) -> FormState:
    return replace(state, password_visible=not state.password_visible)


def submit(state: FormState, min_password_length: int = MIN_PASSWORD_LENGTH) -> SubmitResult:
    """
    Validate the form.

    Rules are checked in order and the first one that fires wins:
        1. Either field blank -> FILL_BOTH_FIELDS
        2. Password too short -> password_too_short_message()
        3. Otherwise -> navigate to Welcome(username)

    Args:
        state: Current form state.
        min_password_length: Minimum accepted password length.

    Returns:
        A SubmitResult. On success the state is returned untouched and the
        route is set; on failure only error_message changes.
    """
    if is_blank(state.username) or is_blank(state.password):
        return SubmitResult(replace(state, error_message=FILL_BOTH_FIELDS))

    if len(state.password) < min_password_length:
        return SubmitResult(
            replace(state, error_message=password_too_short_message(min_password_length))
        )

    return SubmitResult(state, Welcome(state.username))


# =============================================================================
# Display Rules
# =============================================================================

def field_errors(state: FormState, min_password_length: int = MIN_PASSWORD_LENGTH) -> FieldErrors:
    """
    Work out which field-level error lines to show.

    This is evaluated on every render and does not look at *which* message
    error_message holds, only whether it is set. The password line also
    reports a short password live, before any submit.
    """
    username_error = None
    if is_blank(state.username) and state.error_message:
        username_error = USERNAME_EMPTY

    password_error = None
    if is_blank(state.password) and state.error_message:
        password_error = PASSWORD_EMPTY
    elif state.password and len(state.password) < min_password_length:
        password_error = password_too_short_message(min_password_length)

    return FieldErrors(username=username_error, password=password_error)
