# =============================================================================
# Login Screen
# =============================================================================
# The login form: username, password with a SHOW/HIDE toggle, Submit, and a
# "Forgot Password?" link.
#
# All form data lives in a single FormState held as a reactive. Event
# handlers never poke widgets directly; they run a reducer from
# login_tui.core.form, assign the result, and the watcher re-renders.
#
# Navigation is requested from the app, which replaces this screen with a
# new one. The form state goes away with the screen.
# =============================================================================

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.widgets import Button, Footer, Header, Input, Static

from login_tui.core.form import (
    MIN_PASSWORD_LENGTH,
    FormState,
    edit_password,
    edit_username,
    field_errors,
    submit,
    toggle_password_visibility,
)
from login_tui.core.routes import ForgotPassword
from login_tui.ui.screens.base import BaseScreen

logger = logging.getLogger(__name__)


class LoginScreen(BaseScreen):
    """
    Screen holding the login form.

    Keybindings:
        - Enter (in either field): Submit
        - Ctrl+T: Show/hide password

    Attributes:
        state: The current FormState. Fresh for every screen instance.
    """

    BINDINGS = [
        Binding("ctrl+t", "toggle_password", "Show/Hide"),
    ]

    CSS = """
    LoginScreen {
        align: center middle;
    }

    #login-form {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $primary;
    }

    #login-title {
        text-align: center;
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }

    #password-row {
        height: auto;
    }

    #password-input {
        width: 1fr;
    }

    #toggle-password-btn {
        min-width: 8;
    }

    Input.field-invalid {
        border: tall $error;
    }

    .field-error {
        color: $error;
        height: auto;
        margin-bottom: 1;
    }

    #submit-btn {
        width: 100%;
        margin-top: 1;
    }

    #forgot-btn {
        width: 100%;
    }
    """

    state: reactive[FormState] = reactive(FormState, init=False)

    def __init__(self, min_password_length: int = MIN_PASSWORD_LENGTH) -> None:
        """
        Initialize the login screen.

        Args:
            min_password_length: Shortest password accepted on submit.
        """
        super().__init__()
        self._min_password_length = min_password_length

    def compose(self) -> ComposeResult:
        """
        Compose the login form.

        Layout:
        ┌──────────────────────────────────────┐
        │                Login                 │
        │ [Username                          ] │
        │ Username cannot be empty             │
        │ [Password                   ] [SHOW] │
        │ Password cannot be empty             │
        │ [            Submit                ] │
        │ [       Forgot Password?           ] │
        └──────────────────────────────────────┘
        """
        if self.show_header:
            yield Header()

        with Vertical(id="login-form"):
            yield Static("Login", id="login-title")
            yield Input(placeholder="Username", id="username-input")
            yield Static("", id="username-error", classes="field-error")
            with Horizontal(id="password-row"):
                yield Input(placeholder="Password", password=True, id="password-input")
                yield Button("SHOW", id="toggle-password-btn")
            yield Static("", id="password-error", classes="field-error")
            yield Button("Submit", id="submit-btn", variant="primary")
            yield Button("Forgot Password?", id="forgot-btn")

        if self.show_footer:
            yield Footer()

    def on_mount(self) -> None:
        """Render the initial state and focus the username field."""
        self._render_state(self.state)
        self.query_one("#username-input", Input).focus()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def watch_state(self, state: FormState) -> None:
        self._render_state(state)

    def _render_state(self, state: FormState) -> None:
        """Bring the widgets in line with state."""
        errors = field_errors(state, self._min_password_length)

        username_error = self.query_one("#username-error", Static)
        username_error.update(errors.username or "")
        username_error.display = errors.username is not None
        self.query_one("#username-input", Input).set_class(
            errors.username is not None, "field-invalid"
        )

        password_error = self.query_one("#password-error", Static)
        password_error.update(errors.password or "")
        password_error.display = errors.password is not None
        password_input = self.query_one("#password-input", Input)
        password_input.set_class(errors.password is not None, "field-invalid")
        password_input.password = not state.password_visible

        toggle = self.query_one("#toggle-password-btn", Button)
        toggle.label = "HIDE" if state.password_visible else "SHOW"

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        """Copy field edits into the form state."""
        if event.input.id == "username-input":
            self.state = edit_username(self.state, event.value)
        elif event.input.id == "password-input":
            self.state = edit_password(self.state, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in either field."""
        self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "submit-btn":
            self.action_submit()
        elif event.button.id == "forgot-btn":
            self.action_forgot_password()
        elif event.button.id == "toggle-password-btn":
            self.action_toggle_password()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_submit(self) -> None:
        """Validate the form and move on to the welcome screen if it passes."""
        result = submit(self.state, self._min_password_length)
        self.state = result.state

        if not result.ok:
            logger.info(f"Login rejected: {result.state.error_message}")
            return

        logger.info(f"Login accepted for {self.state.username!r}")
        self.app.navigate(result.route)

    def action_toggle_password(self) -> None:
        self.state = toggle_password_visibility(self.state)

    def action_forgot_password(self) -> None:
        self.app.navigate(ForgotPassword())
