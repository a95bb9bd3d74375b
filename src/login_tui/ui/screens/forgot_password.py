# =============================================================================
# Forgot Password Screen
# =============================================================================
# Placeholder for a password reset flow. Only shows a title.
# =============================================================================

from textual.app import ComposeResult
from textual.widgets import Footer, Header, Static

from login_tui.ui.screens.base import BaseScreen

FORGOT_PASSWORD_TEXT = "Forgot Password Screen"


class ForgotPasswordScreen(BaseScreen):
    """Placeholder screen reached from the login form's "Forgot Password?" link."""

    CSS = """
    ForgotPasswordScreen {
        align: center middle;
    }

    #forgot-password-text {
        width: auto;
        padding: 1 2;
        text-style: bold;
        color: $accent;
        text-align: center;
    }
    """

    @property
    def message(self) -> str:
        return FORGOT_PASSWORD_TEXT

    def compose(self) -> ComposeResult:
        if self.show_header:
            yield Header()
        yield Static(self.message, id="forgot-password-text")
        if self.show_footer:
            yield Footer()
