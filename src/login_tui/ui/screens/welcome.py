# =============================================================================
# Welcome Screen
# =============================================================================
# Shown after a successful login. Greets the user by the name carried in the
# Welcome route.
# =============================================================================

from textual.app import ComposeResult
from textual.widgets import Footer, Header, Static

from login_tui.core.routes import DEFAULT_USERNAME, Welcome
from login_tui.ui.screens.base import BaseScreen


class WelcomeScreen(BaseScreen):
    """
    Greeting screen.

    Attributes:
        route: The Welcome route this screen was built from.
    """

    CSS = """
    WelcomeScreen {
        align: center middle;
    }

    #welcome-text {
        width: auto;
        padding: 1 2;
        text-style: bold;
        color: $accent;
        text-align: center;
    }
    """

    def __init__(self, username: str = DEFAULT_USERNAME) -> None:
        """
        Initialize the welcome screen.

        Args:
            username: Name to greet.
        """
        super().__init__()
        self.route = Welcome(username)

    @property
    def greeting(self) -> str:
        """The text shown on screen, e.g. "Welcome, alice!"."""
        return self.route.greeting

    def compose(self) -> ComposeResult:
        if self.show_header:
            yield Header()
        yield Static(self.greeting, id="welcome-text")
        if self.show_footer:
            yield Footer()
