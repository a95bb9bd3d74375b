# =============================================================================
# Login-TUI Main Application
# =============================================================================
# This is the main Textual application class that ties the login flow
# together.
#
# The app owns a Navigator (the current route) and keeps exactly one screen
# on display for it:
#   - Login           -> LoginScreen
#   - Welcome(name)   -> WelcomeScreen
#   - ForgotPassword  -> ForgotPasswordScreen
#
# Every route change builds a brand new screen and swaps it in, so the login
# form's state never outlives the login screen.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from login_tui import __version__, __app_name__
from login_tui.config import Config, ConfigError, LoggingConfig, print_paths
from login_tui.core.navigator import Navigator
from login_tui.core.routes import ForgotPassword, Login, Route, Welcome
from login_tui.ui.screens import ForgotPasswordScreen, LoginScreen, WelcomeScreen

logger = logging.getLogger(__name__)


class LoginApp(App):
    """
    The main Login-TUI application.

    Attributes:
        config: The loaded application configuration.
        navigator: Holds the active route. Screens ask the app to navigate,
                   the app forwards to the navigator, and the navigator's
                   listener swaps the screen.
    """

    TITLE = "Login-TUI"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "show_help", "Help"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        """
        Initialize the Login-TUI application.

        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
            navigator: Optional navigator, mainly for tests. A new one
                       starting at the Login route is created otherwise.
        """
        super().__init__()

        self._config_error: str | None = None

        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

        self.navigator = navigator or Navigator()
        self.navigator.subscribe(self._on_route_changed)

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        if self._config_error:
            logger.error(f"Config error: {self._config_error}")
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        route = self.navigator.current
        self.sub_title = route.path
        await self.push_screen(self.screen_for_route(route))

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, target: Route | str) -> Route:
        """
        Go to another screen.

        Args:
            target: A Route, or a path such as "welcome/alice".

        Returns:
            The new active route.
        """
        return self.navigator.navigate(target)

    def screen_for_route(self, route: Route) -> Screen:
        """Build a fresh screen for route."""
        if isinstance(route, Welcome):
            return WelcomeScreen(route.username)
        if isinstance(route, ForgotPassword):
            return ForgotPasswordScreen()
        if isinstance(route, Login):
            return LoginScreen(min_password_length=self.config.login.min_password_length)
        raise TypeError(f"No screen for route {route!r}")

    def _on_route_changed(self, route: Route) -> None:
        """Replace the active screen with one for route."""
        self.sub_title = route.path
        self.switch_screen(self.screen_for_route(route))

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_show_help(self) -> None:
        """Show the help notification."""
        self.notify(
            "Keybindings: Tab=next field, Enter=submit, Ctrl+T=show/hide password, Ctrl+Q=quit",
            timeout=10,
        )


# =============================================================================
# Logging
# =============================================================================

def setup_logging(log_config: LoggingConfig, debug: bool = False) -> Path:
    """
    Send log records to the log file.

    The terminal belongs to the TUI, so nothing is logged to stderr.

    Args:
        log_config: Logging section of the config.
        debug: Force DEBUG level regardless of the config.

    Returns:
        Path of the log file.
    """
    log_path = log_config.path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s")
    )

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else log_config.level)

    return log_path


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Login-TUI: a terminal login form with welcome and password reset screens",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for Login-TUI.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and sets up logging
        4. Starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    if args.paths:
        print_paths()
        return 0

    # An explicit --config must load. A broken default config is reported
    # inside the app, which then runs on defaults.
    config = None
    try:
        config = Config.load(args.config)
    except ConfigError as e:
        if args.config:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    log_config = config.logging if config is not None else LoggingConfig()
    log_path = setup_logging(log_config, debug=args.debug)
    logger.info(f"Starting {__app_name__} {__version__} (log: {log_path})")

    app = LoginApp(config=config)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
