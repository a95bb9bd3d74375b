# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application, one per route.
#
# The app shows one screen at a time. Navigating replaces the current screen
# with a freshly built one, so no screen keeps state across navigation.
#
#   - LoginScreen: Username/password form (Login route)
#   - WelcomeScreen: Greeting after a successful submit (Welcome route)
#   - ForgotPasswordScreen: Placeholder (ForgotPassword route)
# =============================================================================

from login_tui.ui.screens.login import LoginScreen
from login_tui.ui.screens.welcome import WelcomeScreen
from login_tui.ui.screens.forgot_password import ForgotPasswordScreen

__all__ = ["LoginScreen", "WelcomeScreen", "ForgotPasswordScreen"]
