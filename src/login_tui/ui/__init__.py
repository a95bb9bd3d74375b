# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for Login-TUI.
#
# Structure:
#   - screens/: Full-screen views (login, welcome, forgot password)
#
# Screens keep no logic of their own beyond wiring: validation and routing
# live in login_tui.core, and the screens render whatever state it returns.
# =============================================================================

from login_tui.ui.screens import ForgotPasswordScreen, LoginScreen, WelcomeScreen

__all__ = [
    "LoginScreen",
    "WelcomeScreen",
    "ForgotPasswordScreen",
]
