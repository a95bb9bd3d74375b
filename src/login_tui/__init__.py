# =============================================================================
# Login-TUI: A Terminal Login Flow
# =============================================================================
#
# Login-TUI is a small Textual application with three screens:
#
#   - Login: username and password fields, with client-side validation
#   - Welcome: greets the user by name after a successful submit
#   - Forgot Password: a placeholder screen
#
# There is no authentication backend. Validation only checks that both
# fields are filled in and that the password is long enough.
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "login-tui"

# Main entry point - this is what gets called by the 'login-tui' command
from login_tui.app import main

__all__ = ["main", "__version__", "__app_name__"]
