# =============================================================================
# Login-TUI Entry Point for `python -m login_tui`
# =============================================================================
# This module allows Login-TUI to be run as a Python module:
#
#   python -m login_tui
#
# This is equivalent to running the 'login-tui' command after installation.
# =============================================================================

import sys

from login_tui.app import main

if __name__ == "__main__":
    sys.exit(main())
