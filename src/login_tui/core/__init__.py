# =============================================================================
# Login-TUI Core Module
# =============================================================================
# Pure Python state and routing for the login flow. Nothing in here imports
# Textual, so the screens can depend on it without cycles and the logic can
# be tested without running an app.
#
#   - FormState + reducers: what the login form holds and how input changes it
#   - Route variants: Login, Welcome(username), ForgotPassword
#   - Navigator: the currently active route
# =============================================================================

from login_tui.core.form import (
    FILL_BOTH_FIELDS,
    MIN_PASSWORD_LENGTH,
    PASSWORD_EMPTY,
    USERNAME_EMPTY,
    FieldErrors,
    FormState,
    SubmitResult,
    edit_password,
    edit_username,
    field_errors,
    password_too_short_message,
    submit,
    toggle_password_visibility,
)
from login_tui.core.navigator import Navigator
from login_tui.core.routes import (
    DEFAULT_USERNAME,
    INITIAL_ROUTE,
    ForgotPassword,
    Login,
    Route,
    RouteError,
    Welcome,
    parse_route,
    route_path,
)

__all__ = [
    "FILL_BOTH_FIELDS",
    "MIN_PASSWORD_LENGTH",
    "PASSWORD_EMPTY",
    "USERNAME_EMPTY",
    "FieldErrors",
    "FormState",
    "SubmitResult",
    "edit_password",
    "edit_username",
    "field_errors",
    "password_too_short_message",
    "submit",
    "toggle_password_visibility",
    "Navigator",
    "DEFAULT_USERNAME",
    "INITIAL_ROUTE",
    "ForgotPassword",
    "Login",
    "Route",
    "RouteError",
    "Welcome",
    "parse_route",
    "route_path",
]
