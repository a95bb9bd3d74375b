# =============================================================================
# Routes
# =============================================================================
# The screens the app can show, as values.
#
# Each route is a small frozen dataclass carrying its own parameters:
#   - Login:           the login form (initial route)
#   - Welcome:         greeting screen, carries the username
#   - ForgotPassword:  placeholder screen
#
# Routes also have a string form ("login", "welcome/alice", ...) matching the
# route table below. Path parameters are percent-encoded so that any username
# survives the trip through a path.
# =============================================================================

import re
from dataclasses import dataclass
from typing import Callable
from urllib.parse import quote, unquote


DEFAULT_USERNAME = "User"


@dataclass(frozen=True)
class Login:
    """The login form."""

    @property
    def path(self) -> str:
        return "login"


@dataclass(frozen=True)
class Welcome:
    """
    The welcome screen.

    Attributes:
        username: Name to greet. Falls back to DEFAULT_USERNAME when the
                  route is built without one.
    """
    username: str = DEFAULT_USERNAME

    @property
    def path(self) -> str:
        """
        Path for this route, e.g. "welcome/alice".

        An empty username gives "welcome/", which parses back as the
        default Welcome("User").
        """
        return f"welcome/{quote(self.username, safe='')}"

    @property
    def greeting(self) -> str:
        return f"Welcome, {self.username}!"


@dataclass(frozen=True)
class ForgotPassword:
    """Placeholder for the password reset flow."""

    @property
    def path(self) -> str:
        return "forgot_password"


Route = Login | Welcome | ForgotPassword

INITIAL_ROUTE: Route = Login()


class RouteError(ValueError):
    """Raised when a path doesn't match any known route."""
    pass


# =============================================================================
# Route Table
# =============================================================================

def _welcome_from_params(params: dict[str, str]) -> Welcome:
    username = params.get("username")
    if not username:
        return Welcome()
    return Welcome(unquote(username))


# (pattern, constructor) pairs. Patterns use {name} for a single path segment;
# a trailing parameter may be omitted entirely.
ROUTE_TABLE: list[tuple[str, Callable[[dict[str, str]], Route]]] = [
    ("login", lambda params: Login()),
    ("welcome/{username}", _welcome_from_params),
    ("forgot_password", lambda params: ForgotPassword()),
]


def _compile(pattern: str) -> re.Pattern[str]:
    """
    Turn a route pattern into a regex.

    "welcome/{username}" matches "welcome", "welcome/" and "welcome/alice".
    """
    parts = pattern.split("/")
    regex = re.escape(parts[0])
    for part in parts[1:]:
        match = re.fullmatch(r"\{(\w+)\}", part)
        if match:
            regex += f"(?:/(?P<{match.group(1)}>[^/]*))?"
        else:
            regex += "/" + re.escape(part)
    return re.compile(regex)


_COMPILED_TABLE = [(_compile(pattern), build) for pattern, build in ROUTE_TABLE]


def parse_route(path: str) -> Route:
    """
    Resolve a path string to a Route.

    Args:
        path: A path like "login" or "welcome/alice". A leading slash is
              ignored.

    Returns:
        The matching Route, with missing parameters defaulted.

    Raises:
        RouteError: If the path matches no route.
    """
    normalized = path.lstrip("/")
    for regex, build in _COMPILED_TABLE:
        match = regex.fullmatch(normalized)
        if match:
            params = {k: v for k, v in match.groupdict().items() if v is not None}
            return build(params)
    raise RouteError(f"Unknown route: {path!r}")


def route_path(route: Route) -> str:
    """Return the path string for a route."""
    return route.path
