# =============================================================================
# Route Tests
# =============================================================================

import pytest

from login_tui.core import (
    DEFAULT_USERNAME,
    INITIAL_ROUTE,
    ForgotPassword,
    Login,
    RouteError,
    Welcome,
    parse_route,
    route_path,
)


def test_initial_route_is_login():
    assert INITIAL_ROUTE == Login()


@pytest.mark.parametrize(
    "path, expected",
    [
        ("login", Login()),
        ("/login", Login()),
        ("forgot_password", ForgotPassword()),
        ("welcome/alice", Welcome("alice")),
        ("welcome/John%20Doe", Welcome("John Doe")),
    ],
)
def test_parse_route(path, expected):
    assert parse_route(path) == expected


@pytest.mark.parametrize("path", ["welcome", "welcome/"])
def test_welcome_without_username_defaults(path):
    route = parse_route(path)
    assert route == Welcome(DEFAULT_USERNAME)
    assert route.greeting == "Welcome, User!"


def test_welcome_default_constructor():
    assert Welcome().username == "User"


def test_empty_username_path_falls_back_to_default():
    path = route_path(Welcome(""))
    assert path == "welcome/"
    assert parse_route(path) == Welcome("User")


def test_route_paths():
    assert route_path(Login()) == "login"
    assert route_path(ForgotPassword()) == "forgot_password"
    assert route_path(Welcome("alice")) == "welcome/alice"


def test_awkward_usernames_survive_the_path():
    for name in ["a/b", "who?", "50% off", "ünï"]:
        path = route_path(Welcome(name))
        assert path.count("/") == 1
        assert parse_route(path) == Welcome(name)


@pytest.mark.parametrize("path", ["", "home", "welcome/a/b", "loginx"])
def test_unknown_path_raises(path):
    with pytest.raises(RouteError):
        parse_route(path)


def test_greeting():
    assert Welcome("alice").greeting == "Welcome, alice!"
