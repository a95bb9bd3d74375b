# =============================================================================
# Navigator Tests
# =============================================================================

import pytest

from login_tui.core import ForgotPassword, Login, Navigator, RouteError, Welcome


def test_starts_at_login():
    assert Navigator().current == Login()


def test_navigate_replaces_current():
    nav = Navigator()
    assert nav.navigate(Welcome("alice")) == Welcome("alice")
    assert nav.current == Welcome("alice")
    nav.navigate(ForgotPassword())
    assert nav.current == ForgotPassword()


def test_navigate_by_path():
    nav = Navigator()
    nav.navigate("welcome")
    assert nav.current == Welcome("User")


def test_unknown_path_leaves_route_alone():
    nav = Navigator()
    with pytest.raises(RouteError):
        nav.navigate("nowhere")
    assert nav.current == Login()


def test_listeners_are_notified():
    nav = Navigator()
    seen = []
    nav.subscribe(seen.append)
    nav.navigate(ForgotPassword())
    nav.navigate(ForgotPassword())
    assert seen == [ForgotPassword(), ForgotPassword()]


def test_unsubscribe():
    nav = Navigator()
    seen = []
    unsubscribe = nav.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    nav.navigate(ForgotPassword())
    assert seen == []


def test_custom_initial_route():
    assert Navigator(initial=ForgotPassword()).current == ForgotPassword()
