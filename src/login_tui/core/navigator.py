# =============================================================================
# Navigator
# =============================================================================
# Holds the active route and tells interested parties when it changes.
#
# There is no history: navigate() replaces the current route outright. The
# app subscribes once and swaps screens whenever it is notified, so the
# navigator itself stays free of any UI code.
# =============================================================================

import logging
from typing import Callable

from login_tui.core.routes import INITIAL_ROUTE, Route, parse_route

logger = logging.getLogger(__name__)

RouteListener = Callable[[Route], None]


class Navigator:
    """
    Tracks the current route.

    Usage:
        >>> nav = Navigator()
        >>> nav.current
        Login()
        >>> nav.navigate("welcome/alice")
        Welcome(username='alice')
    """

    def __init__(self, initial: Route = INITIAL_ROUTE) -> None:
        self._current: Route = initial
        self._listeners: list[RouteListener] = []

    @property
    def current(self) -> Route:
        """The active route."""
        return self._current

    def subscribe(self, listener: RouteListener) -> Callable[[], None]:
        """
        Register a callback for route changes.

        Args:
            listener: Called with the new route after every navigate().

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def navigate(self, target: Route | str) -> Route:
        """
        Make target the active route.

        Args:
            target: A Route, or a path string to be parsed.

        Returns:
            The new active route.

        Raises:
            RouteError: If target is a path that matches no route.
        """
        route = parse_route(target) if isinstance(target, str) else target

        logger.info(f"Navigating {self._current.path} -> {route.path}")
        self._current = route

        for listener in list(self._listeners):
            listener(route)

        return route
