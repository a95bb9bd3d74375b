# =============================================================================
# Base Screen
# =============================================================================
# Shared behaviour for every Login-TUI screen: whether to draw the Textual
# header and footer, as set in the [ui] section of the config.
# =============================================================================

from textual.screen import Screen


class BaseScreen(Screen):
    """Screen that reads its header/footer settings from the app config."""

    @property
    def show_header(self) -> bool:
        config = getattr(self.app, "config", None)
        return config.ui.show_header if config is not None else True

    @property
    def show_footer(self) -> bool:
        config = getattr(self.app, "config", None)
        return config.ui.show_footer if config is not None else True
