"""Rich display surfaces for the help panel."""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from keychoice.utils.debug import debug_display

# Widest a surface panel gets
PANEL_WIDTH = 80

console = Console()


def get_console() -> Console:
    """Return the shared console."""
    return console


@dataclass(frozen=True)
class Surface:
    """Handle for one named surface."""

    name: str


@dataclass(frozen=True)
class UiContext:
    """What was open when capture_context() was called."""

    open_surfaces: frozenset


def show_cursor(target: Optional[Console] = None) -> None:
    """Show the cursor (no-op when not writing to a terminal)."""
    (target or console).show_cursor(True)


class RichDisplay:
    """Surfaces drawn on the terminal's alternate screen.

    The first open surface switches to the alternate screen, so closing the
    last one brings back the screen exactly as it was. On a non-terminal
    console the panels are simply printed.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()
        self._surfaces: dict[str, Surface] = {}

    @property
    def open_surfaces(self) -> list[str]:
        return list(self._surfaces)

    def get_or_create_surface(self, name: str) -> Surface:
        surface = self._surfaces.get(name)
        if surface is None:
            if not self._surfaces:
                self.console.set_alt_screen(True)
            surface = Surface(name)
            self._surfaces[name] = surface
            debug_display("surface opened", name=name)
        return surface

    def show(self, surface: Surface, text: str) -> None:
        self.console.clear()
        self.console.print(
            Panel(
                Text(text),
                title=surface.name,
                border_style="cyan",
                width=min(PANEL_WIDTH, self.console.width),
            )
        )

    def close(self, surface: Surface) -> None:
        if self._surfaces.pop(surface.name, None) is None:
            return
        debug_display("surface closed", name=surface.name)
        if not self._surfaces:
            self.console.set_alt_screen(False)

    def capture_context(self) -> UiContext:
        return UiContext(open_surfaces=frozenset(self._surfaces))

    def restore_context(self, context: UiContext) -> None:
        """Close surfaces opened since context was captured."""
        for name in list(self._surfaces):
            if name not in context.open_surfaces:
                self.close(self._surfaces[name])
        show_cursor(self.console)
