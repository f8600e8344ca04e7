"""Event loop driving the navigator, using the transitions library.

One cycle: clear the screen, render the current page, read a line, interpret
it, apply the resulting action. The loop lifecycle is an explicit state machine:

    rendering -> reading -> applying -> rendering ...
    any running state -> stopped

The loop stops when the page stack is empty (Exit) or on the first error,
which is shown to the user before stopping. There is no retry.

Usage:
    from epicboard.app import EventLoop, RichTerminal

    loop = EventLoop(navigator, RichTerminal(console))
    exit_code = loop.run()
"""

import logging
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape
from transitions import Machine

from epicboard.errors import EpicboardError
from epicboard.navigator import Navigator

logger = logging.getLogger(__name__)


STATES = [
    "rendering",
    "reading",
    "applying",
    "stopped",
]

# Each trigger becomes a method on the EventLoop
TRANSITIONS = [
    {"trigger": "page_rendered", "source": "rendering", "dest": "reading"},
    {"trigger": "input_received", "source": "reading", "dest": "applying"},
    {"trigger": "input_handled", "source": "applying", "dest": "rendering"},
    {"trigger": "halt", "source": ["rendering", "reading", "applying"], "dest": "stopped"},
]


class Terminal(ABC):
    """Raw terminal I/O the loop depends on."""

    @abstractmethod
    def clear_screen(self) -> None:
        pass

    @abstractmethod
    def read_line(self) -> str:
        pass

    @abstractmethod
    def wait_for_keypress(self) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass


class RichTerminal(Terminal):
    """Terminal backed by a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def clear_screen(self) -> None:
        self.console.clear()

    def read_line(self) -> str:
        return self.console.input()

    def wait_for_keypress(self) -> None:
        self.console.input("[dim]Press enter to continue...[/dim]")

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")


class EventLoop:
    """Render/read/apply loop over a navigator.

    The transitions Machine adds the trigger methods (page_rendered,
    input_received, input_handled, halt) and `state` / `is_stopped()`.
    """

    def __init__(self, navigator: Navigator, terminal: Terminal):
        self.navigator = navigator
        self.terminal = terminal
        self.error: Exception | None = None

        self.machine = Machine(
            model=self,
            states=STATES,
            transitions=TRANSITIONS,
            initial="rendering",
            auto_transitions=False,
            send_event=True,
            after_state_change="on_state_change",
        )

    def on_state_change(self, event) -> None:
        logger.debug(
            f"[LOOP] {event.transition.source} -> {event.transition.dest} ({event.event.name})"
        )

    def step(self) -> None:
        """Run one cycle. Stops the loop on an empty stack, EOF, or an error."""
        page = self.navigator.current_page
        if page is None:
            logger.info("[LOOP] Page stack empty, stopping")
            self.halt()
            return

        try:
            self.terminal.clear_screen()
            page.render()
            self.page_rendered()

            raw = self.terminal.read_line().strip()
            self.input_received()

            action = page.interpret(raw)
            if action is None:
                logger.debug(f"[LOOP] Ignoring input {raw!r} on {page!r}")
            else:
                self.navigator.handle_action(action)
            self.input_handled()
        except EOFError:
            logger.info("[LOOP] Input closed, stopping")
            self.halt()
        except EpicboardError as e:
            self._fail(e)

    def _fail(self, error: EpicboardError) -> None:
        self.error = error
        logger.error(f"[LOOP] Stopping on error in state {self.state}: {error}")
        self.terminal.show_error(str(error))
        try:
            self.terminal.wait_for_keypress()
        except EOFError:
            logger.info("[LOOP] Input closed while showing error")
        self.halt()

    def run(self) -> int:
        """Run until stopped. Returns 0 after a clean exit, 1 after an error."""
        while not self.is_stopped():
            self.step()
        return 1 if self.error else 0
