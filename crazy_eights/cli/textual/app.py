"""Textual-powered interactive Crazy Eights interface."""

from __future__ import annotations

import random
from contextlib import suppress
from functools import partial
from typing import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from ... import rules
from ...actions import Action, ChooseSuit, DrawCard, PlayCard
from ...cards import Card, Suit
from ...session import GameSession, OpponentTicket
from ...state import Difficulty, GameConfig, GameState, GameStatus, Side
from ..render import describe_transition, format_card, format_hand, format_suit

MAX_EVENT_LINES = 18


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class InfoPanel(Static):
    """Reusable wrapper that expects ``update_panel`` calls with Rich renderables."""

    def update_panel(self, title: str, body) -> None:
        self.update(Panel(body, title=title, border_style="cyan"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class ActionPalette(OptionList):
    """Interactive list used for every prompt."""

    class Choice(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, entries: Sequence[str]) -> None:
        options = [
            Option(f"[bold]{idx + 1}[/bold] {entry}", id=str(idx))
            for idx, entry in enumerate(entries)
        ]
        super().__init__(*options)
        if options:
            self.highlighted = 0

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:  # pragma: no cover - Textual glue
        event.stop()
        if event.option.id is None:
            return
        self.post_message(self.Choice(int(event.option.id)))

    def on_key(self, event: events.Key) -> None:  # pragma: no cover - driven by UI interaction
        if event.key.isdigit() and event.key != "0":
            index = int(event.key) - 1
            if 0 <= index < self.option_count:
                self.highlighted = index
                self.post_message(self.Choice(index))
                event.stop()


class CrazyEightsApp(App):
    """Textual Crazy Eights game UI."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
    }

    #left, #right {
        layout: vertical;
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    ActionPalette {
        border: heavy $accent;
        height: auto;
        max-height: 16;
    }

    InfoPanel, EventLog {
        width: 100%;
        min-height: 5;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "new_game", "New game"),
        Binding("h", "go_home", "Home"),
    ]

    def __init__(
        self,
        *,
        difficulty: Difficulty,
        seed: int | None,
        config: GameConfig,
    ) -> None:
        super().__init__()
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.session = GameSession(config=config, rng=random.Random(seed), difficulty=difficulty)
        self.session.subscribe(self._on_transition)
        self._opponent_timer: Timer | None = None
        self._active_palette: ActionPalette | None = None
        self._pending_kind: str | None = None
        self._pending_choices: list[object] = []

        self.status_strip: StatusStrip | None = None
        self.table_panel: InfoPanel | None = None
        self.hand_panel: InfoPanel | None = None
        self.event_log: EventLog | None = None
        self.actions_container: Vertical | None = None
        self.action_prompt: Static | None = None

    @property
    def game_state(self) -> GameState:
        return self.session.state

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.table_panel = InfoPanel(id="table")
        self.hand_panel = InfoPanel(id="hand")
        self.action_prompt = Static(Text.from_markup("[dim]Waiting…[/dim]"), id="actions-prompt")
        self.actions_container = Vertical(self.action_prompt, id="actions")
        left = Vertical(self.table_panel, self.hand_panel, self.actions_container, id="left")

        self.event_log = EventLog(id="events")
        right = Vertical(self.event_log, id="right")

        yield Horizontal(left, right, id="main")
        yield Footer()

    async def on_mount(self) -> None:
        self._set_status("Welcome to Crazy Eights! Match the suit or rank of the top card. 8s are wild.")
        await self._sync()

    async def action_new_game(self) -> None:
        self.session.start()
        await self._sync()

    async def action_go_home(self) -> None:
        self.session.go_home()
        await self._sync()

    def _on_transition(self, previous: GameState, current: GameState, action: Action) -> None:
        message = describe_transition(previous, current, action)
        if message:
            self._set_status(message)
            if self.event_log:
                self.event_log.add(message)

    async def _sync(self) -> None:
        """Redraw, re-arm the computer timer and prompt the human as needed."""

        self._stop_opponent_timer()
        self._refresh_ui()
        ticket = self.session.schedule_opponent()
        if ticket is not None:
            self._opponent_timer = self.set_timer(ticket.delay, partial(self._run_opponent, ticket))
        await self._prompt_for_status()

    async def _run_opponent(self, ticket: OpponentTicket) -> None:
        self._opponent_timer = None
        if self.session.resolve(ticket):
            await self._sync()

    def _stop_opponent_timer(self) -> None:
        if self._opponent_timer is not None:
            self._opponent_timer.stop()
            self._opponent_timer = None

    async def _prompt_for_status(self) -> None:
        game_state = self.game_state
        status = game_state.status
        if status is GameStatus.WAITING:
            choices: list[object] = list(Difficulty)
            entries = [f"Start game ({difficulty.value})" for difficulty in Difficulty]
            await self._mount_palette("home", "Select difficulty", entries, choices)
        elif status is GameStatus.CHOOSING_SUIT:
            suits: list[object] = list(Suit)
            entries = [f"{format_suit(suit)} {suit.value}" for suit in Suit]
            await self._mount_palette("suit", "Pick a suit", entries, suits)
        elif status is GameStatus.GAME_OVER:
            await self._mount_palette("over", "Game over", ["Play again", "Back to home"], ["again", "home"])
        elif game_state.turn is Side.PLAYER:
            playable = rules.playable_cards(
                game_state.player_hand, game_state.top_card, game_state.current_suit
            )
            if playable:
                entries = [f"Play {format_card(card)}" for card in playable]
                await self._mount_palette("play", "Your turn", entries, list(playable))
            elif rules.can_draw(game_state):
                await self._mount_palette("draw", "No playable card", ["Draw card"], ["draw"])
        else:
            await self._dismiss_palette()
            if self.action_prompt:
                self.action_prompt.update(Text.from_markup("[dim]Computer is thinking…[/dim]"))

    async def _mount_palette(
        self,
        kind: str,
        prompt: str,
        entries: Sequence[str],
        choices: Sequence[object],
    ) -> None:
        await self._dismiss_palette()
        palette = ActionPalette(entries)
        self._active_palette = palette
        self._pending_kind = kind
        self._pending_choices = list(choices)
        if self.actions_container is not None:
            if self.action_prompt:
                self.action_prompt.update(
                    Text.from_markup(f"[bold]{prompt}[/bold] — use arrows or number keys")
                )
            await self.actions_container.mount(palette)
            palette.focus()

    async def _dismiss_palette(self) -> None:
        palette = self._active_palette
        self._active_palette = None
        self._pending_kind = None
        self._pending_choices = []
        if palette is None:
            return
        with suppress(Exception):  # pragma: no cover - defensive cleanup
            await palette.remove()

    @on(ActionPalette.Choice)
    async def _on_palette_choice(self, message: ActionPalette.Choice) -> None:
        message.stop()
        kind = self._pending_kind
        if kind is None or not (0 <= message.index < len(self._pending_choices)):
            return
        choice = self._pending_choices[message.index]
        await self._dismiss_palette()

        if kind == "home" and isinstance(choice, Difficulty):
            self.session.start(choice)
        elif kind == "over":
            if choice == "again":
                self.session.start()
            else:
                self.session.go_home()
        elif kind == "suit" and isinstance(choice, Suit):
            self.session.try_dispatch(ChooseSuit(choice))
        elif kind == "play" and isinstance(choice, Card):
            self.session.try_dispatch(PlayCard(card=choice, side=Side.PLAYER))
        elif kind == "draw":
            self.session.try_dispatch(DrawCard(side=Side.PLAYER))
        await self._sync()

    def _refresh_ui(self) -> None:
        game_state = self.game_state
        if self.table_panel:
            self.table_panel.update_panel("Table", _render_table(game_state))
        if self.hand_panel:
            playable = rules.playable_cards(
                game_state.player_hand, game_state.top_card, game_state.current_suit
            )
            if game_state.status is not GameStatus.PLAYING or game_state.turn is not Side.PLAYER:
                playable = []
            body = Text.from_markup(format_hand(game_state.player_hand, playable))
            self.hand_panel.update_panel(f"Your Hand ({len(game_state.player_hand)})", body)
        self.title = f"Crazy Eights • {game_state.difficulty.value} • {game_state.status.value.replace('_', ' ')}"

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message


def _render_table(game_state: GameState):
    if game_state.status is GameStatus.WAITING:
        return Text.from_markup(
            "[bold]Crazy Eights[/bold]\n"
            "Match the suit or rank of the top card. 8s are wild!\n"
            "First to empty their hand wins.\n"
            "[dim]52 cards • 1 player • computer opponent[/dim]"
        )

    grid = Table.grid(padding=(0, 2))
    grid.add_column(justify="left")
    grid.add_column(justify="left")
    grid.add_row("[cyan]Computer[/cyan]", f"{len(game_state.ai_hand)} card(s)")
    grid.add_row("[cyan]Deck[/cyan]", f"{len(game_state.deck)} card(s)")
    top = game_state.top_card
    grid.add_row("[cyan]Top card[/cyan]", format_card(top) if top is not None else "—")
    suit = game_state.current_suit
    if suit is not None:
        note = "" if top is not None and top.suit is suit else " [yellow](declared)[/yellow]"
        grid.add_row("[cyan]Suit[/cyan]", f"{format_suit(suit)} {suit.value}{note}")
    turn = "You" if game_state.turn is Side.PLAYER else "Computer"
    grid.add_row("[cyan]Turn[/cyan]", turn)

    parts = [grid]
    if game_state.status is GameStatus.GAME_OVER:
        if game_state.winner is Side.PLAYER:
            banner = "[bold green]Victory! You cleared all your cards.[/bold green]"
        else:
            banner = "[bold red]Defeat. The computer cleared its hand first.[/bold red]"
        parts.append(Text.from_markup(banner))
    return Group(*parts)


def run_textual_app(
    *,
    difficulty: Difficulty,
    seed: int | None,
    config: GameConfig,
) -> None:
    """Launch the Textual UI."""

    app = CrazyEightsApp(difficulty=difficulty, seed=seed, config=config)
    app.run()
