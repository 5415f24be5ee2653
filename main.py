"""Application entry point for the Player Action Tracker.

A presentation layer creates one TrackerApp, awaits ``start()`` once,
then reads ``app.state`` and awaits the other entry points in response to
user input:

    async with TrackerApp(notify=show_alert) as app:
        await app.start()
        await app.select("p1")
        app.set_draft("Pick the lock")
        await app.submit_action()
"""

from api.client import RemoteClient
from config import API_URL
from engine.submission import ActionSubmission, Notifier, log_notifier
from engine.sync import SyncController
from models.app_state import AppState


class TrackerApp:
    """Owns the session's AppState and wires the components to it."""

    def __init__(
        self,
        client: RemoteClient | None = None,
        notify: Notifier = log_notifier,
        base_url: str = API_URL,
    ) -> None:
        self.state = AppState()
        self.client = client or RemoteClient(base_url)
        self.sync = SyncController(self.state, self.client)
        self.submission = ActionSubmission(self.state, self.client, self.sync, notify)

    async def start(self) -> None:
        """Initial player list fetch."""
        await self.sync.load_players()

    async def reload_players(self) -> None:
        """User-initiated re-fetch of the player list."""
        await self.sync.load_players()

    async def select(self, player_id: str) -> None:
        await self.sync.select(player_id)

    def set_draft(self, text: str) -> None:
        self.state.draft = text

    async def submit_action(self) -> bool:
        """Submit the draft for the currently selected player."""
        return await self.submission.submit(self.state.selected_player_id, self.state.draft)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "TrackerApp":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
