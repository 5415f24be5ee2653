"""Keeps the application state consistent with the remote resource.

Two triggers drive every fetch:
  - Start-up (and user-initiated reloads): fetch the player list.
  - Selection change, or a player list refresh while a player is
    selected: re-derive the selected player and fetch that player's log.

Each fetch takes a token from a per-field counter. A result is applied
only if its token is still the latest issued for that field, so a slow
response can never overwrite the result of a newer request. There is no
cancellation: superseded requests run to completion and are discarded.
"""

import itertools
import logging

from api.client import RemoteClient, RequestFailed
from models.app_state import AppState

logger = logging.getLogger(__name__)


class SyncController:
    """Drives fetches for one AppState instance."""

    def __init__(self, state: AppState, client: RemoteClient) -> None:
        self.state = state
        self.client = client
        self._players_tokens = itertools.count(1)
        self._actions_tokens = itertools.count(1)
        self._latest_players = 0
        self._latest_actions = 0

    async def load_players(self) -> None:
        """Fetch the player list, recording a failure as the persistent error.

        Not retried. The loading flag is cleared once the latest request
        settles, whatever its outcome.
        """
        token = self._latest_players = next(self._players_tokens)
        self.state.loading = True
        try:
            players = await self.client.list_players()
        except RequestFailed as exc:
            if token == self._latest_players:
                self.state.error = exc.message
            return
        finally:
            if token == self._latest_players:
                self.state.loading = False

        if token != self._latest_players:
            logger.debug("Dropping stale player list", extra={"token": token})
            return
        self.state.replace_players(players)
        self.state.error = None
        await self.apply_selection()

    async def select(self, player_id: str) -> None:
        """Change the selection. Re-selecting the current id does nothing."""
        if player_id == self.state.selected_player_id:
            return
        self.state.selected_player_id = player_id
        await self.apply_selection()

    async def apply_selection(self) -> None:
        player_id = self.state.selected_player_id
        if not self.state.has_selection:
            # Invalidate any in-flight log fetch along with the view.
            self._latest_actions = next(self._actions_tokens)
            self.state.clear_selection_view()
            return

        self.state.selected_player = self.state.find_player(player_id)
        await self.refresh_actions(player_id)

    async def refresh_actions(self, player_id: str) -> None:
        """Replace the action log of ``player_id`` with the server's.

        Failures go to the diagnostic log only; the displayed log is kept.
        """
        token = self._latest_actions = next(self._actions_tokens)
        try:
            actions = await self.client.list_actions(player_id)
        except RequestFailed as exc:
            logger.error("Error fetching actions: %s", exc.message, extra={"player_id": player_id})
            return

        if token != self._latest_actions or player_id != self.state.selected_player_id:
            logger.debug("Dropping stale action log", extra={"player_id": player_id, "token": token})
            return
        self.state.replace_actions(actions)
