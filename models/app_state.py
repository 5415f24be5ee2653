"""In-memory application state for the Player Action Tracker."""

import logging
from typing import Any

from pydantic import BaseModel, PrivateAttr

from config import NO_SELECTION
from models.players import Player, PlayerAction

logger = logging.getLogger(__name__)


def _as_sequence(value: Any, field: str) -> list:
    """Coerce a fetch result to a list; anything that is not a sequence becomes empty."""
    if isinstance(value, (list, tuple)):
        return list(value)
    logger.warning("Discarding non-sequence %s value", field, extra={"value_type": type(value).__name__})
    return []


class AppState(BaseModel):
    """The state a single session of the tracker works on.

    Performs no I/O. The sync controller and the submission workflow are
    the only writers; the presentation layer only reads.
    """
    players: list[Player] = []
    selected_player_id: str = NO_SELECTION
    selected_player: Player | None = None   # Derived from players, never fetched
    actions: list[PlayerAction] = []        # Always scoped to selected_player_id
    draft: str = ""                         # Pending action text
    loading: bool = False                   # Player list fetch in flight
    error: str | None = None                # Persistent, user-visible

    _index: dict[str, Player] = PrivateAttr(default_factory=dict)

    def replace_players(self, players: Any) -> None:
        """Replace the player list wholesale and rebuild the id index."""
        self.players = _as_sequence(players, "players")
        self._index = {}
        for player in self.players:
            self._index.setdefault(player.id, player)

    def replace_actions(self, actions: Any) -> None:
        """Replace the action log wholesale."""
        self.actions = _as_sequence(actions, "actions")

    def find_player(self, player_id: str) -> Player | None:
        """Look up a player by id. First occurrence wins on duplicate ids."""
        return self._index.get(player_id)

    def clear_selection_view(self) -> None:
        self.selected_player = None
        self.actions = []

    @property
    def has_selection(self) -> bool:
        return self.selected_player_id != NO_SELECTION

    @property
    def can_select(self) -> bool:
        """The selection control is disabled while the player list loads."""
        return not self.loading

    @property
    def player_options(self) -> list[tuple[str, str]]:
        """(id, name) pairs for the selection control, in list order."""
        return [(player.id, player.name) for player in self.players]

    @property
    def next_turn_number(self) -> int:
        """Client-observed turn count for the visible log, plus one."""
        return len(self.actions) + 1
