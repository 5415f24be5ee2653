"""Action submission: validate, send, then re-fetch the authoritative log."""

import logging
from typing import Callable

from api.client import RemoteClient, RequestFailed
from config import NO_SELECTION
from engine.sync import SyncController
from models.app_state import AppState

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


def log_notifier(message: str) -> None:
    """Fallback blocking-notification channel when no UI supplies one."""
    logger.error("Action submission failed: %s", message)


class ActionSubmission:
    """Sends new actions for the selected player.

    There is no optimistic insert: a new action shows up only once the
    re-fetch after a successful write completes.
    """

    def __init__(
        self,
        state: AppState,
        client: RemoteClient,
        sync: SyncController,
        notify: Notifier = log_notifier,
    ) -> None:
        self.state = state
        self.client = client
        self.sync = sync
        self.notify = notify

    async def submit(self, player_id: str, text: str) -> bool:
        """Submit ``text`` as the next turn of ``player_id``.

        An empty selection or blank text is declined silently. The turn
        number is the count of actions currently displayed plus one, which
        can collide with writes made by other sessions.

        Returns:
            True if the write succeeded, False if declined or failed.
        """
        if player_id == NO_SELECTION or not text.strip():
            return False

        turn_number = self.state.next_turn_number
        try:
            await self.client.create_action(player_id, text, turn_number)
        except RequestFailed as exc:
            # Draft and log stay untouched so the user can resubmit.
            self.notify(exc.message)
            return False

        logger.info("Logged turn %d", turn_number, extra={"player_id": player_id})
        self.state.draft = ""
        await self.sync.refresh_actions(player_id)
        return True
