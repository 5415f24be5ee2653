"""Client-wide configuration constants for the Player Action Tracker."""

import os

API_URL = os.environ.get("API_URL", "")  # Empty string means same origin
PLAYERS_RESOURCE = "players"
ACTIONS_RESOURCE = "actions"
NO_SELECTION = ""                        # selected_player_id when nothing is chosen

DEFAULT_FETCH_PLAYERS_ERROR = "Failed to fetch players"
DEFAULT_FETCH_ACTIONS_ERROR = "Failed to fetch actions"
DEFAULT_SUBMIT_ERROR = "Failed to submit action"
