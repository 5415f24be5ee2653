"""HTTP client for the remote players/actions resource."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from config import (
    ACTIONS_RESOURCE,
    API_URL,
    DEFAULT_FETCH_ACTIONS_ERROR,
    DEFAULT_FETCH_PLAYERS_ERROR,
    DEFAULT_SUBMIT_ERROR,
    PLAYERS_RESOURCE,
)
from models.players import ActionCreate, Player, PlayerAction

logger = logging.getLogger(__name__)


class RequestFailed(Exception):
    """A request to the remote resource did not succeed."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _parse_list(payload: Any, model: type[BaseModel], resource: str) -> list:
    """Validate a list payload item by item.

    A payload that is not a list becomes empty; items that cannot be
    validated are dropped without affecting the rest.
    """
    if not isinstance(payload, list):
        logger.warning("Expected a list of %s, got %s", resource, type(payload).__name__)
        return []
    items = []
    for position, item in enumerate(payload):
        try:
            items.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Dropping malformed %s item at %d (%d validation errors)",
                resource, position, exc.error_count(),
            )
    return items


class RemoteClient:
    """One best-effort round trip per call: no retries, no timeout, no caching.

    Args:
        base_url: Endpoint every request is sent to; the resource kind is
            selected with the ``resource`` query parameter.
        http: Optional preconfigured ``httpx.AsyncClient`` (tests inject one
            with a fake transport).
    """

    def __init__(self, base_url: str = API_URL, http: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url
        self._http = http or httpx.AsyncClient(timeout=None)

    async def _request(self, method: str, params: dict[str, str], failure: str, body: dict | None = None) -> Any:
        logger.debug("%s %s %s", method, self.base_url, params)
        try:
            resp = await self._http.request(method, self.base_url, params=params, json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("Transport failure: %s", exc, extra={"params": params})
            raise RequestFailed(failure) from exc

        if not resp.is_success:
            raise RequestFailed(failure, status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise RequestFailed(failure, status_code=resp.status_code) from exc

    async def list_players(self) -> list[Player]:
        """Fetch every player."""
        payload = await self._request(
            "GET", {"resource": PLAYERS_RESOURCE}, DEFAULT_FETCH_PLAYERS_ERROR,
        )
        return _parse_list(payload, Player, PLAYERS_RESOURCE)

    async def list_actions(self, player_id: str) -> list[PlayerAction]:
        """Fetch the action log of one player, in server order."""
        payload = await self._request(
            "GET",
            {"resource": ACTIONS_RESOURCE, "player_id": player_id},
            DEFAULT_FETCH_ACTIONS_ERROR,
        )
        return _parse_list(payload, PlayerAction, ACTIONS_RESOURCE)

    async def create_action(self, player_id: str, text: str, turn_number: int) -> PlayerAction | None:
        """Log a new action.

        Returns:
            The created action as echoed by the server, or None when the
            response body is not a valid action.

        Raises:
            RequestFailed: On a non-success status or transport failure.
        """
        body = ActionCreate(player_id=player_id, action_text=text, turn_number=turn_number)
        payload = await self._request(
            "POST", {"resource": ACTIONS_RESOURCE}, DEFAULT_SUBMIT_ERROR, body=body.model_dump(),
        )
        try:
            return PlayerAction.model_validate(payload)
        except ValidationError:
            logger.debug("Create response was not an action", extra={"player_id": player_id})
            return None

    async def aclose(self) -> None:
        await self._http.aclose()
