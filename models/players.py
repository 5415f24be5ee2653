"""Player and player action data models for the Player Action Tracker."""

from pydantic import BaseModel, ConfigDict


class Player(BaseModel):
    """A player character as listed by the remote resource."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, frozen=True)

    id: str                         # Opaque, unique
    name: str
    hp: int | float | None = None   # Stats are displayed, not enforced
    strength: int | float | None = None
    dexterity: int | float | None = None
    intelligence: int | float | None = None
    gold: int | float | None = None


class PlayerAction(BaseModel):
    """One logged turn for a player."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None           # Assigned by the remote resource
    player_id: str
    action_text: str
    turn_number: int | float | None = None
    created_at: str | None = None   # Display only


class ActionCreate(BaseModel):
    """Body of the write request that logs a new action."""
    player_id: str
    action_text: str
    turn_number: int
