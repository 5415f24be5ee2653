"""In-process fake of the remote players/actions resource, served with FastAPI."""

from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request

from models.players import ActionCreate

BASE_URL = "http://remote.test/api.php"

ROGUE = {"id": "p1", "name": "Rogue", "hp": 10, "strength": 5, "dexterity": 8, "intelligence": 4, "gold": 20}
WIZARD = {"id": "p2", "name": "Wizard", "hp": 6, "strength": 2, "dexterity": 5, "intelligence": 12, "gold": 35}


class FakeRemote:
    """Mutable backing data and failure switches for the fake resource."""

    def __init__(self, players: list[dict] | None = None) -> None:
        self.players: Any = list(players or [])
        self.actions: list[dict] = []
        self.requests: list[tuple[str, str, str | None]] = []
        self.created: list[dict] = []
        self.fail_players = False
        self.fail_actions = False
        self.fail_create = False

    def add_action(self, player_id: str, text: str, turn_number: int) -> dict:
        action = {
            "id": f"a{len(self.actions) + 1}",
            "player_id": player_id,
            "action_text": text,
            "turn_number": turn_number,
            "created_at": "2026-10-18T12:00:00Z",
        }
        self.actions.append(action)
        return action


def build_remote_app(remote: FakeRemote) -> FastAPI:
    """FastAPI app that answers like the real players/actions endpoint."""
    app = FastAPI(title="Fake Remote Resource")
    app.state.remote = remote

    @app.get("/api.php", response_model=None)
    def read_resource(
        request: Request,
        resource: str = Query(...),
        player_id: str | None = Query(None),
    ):
        fake = request.app.state.remote
        fake.requests.append(("GET", resource, player_id))
        if resource == "players":
            if fake.fail_players:
                raise HTTPException(status_code=500, detail="players unavailable")
            return fake.players
        if resource == "actions":
            if fake.fail_actions:
                raise HTTPException(status_code=500, detail="actions unavailable")
            return [a for a in fake.actions if a["player_id"] == player_id]
        raise HTTPException(status_code=400, detail=f"Unknown resource: {resource}")

    @app.post("/api.php", response_model=None)
    def create_resource(request: Request, action: ActionCreate, resource: str = Query(...)) -> dict:
        fake = request.app.state.remote
        fake.requests.append(("POST", resource, action.player_id))
        if resource != "actions":
            raise HTTPException(status_code=400, detail=f"Unknown resource: {resource}")
        if fake.fail_create:
            raise HTTPException(status_code=503, detail="write rejected")
        fake.created.append(action.model_dump())
        return fake.add_action(action.player_id, action.action_text, action.turn_number)

    return app

