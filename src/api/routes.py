"""HTTP routes. Thin: parse the request, hand it to the ChessService, return its response."""

from typing import Annotated, Generator
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveBody,
    MoveRequest,
)
from src.services.chess_service import ChessService


def get_service(request: Request) -> Generator[ChessService, None, None]:
    """One service per request, provided by whatever repository backend `create_app` wired up"""
    yield from request.app.state.service_provider()


Service = Annotated[ChessService, Depends(get_service)]

router = APIRouter(prefix="/game", tags=["game"])


@router.post("/start", response_model=GameResponse)
def start_game(service: Service, body: CreateGameRequest | None = None) -> GameResponse:
    return service.create_new_game(body or CreateGameRequest())


@router.get("/{game_id}/state", response_model=GameResponse)
def get_state(game_id: UUID, service: Service) -> GameResponse:
    return service.get_game_state(GetGameRequest(game_id=game_id))


@router.post("/{game_id}/move", response_model=GameResponse)
def make_move(game_id: UUID, body: MoveBody, service: Service) -> GameResponse:
    request = MoveRequest(
        game_id=game_id,
        from_square=body.from_square,
        to_square=body.to_square,
        color=body.color,
    )
    return service.make_move(request)


@router.get("/{game_id}/legal-moves", response_model=LegalMovesResponse)
def legal_moves(game_id: UUID, service: Service) -> LegalMovesResponse:
    return service.legal_moves(LegalMovesRequest(game_id=game_id))


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: Service) -> None:
    service.delete_game(DeleteGameRequest(game_id=game_id))
