"""Board Routes: list, fetch by id or alias, create, and attach cards.

Invariants:
    - Fixed paths are declared before /boards/{alias} so they win the match
    - Every handler returns an envelope: {"board": ...} or {"boards": [...]}
    - Ids arrive as raw strings; the service validates them

Design Decisions:
    - POST for reads (get-by-id, {alias}) kept for client compatibility
"""

from fastapi import APIRouter, Depends

from kanban.api.dependencies import get_board_service
from kanban.schemas.board import (
    AddCardToBoardRequest, BoardEnvelope, BoardListEnvelope, BoardOut,
    CreateBoardRequest, GetBoardRequest,
)
from kanban.services.board_service import BoardService

router = APIRouter(prefix="/boards", tags=["boards"])


@router.get("/get-all", response_model=BoardListEnvelope)
async def get_boards(service: BoardService = Depends(get_board_service)):
    """List every board."""
    boards = await service.get_all()
    return BoardListEnvelope(boards=[BoardOut.from_entity(b) for b in boards])


@router.post("/get-by-id", response_model=BoardEnvelope)
async def get_board_by_id(
    body: GetBoardRequest, service: BoardService = Depends(get_board_service),
):
    board = await service.get_by_id(body.id)
    return BoardEnvelope(board=BoardOut.from_entity(board))


@router.post("/add", response_model=BoardEnvelope)
async def add_board(
    body: CreateBoardRequest, service: BoardService = Depends(get_board_service),
):
    """Create a board; alias is the lowercased name."""
    board = await service.create_board(body.name)
    return BoardEnvelope(board=BoardOut.from_entity(board))


@router.post("/add-card-to-board", response_model=BoardEnvelope)
async def add_card_to_board(
    body: AddCardToBoardRequest,
    service: BoardService = Depends(get_board_service),
):
    """Attach a card id to a board (idempotent)."""
    board = await service.add_card(body.board_id, body.card_id)
    return BoardEnvelope(board=BoardOut.from_entity(board))


@router.post("/{alias}", response_model=BoardEnvelope)
async def get_board_by_alias(
    alias: str, service: BoardService = Depends(get_board_service),
):
    board = await service.get_by_alias(alias)
    return BoardEnvelope(board=BoardOut.from_entity(board))
