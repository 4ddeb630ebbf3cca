"""Board/Card schemas: aliases, defaults and length limits."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from kanban.core.entities import Board
from kanban.schemas.board import AddCardToBoardRequest, BoardOut, CreateBoardRequest
from kanban.schemas.card import CreateCardRequest


def test_add_card_request_accepts_both_spellings():
    a = AddCardToBoardRequest.model_validate({"boardId": "b", "cardId": "c"})
    b = AddCardToBoardRequest.model_validate({"boardId": "b", "CardId": "c"})
    assert (a.board_id, a.card_id) == ("b", "c")
    assert (b.board_id, b.card_id) == ("b", "c")


def test_add_card_request_requires_card_id():
    with pytest.raises(ValidationError):
        AddCardToBoardRequest.model_validate({"boardId": "b"})


def test_board_name_kept_verbatim():
    assert CreateBoardRequest(name="  Sprint One ").name == "  Sprint One "


def test_board_name_length_bounds():
    with pytest.raises(ValidationError):
        CreateBoardRequest(name="")
    with pytest.raises(ValidationError):
        CreateBoardRequest(name="x" * 201)


def test_card_request_defaults():
    req = CreateCardRequest(title="t")
    assert req.description == ""
    assert req.section == ""


def test_board_out_dumps_camel_case():
    board = Board(
        id=uuid4(), name="N", alias="n",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc), card_ids=[uuid4()],
    )
    dumped = BoardOut.from_entity(board).model_dump(mode="json", by_alias=True)
    assert set(dumped) == {"id", "name", "alias", "cardIds", "createdAt"}
    assert dumped["cardIds"] == [str(board.card_ids[0])]
