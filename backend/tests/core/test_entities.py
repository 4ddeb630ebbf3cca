"""Entities: pure constructors for cards and boards."""

from datetime import datetime, timezone

import pytest

from kanban.core.entities import Board, derive_alias, new_board, new_card

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "name, alias",
    [
        ("Sprint One", "sprint one"),
        ("ALREADY", "already"),
        ("  Padded Name ", "  padded name "),
        ("Ünïcode Bôard", "ünïcode bôard"),
        ("lower", "lower"),
    ],
)
def test_alias_is_lowercased_name(name, alias):
    assert derive_alias(name) == alias
    board = new_board(name, NOW)
    assert board.alias == alias
    assert board.name == name


def test_names_differing_in_case_collide():
    assert new_board("Backlog", NOW).alias == new_board("BACKLOG", NOW).alias


def test_new_board_starts_empty_without_id():
    board = new_board("Sprint One", NOW)
    assert board.card_ids == []
    assert board.id is None
    assert board.created_at == NOW


def test_boards_do_not_share_card_lists():
    a = Board(name="a", alias="a", created_at=NOW)
    b = Board(name="b", alias="b", created_at=NOW)
    a.card_ids.append("x")
    assert b.card_ids == []


def test_new_card_copies_fields():
    card = new_card("Fix bug", "desc", "todo", NOW)
    assert (card.title, card.description, card.section) == ("Fix bug", "desc", "todo")
    assert card.created_at == NOW
    assert card.id is None


def test_new_card_allows_empty_description():
    assert new_card("t", "", "done", NOW).description == ""
