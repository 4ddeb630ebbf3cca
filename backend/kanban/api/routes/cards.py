"""Card Routes: list, fetch by id, and create cards."""

from fastapi import APIRouter, Depends

from kanban.api.dependencies import get_card_service
from kanban.schemas.card import (
    CardEnvelope, CardListEnvelope, CardOut, CreateCardRequest, GetCardRequest,
)
from kanban.services.card_service import CardService

router = APIRouter(prefix="/cards", tags=["cards"])


@router.get("/get-all", response_model=CardListEnvelope)
async def get_cards(service: CardService = Depends(get_card_service)):
    cards = await service.get_all()
    return CardListEnvelope(cards=[CardOut.from_entity(c) for c in cards])


@router.post("/get-by-id", response_model=CardEnvelope)
async def get_card_by_id(
    body: GetCardRequest, service: CardService = Depends(get_card_service),
):
    card = await service.get_by_id(body.id)
    return CardEnvelope(card=CardOut.from_entity(card))


@router.post("/add", response_model=CardEnvelope)
async def add_card(
    body: CreateCardRequest, service: CardService = Depends(get_card_service),
):
    """Create a card; createdAt is assigned by the server."""
    card = await service.create(body.title, body.description, body.section)
    return CardEnvelope(card=CardOut.from_entity(card))
