"""Card Service: creates cards with server-assigned timestamps.

Invariants:
    - created_at is the UTC time of the create() call; clients cannot supply it
    - Reads delegate to the repository unchanged
"""

from datetime import datetime, timezone

from kanban.core.entities import Card, new_card
from kanban.core.repository_protocols import CardRepository


class CardService:
    """Card use cases."""

    def __init__(self, repository: CardRepository):
        self.repository = repository

    async def get_all(self) -> list[Card]:
        return await self.repository.get_all()

    async def get_by_id(self, card_id: str) -> Card:
        return await self.repository.get_by_id(card_id)

    async def create(self, title: str, description: str, section: str) -> Card:
        card = new_card(
            title, description, section, now=datetime.now(timezone.utc),
        )
        return await self.repository.create(card)
