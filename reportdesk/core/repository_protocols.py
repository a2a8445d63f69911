"""Boundary Protocols — contracts between the report service and its collaborators.

Invariants:
    - The service depends on these Protocols only, never on concrete adapters
    - Repository queries are composable SQLAlchemy Select statements
    - save_changes() is the only commit point

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol, Sequence, TypeVar

from sqlalchemy import Select

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """Generic persistence contract over one ORM entity type."""
    def get_all(self) -> Select: ...
    async def fetch_first(self, query: Select) -> EntityT | None: ...
    async def fetch_all(self, query: Select) -> Sequence[EntityT]: ...
    async def create(self, entity: EntityT) -> EntityT: ...
    async def update(self, entity: EntityT) -> EntityT: ...
    async def remove(self, entity: EntityT) -> None: ...
    async def save_changes(self) -> None: ...


class MessageProducer(Protocol):
    """Contract for publishing an entity to a topic exchange."""
    async def send_message(
        self, payload: Any, routing_key: str, exchange_name: str,
    ) -> None: ...
