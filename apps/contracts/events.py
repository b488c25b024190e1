"""
Contract Domain Events

Published after the transaction that created or removed a contract commits.
"""

from dataclasses import dataclass
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class PropertyRented(DomainEvent):
    """
    Event: A contract was signed and the property left the catalogue

    aggregate_id is the property id.
    """
    contract_id: UUID
    property_id: UUID
    user_id: UUID

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            contract_id=str(self.contract_id),
            property_id=str(self.property_id),
            user_id=str(self.user_id),
        )
        return data


@dataclass(kw_only=True)
class PropertyReleased(DomainEvent):
    """
    Event: A contract was removed and the property is available again
    """
    contract_id: UUID
    property_id: UUID

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(contract_id=str(self.contract_id), property_id=str(self.property_id))
        return data
