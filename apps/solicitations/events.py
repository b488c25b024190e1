"""
Solicitation Domain Events
"""

from dataclasses import dataclass
from uuid import UUID

from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class SolicitationSubmitted(DomainEvent):
    """
    Event: A customer asked to rent a property

    Administrators follow up by signing a contract.
    """
    solicitation_id: UUID
    property_id: UUID
    user_id: UUID

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            solicitation_id=str(self.solicitation_id),
            property_id=str(self.property_id),
            user_id=str(self.user_id),
        )
        return data
