"""
Change events emitted by the remote partner sync collaborator.

Each event is one serialized notification against the partner collection.
The store applies them one at a time through ``apply_remote_change``.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from .partner import Partner


class PartnerChangeKind(str, Enum):
    """Kind of remote change."""

    REPLACE = 'replace'
    INSERT = 'insert'
    UPDATE = 'update'
    DELETE = 'delete'


class PartnerChangeEvent(BaseModel):
    """
    A remote change to the partner collection.

    Payload by kind:
    - REPLACE: ``partners`` is the full new collection (may be empty)
    - INSERT / UPDATE: ``partner`` is the new record
    - DELETE: ``partner_id`` (or ``partner.id``) names the record to drop
    """

    kind: PartnerChangeKind
    partner: Partner | None = None
    partner_id: str | None = None
    partners: list[Partner] = Field(default_factory=list)
    occurred_at: datetime | None = Field(
        default=None, description='When the remote service recorded the change'
    )

    @property
    def target_id(self) -> str | None:
        """Identity the event touches, when it touches a single record."""
        if self.partner is not None:
            return self.partner.id
        return self.partner_id

    model_config = {
        'json_schema_extra': {
            'examples': [
                {
                    'kind': 'update',
                    'partner': {
                        'id': 'partner_0192f3c1a7b27000800000000000abcd',
                        'name': 'Acme Payments',
                        'tier': 'gold',
                        'health': 'attention',
                        'last_activity': '2026-10-18T09:30:00',
                        'open_threads': 2,
                        'revenue': 125000.0,
                        'segment': 'Enterprise',
                        'account_manager': 'Jordan',
                    },
                },
                {'kind': 'delete', 'partner_id': 'partner_0192f3c1a7b27000800000000000abcd'},
            ]
        }
    }
