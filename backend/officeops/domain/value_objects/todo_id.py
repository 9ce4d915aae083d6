"""
TodoId Value Object - integer identity of a Todo, assigned on first save.
"""

from dataclasses import dataclass

from officeops.domain.common.entity_id import EntityId


@dataclass(frozen=True)
class TodoId(EntityId):
    pass
