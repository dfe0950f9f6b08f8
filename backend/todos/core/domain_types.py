"""Domain Types — identity types shared by the store and the service layer.

Invariants:
    - TodoId 0 means "not yet assigned"; stored entities always carry a non-zero id
"""

from typing import NewType

TodoId = NewType("TodoId", int)

UNASSIGNED_ID = TodoId(0)


def is_assigned(entity_id: int) -> bool:
    return entity_id != UNASSIGNED_ID

# Ids are signed 64-bit integers
TODO_ID_MIN = -(2**63)
TODO_ID_MAX = 2**63 - 1
