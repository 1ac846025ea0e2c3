"""Domain Types - identity type for animal records and its parser.

Invariants:
    - AnimalId wraps bson.ObjectId; never pass a bare hex string to the store
    - parse_animal_id is the only place a path string becomes an AnimalId
    - Only 24-character hex strings are accepted (12-byte binary ids are rejected)
"""

import re
from typing import NewType

from bson import ObjectId

from animal_api.core.errors import InvalidAnimalIdError


AnimalId = NewType("AnimalId", ObjectId)

_HEX_ID = re.compile(r"^[0-9a-fA-F]{24}$")


def parse_animal_id(raw: str) -> AnimalId:
    """Parse a path parameter into an AnimalId or raise InvalidAnimalIdError."""
    # ObjectId() also accepts 12-byte strings; restrict to the hex form
    if not isinstance(raw, str) or not _HEX_ID.match(raw):
        raise InvalidAnimalIdError(str(raw))
    return AnimalId(ObjectId(raw))
