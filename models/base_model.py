"""
Shared base for the in-memory records of the Bookstore API.

- string id, assigned by MemoryStorage.new() when left as None
- kwargs initialisation so seed loaders and handlers can build records directly
- to_dict() that adds __class__, used when handlers log records
"""

from __future__ import annotations


class BaseModel:
    """
    Base class for all stored records.

    Records are plain mutable objects; the store keeps them in insertion
    order and handlers mutate them in place.
    """

    # attribute name -> external (GraphQL / seed file) key
    FIELD_ALIASES: dict[str, str] = {}

    def __init__(self, *args, **kwargs):
        self.id = None
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)

    def __str__(self) -> str:
        return f"[{self.__class__.__name__}] ({self.id}) {self.__dict__}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self) -> dict:
        """
        Return the record as a dictionary keyed by external field names:
        - Renames attributes listed in FIELD_ALIASES (author_id -> authorId)
        - Adds __class__ so mixed dumps stay readable
        """
        d = {self.FIELD_ALIASES.get(k, k): v for k, v in self.__dict__.items()}
        d["__class__"] = self.__class__.__name__
        return d
