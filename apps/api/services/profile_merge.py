"""
Profile merge.

A profile update is a partial patch over whatever is stored. Merging is
per field: a non-null incoming value wins, anything else keeps the stored
value. Kept free of the session so it can be tested on its own.
"""
from dataclasses import dataclass, fields, replace
from typing import Optional, Any


@dataclass(frozen=True)
class ProfileFields:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    bio: Optional[str] = None
    profile_pic_url: Optional[str] = None

    @classmethod
    def from_object(cls, obj: Any) -> "ProfileFields":
        """Build from anything with matching attributes (ORM row, request schema)."""
        return cls(**{f.name: getattr(obj, f.name, None) for f in fields(cls)})

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def merge_profile(current: Optional[ProfileFields], patch: ProfileFields) -> ProfileFields:
    """
    Overlay ``patch`` on ``current``; ``current`` is None before the first write.

    Example:
        >>> merge_profile(ProfileFields(height_cm=175), ProfileFields(weight_kg=70))
        ProfileFields(first_name=None, last_name=None, age=None, weight_kg=70, height_cm=175, bio=None, profile_pic_url=None)
    """
    base = current or ProfileFields()
    updates = {
        name: value
        for name, value in patch.as_dict().items()
        if value is not None
    }
    return replace(base, **updates)
