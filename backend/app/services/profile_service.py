"""
Profile service - upsert, lookup, deletion and embedded list edits
"""
import uuid
from typing import Any, Iterable, List, Optional

from sqlalchemy.orm import Session, joinedload

from backend.app.core.errors import EntryNotFound
from backend.app.models.profile import Profile
from backend.app.models.user import User
from backend.app.schemas.profile import EducationIn, ExperienceIn, ProfilePatch


def find_entry_index(entries: Iterable[dict], entry_id: str) -> Optional[int]:
    """Position of the entry whose "_id" matches, scanning in order. None when absent."""
    for index, entry in enumerate(entries):
        if entry.get("_id") == entry_id:
            return index
    return None


def new_entry(data: ExperienceIn | EducationIn) -> dict[str, Any]:
    """Embedded list entry with a fresh id. Unset optional fields are left out."""
    entry = {"_id": uuid.uuid4().hex}
    entry.update(data.model_dump(by_alias=True, exclude_none=True))
    return entry


class ProfileService:
    @staticmethod
    def get_by_user_id(db: Session, user_id: int) -> Optional[Profile]:
        return (
            db.query(Profile)
            .options(joinedload(Profile.user))
            .filter(Profile.user_id == user_id)
            .first()
        )

    @staticmethod
    def list_profiles(db: Session) -> List[Profile]:
        return db.query(Profile).options(joinedload(Profile.user)).order_by(Profile.id).all()

    @staticmethod
    def upsert_profile(db: Session, user: User, patch: ProfilePatch) -> Profile:
        """Apply the patch to the user's profile, creating the profile if it does not exist."""
        profile = db.query(Profile).filter(Profile.user_id == user.id).first()
        if profile is None:
            profile = Profile(user_id=user.id, skills=[], experience=[], education=[])
            db.add(profile)
        patch.apply_to(profile)
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def delete_account(db: Session, user: User) -> None:
        """Remove the user's profile (with its embedded lists) and the user record."""
        db.query(Profile).filter(Profile.user_id == user.id).delete(synchronize_session=False)
        db.query(User).filter(User.id == user.id).delete(synchronize_session=False)
        db.commit()

    @staticmethod
    def add_entry(db: Session, profile: Profile, collection: str, data: ExperienceIn | EducationIn) -> Profile:
        """Prepend a new entry to profile.<collection> (newest first) and persist."""
        entries = list(getattr(profile, collection) or [])
        entries.insert(0, new_entry(data))
        setattr(profile, collection, entries)
        db.commit()
        db.refresh(profile)
        return profile

    @staticmethod
    def remove_entry(db: Session, profile: Profile, collection: str, entry_id: str) -> Profile:
        """Remove exactly one entry by id. Raises EntryNotFound and leaves the list untouched if absent."""
        entries = list(getattr(profile, collection) or [])
        index = find_entry_index(entries, entry_id)
        if index is None:
            raise EntryNotFound(collection, entry_id)
        del entries[index]
        setattr(profile, collection, entries)
        db.commit()
        db.refresh(profile)
        return profile
