"""
Profile endpoints - own profile upsert/delete, public browsing, experience and education lists
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.core.dependencies import get_current_user, get_db
from backend.app.core.errors import ApiError, EntryNotFound
from backend.app.core.logging_config import get_logger
from backend.app.core.validation import parse_record_id, required, validate
from backend.app.models.profile import Profile
from backend.app.models.user import User
from backend.app.schemas.profile import (
    EducationIn,
    ExperienceIn,
    ProfileIn,
    ProfileOut,
    ProfilePatch,
    profile_model_to_out,
)
from backend.app.services.profile_service import ProfileService

logger = get_logger("api.profile")
router = APIRouter()

NO_PROFILE_MSG = "There is no profile for this user"
PROFILE_NOT_FOUND_MSG = "Profile not found"

PROFILE_RULES = (
    required("status", "Status is required"),
    required("skills", "Skills is required"),
)
EXPERIENCE_RULES = (
    required("title", "Title is required"),
    required("company", "Company is required"),
    required("from", "From date is required"),
)
EDUCATION_RULES = (
    required("school", "School is required"),
    required("degree", "Degree is required"),
    required("fieldofstudy", "Field of study is required"),
    required("from", "From date is required"),
)
ENTRY_NOT_FOUND_MSG = {
    "experience": "Experience not found",
    "education": "Education not found",
}


def _own_profile(db: Session, user: User) -> Profile:
    profile = ProfileService.get_by_user_id(db, user.id)
    if not profile:
        raise ApiError.message(400, NO_PROFILE_MSG)
    return profile


def _remove_entry(db: Session, user: User, collection: str, entry_id: str) -> ProfileOut:
    profile = _own_profile(db, user)
    try:
        profile = ProfileService.remove_entry(db, profile, collection, entry_id)
    except EntryNotFound:
        logger.warning("Remove %s failed user_id=%s entry_id=%s: not found", collection, user.id, entry_id)
        raise ApiError.message(400, ENTRY_NOT_FOUND_MSG[collection])
    logger.info("Removed %s entry user_id=%s entry_id=%s", collection, user.id, entry_id)
    return profile_model_to_out(profile)


@router.get("/me", response_model=ProfileOut, response_model_exclude_none=True)
def get_my_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get current user's profile"""
    return profile_model_to_out(_own_profile(db, current_user))


@router.post("", response_model=ProfileOut, response_model_exclude_none=True)
def upsert_profile(
    payload: ProfileIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create or update the current user's profile.

    Only non-empty fields overwrite stored values. Social links are replaced as a
    whole: any network not sent in this request is cleared. ``skills`` is a
    comma-separated string.
    """
    validate(payload.model_dump(), PROFILE_RULES)
    patch = ProfilePatch.from_input(payload)
    profile = ProfileService.upsert_profile(db, current_user, patch)
    logger.info("Profile saved user_id=%s fields=%s", current_user.id, sorted(patch.updates()))
    return profile_model_to_out(profile)


@router.get("", response_model=List[ProfileOut], response_model_exclude_none=True)
def list_profiles(db: Session = Depends(get_db)):
    """Get all profiles"""
    return [profile_model_to_out(p) for p in ProfileService.list_profiles(db)]


@router.get("/user/{user_id}", response_model=ProfileOut, response_model_exclude_none=True)
def get_profile_by_user(user_id: str, db: Session = Depends(get_db)):
    """Get profile by user ID. Malformed ids are reported the same way as missing profiles."""
    uid = parse_record_id(user_id)
    if uid is None:
        raise ApiError.message(400, PROFILE_NOT_FOUND_MSG)
    profile = ProfileService.get_by_user_id(db, uid)
    if not profile:
        raise ApiError.message(400, PROFILE_NOT_FOUND_MSG)
    return profile_model_to_out(profile)


@router.delete("")
def delete_account(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> dict:
    """Delete the current user's profile and user record"""
    user_id = current_user.id
    ProfileService.delete_account(db, current_user)
    logger.info("Account deleted user_id=%s", user_id)
    return {"msg": "User deleted"}


@router.put("/experience", response_model=ProfileOut, response_model_exclude_none=True)
def add_experience(
    payload: ExperienceIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add an experience entry at the top of the list"""
    validate(payload.model_dump(by_alias=True), EXPERIENCE_RULES)
    profile = ProfileService.add_entry(db, _own_profile(db, current_user), "experience", payload)
    logger.info("Added experience user_id=%s count=%s", current_user.id, len(profile.experience))
    return profile_model_to_out(profile)


@router.delete("/experience/{exp_id}", response_model=ProfileOut, response_model_exclude_none=True)
def delete_experience(
    exp_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete experience from profile"""
    return _remove_entry(db, current_user, "experience", exp_id)


@router.put("/education", response_model=ProfileOut, response_model_exclude_none=True)
def add_education(
    payload: EducationIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add an education entry at the top of the list"""
    validate(payload.model_dump(by_alias=True), EDUCATION_RULES)
    profile = ProfileService.add_entry(db, _own_profile(db, current_user), "education", payload)
    logger.info("Added education user_id=%s count=%s", current_user.id, len(profile.education))
    return profile_model_to_out(profile)


@router.delete("/education/{edu_id}", response_model=ProfileOut, response_model_exclude_none=True)
def delete_education(
    edu_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete education from profile"""
    return _remove_entry(db, current_user, "education", edu_id)
