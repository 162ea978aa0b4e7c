"""
Profile Pydantic schemas - request bodies, response shapes and the sparse profile patch
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.app.core.config import SOCIAL_NETWORKS

# Top-level profile fields copied only when supplied and non-empty.
SCALAR_FIELDS = ("company", "website", "location", "bio", "status", "githubusername")


# --- Request bodies ---
class ProfileIn(BaseModel):
    """POST /api/profile body. Social links arrive flat, not nested."""
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: Optional[str] = None
    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None

    model_config = {"extra": "ignore"}


class ExperienceIn(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class EducationIn(BaseModel):
    school: Optional[str] = None
    degree: Optional[str] = None
    fieldofstudy: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# --- Nested response schemas ---
class SocialLinks(BaseModel):
    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None


class Experience(BaseModel):
    id: str = Field(alias="_id")
    title: str = ""
    company: str = ""
    location: Optional[str] = None
    from_: str = Field(default="", alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class Education(BaseModel):
    id: str = Field(alias="_id")
    school: str = ""
    degree: str = ""
    fieldofstudy: str = ""
    from_: str = Field(default="", alias="from")
    to: Optional[str] = None
    current: bool = False
    description: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ProfileUser(BaseModel):
    """Public slice of the owning user"""
    id: int = Field(alias="_id")
    name: str = ""
    avatar: str = ""

    model_config = ConfigDict(populate_by_name=True)


class ProfileOut(BaseModel):
    id: int = Field(alias="_id")
    user: ProfileUser
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: List[Experience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    date: Optional[datetime] = None

    model_config = ConfigDict(populate_by_name=True)


# --- Sparse patch ---
def parse_skills(raw: str) -> List[str]:
    """Split a comma-delimited skills string and trim each token. Empty tokens are kept."""
    return [skill.strip() for skill in raw.split(",")]


class ProfilePatch(BaseModel):
    """
    Update record built from a ProfileIn.

    Top-level fields are sparse: a field left as None is not written, so a
    stored value survives. ``social`` is the opposite: it is always present
    and replaces the stored sub-record wholesale, so social links omitted
    from the latest call end up absent.
    """
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: Optional[List[str]] = None
    social: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_input(cls, data: ProfileIn) -> "ProfilePatch":
        fields: dict[str, Any] = {name: getattr(data, name) for name in SCALAR_FIELDS if getattr(data, name)}
        if data.skills:
            fields["skills"] = parse_skills(data.skills)
        fields["social"] = {net: getattr(data, net) for net in SOCIAL_NETWORKS if getattr(data, net)}
        return cls(**fields)

    def updates(self) -> dict[str, Any]:
        """Column values to write: supplied top-level fields plus the rebuilt social record."""
        values = {name: value for name, value in self.model_dump(exclude={"social"}).items() if value is not None}
        values["social"] = dict(self.social)
        return values

    def apply_to(self, profile) -> None:
        for key, value in self.updates().items():
            setattr(profile, key, value)


def profile_model_to_out(profile) -> ProfileOut:
    """Convert Profile DB model (with its user loaded) to ProfileOut schema"""
    user = profile.user
    return ProfileOut(
        id=profile.id,
        user=ProfileUser(id=profile.user_id, name=user.name if user else "", avatar=(user.avatar or "") if user else ""),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        status=profile.status,
        skills=list(profile.skills or []),
        bio=profile.bio,
        githubusername=profile.githubusername,
        social=SocialLinks(**(profile.social or {})),
        experience=[Experience.model_validate(e) for e in (profile.experience or [])],
        education=[Education.model_validate(e) for e in (profile.education or [])],
        date=profile.created_at,
    )
