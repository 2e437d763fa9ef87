from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _wrap_scalar(value: Any) -> Any:
    # A lone string or number stands for a one-element list.
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return [value]
    return value


StringList = Annotated[list[str] | None, BeforeValidator(_wrap_scalar)]


class ContentModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class Skill(ContentModel):
    title: str | None = None
    icon: str | None = None
    skills: str | None = None


class Certification(ContentModel):
    title: str | None = None
    issuer: str | None = None
    date: str | None = None
    image: str | None = None
    description: str | None = None
    details: str | None = None


class Achievement(ContentModel):
    title: str | None = None
    date: str | None = None
    description: str | None = None
    icon: str | None = None
    image: str | None = None


class Project(ContentModel):
    title: str | None = None
    description: str | None = None
    tech: str | None = None
    image: str | None = None
    stats: str | None = None
    category: str | None = None
    githubLink: str | None = None
    deploymentLink: str | None = None


class Experience(ContentModel):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    startDate: str | None = None
    endDate: str | None = None
    description: str | None = None
    image: str | None = None
    keyLearnings: StringList = None


class Service(ContentModel):
    icon: str | None = None
    title: str | None = None
    description: str | None = None
    features: StringList = None


class ContactInfo(ContentModel):
    email: str | None = None
    github: str | None = None
    linkedin: str | None = None
    phone: str | None = None
    resumeUrl: str | None = None
    profilePictureUrl: str | None = None


class AboutRole(ContentModel):
    title: str | None = None
    description: str | None = None
    icon: str | None = None


class AboutSkillGroup(ContentModel):
    category: str | None = None
    items: StringList = None


class AboutEducation(ContentModel):
    degree: str | None = None
    school: str | None = None
    details: str | None = None


class About(ContentModel):
    title: str | None = None
    intro: str | None = None
    description: str | None = None
    roles: list[AboutRole] | None = None
    skills: list[AboutSkillGroup] | None = None
    education: list[AboutEducation] | None = None
    focusAreas: StringList = None


class SuccessResponse(BaseModel):
    success: bool = Field(default=True)


@dataclass(frozen=True)
class ContentResource:
    path: str
    collection: str
    model: type[ContentModel]
    label: str
    singleton: bool = False
    required: tuple[str, ...] = ()
    missing_message: str = ""


RESOURCES: dict[str, ContentResource] = {
    resource.path: resource
    for resource in (
        ContentResource(
            path="skills",
            collection="skills",
            model=Skill,
            label="skills",
            required=("title", "icon", "skills"),
            missing_message="Each skill must have a title, icon, and skills.",
        ),
        ContentResource(
            path="certifications",
            collection="certifications",
            model=Certification,
            label="certifications",
            required=("title", "issuer", "date"),
            missing_message="Each certification must have a title, issuer, and date.",
        ),
        ContentResource(
            path="achievements",
            collection="achievements",
            model=Achievement,
            label="achievements",
            required=("title",),
            missing_message="Each achievement must have a title.",
        ),
        ContentResource(
            path="projects",
            collection="projects",
            model=Project,
            label="projects",
            required=("title", "description"),
            missing_message="Each project must have at least a title and a description.",
        ),
        ContentResource(
            path="experiences",
            collection="experiences",
            model=Experience,
            label="experiences",
            required=("title", "company", "startDate"),
            missing_message="Each experience must have a title, company, and startDate.",
        ),
        ContentResource(
            path="services",
            collection="services",
            model=Service,
            label="services",
            required=("title", "description"),
            missing_message="Each service must have a title and description.",
        ),
        ContentResource(
            path="contact-info",
            collection="contactinfos",
            model=ContactInfo,
            label="contact info",
            singleton=True,
            required=("email", "github", "linkedin"),
            missing_message="Contact info must have an email, github, and linkedin.",
        ),
        # About carries no server-side required fields; the admin form checks them.
        ContentResource(
            path="about",
            collection="abouts",
            model=About,
            label="about info",
            singleton=True,
        ),
    )
}
