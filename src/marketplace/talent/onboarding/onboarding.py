"""Developer onboarding: command and handler.

Every referenced skill id is checked before anything is written, so a
submission naming an unknown skill leaves no trace.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.shared.email import EmailAddress
from marketplace.talent.onboarding.profile import DeveloperProfile
from marketplace.talent.skill.skill import Skill

logger = structlog.get_logger(__name__)

INVALID_SKILLS_MESSAGE = "Invalid skills provided."


@marketplace.command(part_of="DeveloperProfile")
class OnboardDeveloper:
    account_id = Identifier(required=True)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    phone_number = String(required=True, max_length=30)
    email = String(required=True, max_length=254)
    skills = Text()  # JSON array of skill ids
    professional_experiences = Text()  # JSON array of objects
    educational_experiences = Text()  # JSON array of objects


def _referenced_skill_ids(skills, professional):
    referenced = [str(skill_id) for skill_id in skills]
    for exp in professional:
        referenced.extend(str(skill_id) for skill_id in exp.get("skills_used", []))
    return referenced


@marketplace.command_handler(part_of=DeveloperProfile)
class OnboardDeveloperHandler:
    @handle(OnboardDeveloper)
    def onboard_developer(self, command):
        skills = json.loads(command.skills) if command.skills else []
        professional = json.loads(command.professional_experiences) if command.professional_experiences else []
        educational = json.loads(command.educational_experiences) if command.educational_experiences else []

        unknown = current_domain.repository_for(Skill).unknown_ids(_referenced_skill_ids(skills, professional))
        if unknown:
            logger.info("Onboarding rejected", account_id=str(command.account_id), unknown_skills=sorted(unknown))
            raise ValidationError({"skills": [INVALID_SKILLS_MESSAGE]})

        email = EmailAddress.normalized(command.email)
        repo = current_domain.repository_for(DeveloperProfile)
        if repo.find_by_email(email) is not None:
            raise ValidationError({"email": ["A developer profile with this email already exists"]})

        profile = DeveloperProfile.onboard(
            account_id=command.account_id,
            first_name=command.first_name,
            last_name=command.last_name,
            phone_number=command.phone_number,
            email=email,
            skills=skills,
            professional=professional,
            educational=educational,
        )
        repo.add(profile)

        logger.info("Developer onboarded", profile_id=str(profile.id), account_id=str(command.account_id))
        return str(profile.id)
