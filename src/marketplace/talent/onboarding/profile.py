"""DeveloperProfile aggregate: what a developer submits when onboarding.

Skill references are stored as JSON arrays of skill ids, both on the profile
itself and on each professional experience.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, String, Text

from marketplace.domain import marketplace
from marketplace.talent.onboarding.events import DeveloperOnboarded


@marketplace.entity(part_of="DeveloperProfile", limit=None)
class ProfessionalExperience:
    company_name = String(required=True, max_length=200)
    tech_stack = String(required=True, max_length=500)
    skills_used = Text()  # JSON array of skill ids
    time_period = String(required=True, max_length=100)

    @property
    def skill_ids(self):
        return json.loads(self.skills_used) if self.skills_used else []


@marketplace.entity(part_of="DeveloperProfile", limit=None)
class EducationalExperience:
    degree_name = String(required=True, max_length=200)
    school_name = String(required=True, max_length=200)
    time_period = String(required=True, max_length=100)


@marketplace.aggregate(limit=None)
class DeveloperProfile:
    account_id = Identifier(required=True)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    phone_number = String(required=True, max_length=30)
    email = String(required=True, max_length=254, unique=True)
    skills = Text()  # JSON array of skill ids
    professional_experiences = HasMany(ProfessionalExperience)
    educational_experiences = HasMany(EducationalExperience)
    onboarded_at = DateTime()

    @classmethod
    def onboard(cls, account_id, first_name, last_name, phone_number, email, skills, professional, educational):
        """Build a profile from plain data.

        ``professional`` and ``educational`` are lists of dicts keyed by the
        experience field names; ``skills_used`` inside each professional
        experience is a list of skill ids.
        """
        now = datetime.now(UTC)
        profile = cls(
            account_id=account_id,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            email=email,
            skills=json.dumps([str(skill_id) for skill_id in skills]),
            professional_experiences=[
                ProfessionalExperience(
                    company_name=exp["company_name"],
                    tech_stack=exp["tech_stack"],
                    skills_used=json.dumps([str(s) for s in exp.get("skills_used", [])]),
                    time_period=exp["time_period"],
                )
                for exp in professional
            ],
            educational_experiences=[
                EducationalExperience(
                    degree_name=edu["degree_name"],
                    school_name=edu["school_name"],
                    time_period=edu["time_period"],
                )
                for edu in educational
            ],
            onboarded_at=now,
        )

        profile.raise_(
            DeveloperOnboarded(
                profile_id=str(profile.id),
                account_id=str(account_id),
                email=email,
                skill_count=len(profile.skill_ids),
                onboarded_at=now,
            )
        )
        return profile

    @property
    def skill_ids(self):
        return json.loads(self.skills) if self.skills else []

    def to_public_dict(self):
        return {
            "id": str(self.id),
            "account_id": str(self.account_id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone_number": self.phone_number,
            "email": self.email,
            "skills": self.skill_ids,
            "professional_experiences": [
                {
                    "company_name": exp.company_name,
                    "tech_stack": exp.tech_stack,
                    "skills_used": exp.skill_ids,
                    "time_period": exp.time_period,
                }
                for exp in self.professional_experiences
            ],
            "educational_experiences": [
                {
                    "degree_name": edu.degree_name,
                    "school_name": edu.school_name,
                    "time_period": edu.time_period,
                }
                for edu in self.educational_experiences
            ],
            "onboarded_at": self.onboarded_at.isoformat() if self.onboarded_at else None,
        }
