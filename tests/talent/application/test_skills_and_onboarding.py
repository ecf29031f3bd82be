"""Application tests for the skill catalogue and developer onboarding."""

import json

import pytest
from marketplace.talent.onboarding.onboarding import INVALID_SKILLS_MESSAGE, OnboardDeveloper
from marketplace.talent.onboarding.profile import DeveloperProfile
from marketplace.talent.skill.management import AddSkill
from marketplace.talent.skill.skill import Skill
from protean import current_domain
from protean.exceptions import ValidationError


def _add_skill(name):
    return current_domain.process(AddSkill(name=name), asynchronous=False)


def _onboard(skills, skills_used=(), email="ada@example.com"):
    command = OnboardDeveloper(
        account_id="dev-001",
        first_name="Ada",
        last_name="Lovelace",
        phone_number="+44 20 7946 0000",
        email=email,
        skills=json.dumps(list(skills)),
        professional_experiences=json.dumps(
            [
                {
                    "company_name": "Engines Ltd",
                    "tech_stack": "Python",
                    "skills_used": list(skills_used),
                    "time_period": "2019-2023",
                }
            ]
        ),
        educational_experiences=json.dumps(
            [{"degree_name": "BSc", "school_name": "London", "time_period": "2015-2018"}]
        ),
    )
    return current_domain.process(command, asynchronous=False)


def _stored_profiles():
    return current_domain.repository_for(DeveloperProfile)._dao.query.all().items


class TestAddSkill:
    def test_skill_is_stored(self):
        skill_id = _add_skill("Python")
        assert current_domain.repository_for(Skill).get(skill_id).name == "Python"

    def test_duplicate_is_rejected_case_insensitively(self):
        _add_skill("Python")

        with pytest.raises(ValidationError) as exc:
            _add_skill("python")

        assert exc.value.messages["name"] == ["Skill already exists."]
        assert len(current_domain.repository_for(Skill).all_skills()) == 1

    def test_all_skills_sorted_by_name(self):
        _add_skill("ReactJs")
        _add_skill("CSS3")

        assert [s.name for s in current_domain.repository_for(Skill).all_skills()] == ["CSS3", "ReactJs"]

    def test_listing_and_lookup_cover_every_skill(self):
        skill_ids = [_add_skill(f"Skill {n:03d}") for n in range(101)]

        repo = current_domain.repository_for(Skill)
        assert [s.name for s in repo.all_skills()] == [f"Skill {n:03d}" for n in range(101)]
        assert repo.unknown_ids(skill_ids) == set()
        assert repo.unknown_ids([*skill_ids, "no-such-skill"]) == {"no-such-skill"}


class TestOnboardDeveloper:
    def test_profile_is_stored(self):
        python = _add_skill("Python")
        sql = _add_skill("SQL")

        profile_id = _onboard(skills=[python, sql], skills_used=[python])

        profile = current_domain.repository_for(DeveloperProfile).get(profile_id)
        assert profile.skill_ids == [python, sql]
        assert profile.professional_experiences[0].skill_ids == [python]
        assert profile.educational_experiences[0].school_name == "London"

    def test_unknown_top_level_skill_persists_nothing(self):
        python = _add_skill("Python")

        with pytest.raises(ValidationError) as exc:
            _onboard(skills=[python, "no-such-skill"])

        assert exc.value.messages["skills"] == [INVALID_SKILLS_MESSAGE]
        assert _stored_profiles() == []

    def test_unknown_experience_skill_persists_nothing(self):
        python = _add_skill("Python")

        with pytest.raises(ValidationError):
            _onboard(skills=[python], skills_used=["no-such-skill"])

        assert _stored_profiles() == []

    def test_duplicate_email_is_rejected(self):
        python = _add_skill("Python")
        _onboard(skills=[python])

        with pytest.raises(ValidationError) as exc:
            _onboard(skills=[python], email="ADA@example.com")

        assert "email" in exc.value.messages
        assert len(_stored_profiles()) == 1
