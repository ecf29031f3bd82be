"""FastAPI routes for the Talent domain: the skill catalogue and developer onboarding."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from marketplace.identity.account.account import PrincipalKind
from marketplace.identity.auth.gate import require_kind, require_principal
from marketplace.identity.auth.port import Principal
from marketplace.talent.api.schemas import (
    AddSkillRequest,
    AddSkillResponse,
    DeveloperProfileResponse,
    OnboardDeveloperRequest,
    OnboardDeveloperResponse,
    SkillResponse,
)
from marketplace.talent.onboarding.onboarding import OnboardDeveloper
from marketplace.talent.onboarding.profile import DeveloperProfile
from marketplace.talent.skill.management import AddSkill
from marketplace.talent.skill.skill import Skill

# ---------------------------------------------------------------------------
# Skill Router
# ---------------------------------------------------------------------------
skill_router = APIRouter(prefix="/skills", tags=["skills"])


@skill_router.post("/add", response_model=AddSkillResponse)
async def add_skill(body: AddSkillRequest) -> AddSkillResponse:
    skill_id = current_domain.process(AddSkill(name=body.name), asynchronous=False)
    skill = current_domain.repository_for(Skill).get(skill_id)
    return AddSkillResponse(skill=SkillResponse(**skill.to_public_dict()))


@skill_router.get("", response_model=list[SkillResponse])
async def list_skills() -> list[SkillResponse]:
    skills = current_domain.repository_for(Skill).all_skills()
    return [SkillResponse(**skill.to_public_dict()) for skill in skills]


# ---------------------------------------------------------------------------
# Onboarding Router
# ---------------------------------------------------------------------------
onboarding_router = APIRouter(prefix="/developers/onboarding", tags=["developers"])


@onboarding_router.post("", response_model=OnboardDeveloperResponse)
async def onboard_developer(
    body: OnboardDeveloperRequest,
    principal: Principal = Depends(require_kind(PrincipalKind.DEVELOPER)),
) -> OnboardDeveloperResponse:
    command = OnboardDeveloper(
        account_id=principal.id,
        first_name=body.first_name,
        last_name=body.last_name,
        phone_number=body.phone_number,
        email=body.email,
        skills=json.dumps(body.skills),
        professional_experiences=json.dumps([exp.model_dump() for exp in body.professional_experiences]),
        educational_experiences=json.dumps([edu.model_dump() for edu in body.educational_experiences]),
    )
    profile_id = current_domain.process(command, asynchronous=False)
    profile = current_domain.repository_for(DeveloperProfile).get(profile_id)
    return OnboardDeveloperResponse(developer=DeveloperProfileResponse(**profile.to_public_dict()))


@onboarding_router.get("/{profile_id}", response_model=DeveloperProfileResponse)
async def developer_profile(
    profile_id: str, principal: Principal = Depends(require_principal)
) -> DeveloperProfileResponse:
    profile = current_domain.repository_for(DeveloperProfile).get(profile_id)
    return DeveloperProfileResponse(**profile.to_public_dict())
