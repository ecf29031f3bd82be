"""Skill catalogue management: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.talent.skill.skill import Skill

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="Skill")
class AddSkill:
    name: String(required=True, max_length=100)


@marketplace.command_handler(part_of=Skill)
class ManageSkillHandler:
    @handle(AddSkill)
    def add_skill(self, command):
        repo = current_domain.repository_for(Skill)
        if repo.find_by_name(command.name) is not None:
            raise ValidationError({"name": ["Skill already exists."]})

        skill = Skill.add(name=command.name)
        repo.add(skill)

        logger.info("Skill added", skill_id=str(skill.id), name=skill.name)
        return str(skill.id)
