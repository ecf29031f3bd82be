"""Repository for the Skill aggregate."""

from marketplace.domain import marketplace
from marketplace.talent.skill.skill import Skill


@marketplace.repository(part_of=Skill)
class SkillRepository:
    def find_by_name(self, name: str) -> Skill | None:
        skills = self._dao.query.filter(name_key=Skill.key_for(name)).all().items
        return skills[0] if skills else None

    def all_skills(self) -> list[Skill]:
        return self._dao.query.order_by("name_key").limit(None).all().items

    def unknown_ids(self, skill_ids) -> set[str]:
        """The subset of ``skill_ids`` that name no stored skill."""
        wanted = {str(skill_id) for skill_id in skill_ids}
        if not wanted:
            return set()

        found = self._dao.query.filter(id__in=list(wanted)).limit(None).all().items
        return wanted - {str(skill.id) for skill in found}
