"""Skill aggregate: an entry in the catalogue of developer skills."""

from datetime import UTC, datetime

from protean.fields import DateTime, String

from marketplace.domain import marketplace


@marketplace.aggregate(limit=None)
class Skill:
    """Skill names are unique regardless of case; ``name_key`` holds the folded form."""

    name: String(required=True, max_length=100)
    name_key: String(required=True, max_length=100, unique=True)
    added_at: DateTime()

    @staticmethod
    def key_for(name):
        return name.strip().casefold()

    @classmethod
    def add(cls, name):
        from marketplace.talent.skill.events import SkillAdded

        now = datetime.now(UTC)
        skill = cls(name=name.strip(), name_key=cls.key_for(name), added_at=now)
        skill.raise_(SkillAdded(skill_id=skill.id, name=skill.name, added_at=now))
        return skill

    def to_public_dict(self):
        return {"id": str(self.id), "name": self.name}
