from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Skill")
class SkillAdded:
    skill_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    added_at = DateTime(required=True)
