"""Domain events for the DeveloperProfile aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="DeveloperProfile")
class DeveloperOnboarded:
    profile_id = Identifier(required=True)
    account_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    skill_count = Integer(required=True)
    onboarded_at = DateTime(required=True)
