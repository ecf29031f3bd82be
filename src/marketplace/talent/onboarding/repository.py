from marketplace.domain import marketplace
from marketplace.talent.onboarding.profile import DeveloperProfile


@marketplace.repository(part_of=DeveloperProfile)
class DeveloperProfileRepository:
    def find_by_email(self, email: str) -> DeveloperProfile | None:
        profiles = self._dao.query.filter(email=email.strip().lower()).all().items
        return profiles[0] if profiles else None
