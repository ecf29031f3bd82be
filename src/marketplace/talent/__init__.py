"""Talent bounded context."""

# Domain.init() only traverses one folder below domain.py, so the modules
# that register domain elements are imported here to be loaded by init().
import marketplace.talent.onboarding.events  # noqa: F401
import marketplace.talent.onboarding.onboarding  # noqa: F401
import marketplace.talent.onboarding.profile  # noqa: F401
import marketplace.talent.onboarding.repository  # noqa: F401
import marketplace.talent.skill.events  # noqa: F401
import marketplace.talent.skill.management  # noqa: F401
import marketplace.talent.skill.repository  # noqa: F401
import marketplace.talent.skill.skill  # noqa: F401
