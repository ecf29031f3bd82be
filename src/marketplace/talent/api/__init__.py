"""Talent domain API package."""

from marketplace.talent.api.routes import onboarding_router, skill_router

__all__ = ["skill_router", "onboarding_router"]
