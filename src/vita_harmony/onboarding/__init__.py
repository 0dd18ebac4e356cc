"""Onboarding questionnaire."""

from .questionnaire import OnboardingQuestionnaire

__all__ = ["OnboardingQuestionnaire"]
