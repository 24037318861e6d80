# File: onboard/services/path_classifier.py

"""
Path classifier.

Asks the completion service which onboarding path fits a profile and
picks the first known user type that appears in the reply. Any failure
falls back to a fixed rule; neither method ever raises.
"""

import logging
from typing import Sequence

from onboard.services.llm import CompletionClient, ServiceUnavailableError
from onboard.services.path_catalog import USER_TYPES

logger = logging.getLogger(__name__)

CLASSIFY_MAX_TOKENS = 100
WELCOME_MAX_TOKENS = 150

GENERIC_WELCOME = "Welcome! We're excited to help you get the most out of our product."

CLASSIFY_PROMPT = """Based on the following user profile, determine the best-fit onboarding path.

User Role: {role}
Team Size: {team_size}
Primary Goal: {goal}

Available paths: {labels}

Respond with ONLY the user type path name that best fits this profile. No explanation, just the path name."""

WELCOME_PROMPT = """Create a short, friendly welcome message (2-3 sentences) for a user who just signed up for an onboarding path.

User name: {name}
Onboarding path: {label}

Make it warm, encouraging, and relevant to their chosen path."""


class PathClassifier:
    def __init__(self, client: CompletionClient, labels: Sequence[str] = USER_TYPES):
        self.client = client
        self.labels = list(labels)

    def fallback_label(self, role: str) -> str:
        if role in self.labels:
            return role
        return self.labels[0]

    def match_label(self, text: str) -> str | None:
        """First label, in catalog order, contained in text."""
        for label in self.labels:
            if label in text:
                return label
        return None

    def classify(self, role: str, team_size: str, goal: str) -> str:
        prompt = CLASSIFY_PROMPT.format(
            role=role,
            team_size=team_size,
            goal=goal,
            labels=", ".join(self.labels),
        )
        try:
            reply = self.client.complete(prompt, CLASSIFY_MAX_TOKENS)
        except ServiceUnavailableError as exc:
            logger.warning("Path classification failed, using fallback: %s", exc)
            return self.fallback_label(role)
        except Exception:
            logger.warning("Unexpected completion error during classification, using fallback", exc_info=True)
            return self.fallback_label(role)

        label = self.match_label(reply or "")
        if label is None:
            logger.info("Completion named no known path (%r), using fallback", (reply or "")[:80])
            return self.fallback_label(role)
        return label

    def compose_welcome(self, name: str, label: str) -> str:
        prompt = WELCOME_PROMPT.format(name=name, label=label)
        try:
            reply = self.client.complete(prompt, WELCOME_MAX_TOKENS)
        except ServiceUnavailableError as exc:
            logger.warning("Welcome message generation failed: %s", exc)
            return GENERIC_WELCOME
        except Exception:
            logger.warning("Unexpected completion error during welcome message", exc_info=True)
            return GENERIC_WELCOME

        if reply and reply.strip():
            return reply.strip()
        return f"Welcome! We're excited to get you started with your {label} journey."
