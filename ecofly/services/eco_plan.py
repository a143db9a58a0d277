"""AI eco-plan prompt building, generation and markup formatting."""

from __future__ import annotations

import logging
import re

from ecofly.models.airport import Airport
from ecofly.services import openai_client
from ecofly.services.presentation import round_half_up

logger = logging.getLogger("ecofly.eco_plan")

ECO_PLAN_ERROR_MESSAGE = "Could not generate AI eco-plan. Please try again."

SYSTEM_MESSAGE = 'You are an expert eco-travel assistant for a project called "EcoFly".'

_BULLET_RE = re.compile(r"^\* (.*)$", re.MULTILINE)
_LIST_RE = re.compile(r"(<li>.*</li>)", re.DOTALL)
_LIST_OPEN = '<ul class="list-disc list-inside space-y-2">'


class EcoPlanError(RuntimeError):
    """Raised when the AI service cannot produce an eco-plan."""

    def __init__(self, message: str = ECO_PLAN_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def build_eco_plan_prompt(
    origin: Airport, destination: Airport, distance_km: float, emissions_kg: float
) -> str:
    """Construct the eco-plan prompt for a calculated route."""

    lines = [
        (
            f"A user is planning a flight from {origin.name} ({origin.city}, {origin.iata}) "
            f"to {destination.name} ({destination.city}, {destination.iata})."
        ),
        (
            f"The flight distance is approximately {round_half_up(distance_km)} km, producing "
            f"about {emissions_kg:.1f} kg of CO₂ per passenger."
        ),
        "",
        "Please provide a concise, actionable, and encouraging eco-friendly travel plan for this specific trip.",
        "Structure your response in Markdown.",
        "Include a friendly introductory sentence.",
        "Then, provide 3-4 bullet points with practical tips covering topics like:",
        "- Choosing more sustainable airlines or routes if possible.",
        "- Packing light.",
        "- Carbon offsetting.",
        f"- Using public transport at the destination city ({destination.city}).",
        "Keep the tone positive and helpful.",
    ]
    return "\n".join(lines)


async def generate_eco_plan(
    origin: Airport, destination: Airport, distance_km: float, emissions_kg: float
) -> str:
    """Ask the AI service for an eco-plan; failures raise EcoPlanError."""

    prompt = build_eco_plan_prompt(origin, destination, distance_km, emissions_kg)
    try:
        plan = await openai_client.generate_text(prompt, system_message=SYSTEM_MESSAGE)
    except RuntimeError as exc:
        logger.error("Eco-plan generation failed: %s", exc)
        raise EcoPlanError() from exc

    logger.info("Generated eco-plan for %s->%s", origin.iata, destination.iata)
    return plan.strip()


def format_plan_markup(text: str | None) -> str:
    """Apply the small markup whitelist used to render plans.

    ``* item`` lines become list items wrapped in a single list, and remaining
    newlines become ``<br />``. Nothing else is transformed.
    """

    if not text:
        return ""
    html = _BULLET_RE.sub(r"<li>\1</li>", text)
    html = _LIST_RE.sub(lambda match: f"{_LIST_OPEN}{match.group(1)}</ul>", html)
    return html.replace("\n", "<br />")


__all__ = [
    "ECO_PLAN_ERROR_MESSAGE",
    "EcoPlanError",
    "build_eco_plan_prompt",
    "format_plan_markup",
    "generate_eco_plan",
]
