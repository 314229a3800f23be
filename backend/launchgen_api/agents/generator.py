"""Landing page config generator"""
import copy
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as SchemaValidationError

from launchgen_api.agents.client import OpenAIClient, openai_client
from launchgen_api.agents.generator_prompt import create_new_generation_prompt, create_regeneration_prompt
from launchgen_api.agents.generator_schemas import HERO_TAG_ICONS, get_schema_string
from launchgen_api.core.config import settings
from launchgen_api.core.theme import resolve_config_theme
from launchgen_api.models.errors import GenerationFailed, ValidationError
from launchgen_api.models.page_config import DEFAULT_SECTION_ORDER, LandingPageConfig
from launchgen_api.utils.json_repair import extract_json_from_content, repair_json

logger = logging.getLogger(__name__)

DEFAULT_BUSINESS_NAME = "LaunchGen"
DEFAULT_HERO_TAG = "AI-Powered Solution"
DEFAULT_HERO_TAG_ICON = "sparkles"

DEFAULT_STATS = [
    {"number": "10,000+", "label": "Happy Customers", "description": "Trusted by businesses worldwide"},
    {"number": "95%", "label": "Success Rate", "description": "Average customer satisfaction"},
    {"number": "$50K", "label": "Revenue Increase", "description": "Average monthly growth"},
]

# Section defaults used when the model leaves a section out
SECTION_FALLBACKS: Dict[str, Dict[str, Any]] = {
    "problemSection": {
        "title": "The Problem",
        "subtitle": "Are you struggling with these common challenges?",
        "painPoints": [],
    },
    "socialProof": {
        "title": "What Our Customers Say",
        "subtitle": "Join thousands of satisfied customers",
        "testimonials": [],
        "stats": DEFAULT_STATS,
    },
    "guarantees": {
        "title": "Our Guarantees",
        "subtitle": "We're confident you'll love our solution",
        "guarantees": [],
    },
    "faq": {
        "title": "Frequently Asked Questions",
        "subtitle": "Everything you need to know",
        "questions": [],
    },
    "urgency": {
        "enabled": False,
        "message": "Limited Time Offer",
        "deadline": "Ends in 24 hours",
    },
}

# Top-level text fields that must not be blank
TEXT_FALLBACKS = {
    "featuresTitle": "Powerful Features",
    "featuresSubtitle": "Everything you need to build, deploy, and scale your applications with confidence.",
    "ctaTitle": "Ready to Get Started?",
    "ctaSubtitle": "Join thousands of users who are already building amazing things with our platform.",
}

# List fields inside sections that must be lists
SECTION_LIST_FIELDS = {
    "problemSection": "painPoints",
    "socialProof": "testimonials",
    "guarantees": "guarantees",
    "faq": "questions",
}


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def parse_config_content(content: str) -> Dict[str, Any]:
    """
    Parse the model's text into a JSON object, trying one repair pass.

    Raises:
        GenerationFailed: If the content is not a JSON object even after repair
    """
    json_string = extract_json_from_content(content)
    try:
        config = json.loads(json_string)
    except json.JSONDecodeError as e:
        logger.warning(f"[Generator] JSON parse failed ({e}), attempting repair")
        try:
            config = json.loads(repair_json(json_string))
            logger.info("[Generator] ✓ Parsed repaired JSON")
        except json.JSONDecodeError as repair_error:
            logger.error(f"[Generator] JSON repair failed | error: {repair_error} | preview: {json_string[:200]}...")
            raise GenerationFailed("The AI response was malformed and could not be parsed as JSON.") from repair_error

    if not isinstance(config, dict):
        raise GenerationFailed(f"Expected a JSON object, got {type(config).__name__}.")
    return config


def validate_config_structure(config: Dict[str, Any]) -> None:
    """
    Check the fields every config must have.

    Raises:
        GenerationFailed: If hero or features are missing or unusable
    """
    hero = config.get("hero")
    if not isinstance(hero, dict):
        raise GenerationFailed("Config missing 'hero' section")
    if _is_blank(hero.get("headline")):
        raise GenerationFailed("Config 'hero' section missing headline")
    features = config.get("features")
    if not isinstance(features, list) or not features:
        raise GenerationFailed("Config missing 'features' array")


def apply_fallbacks(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fill optional parts the model skipped and normalize the theme.

    Returns a new dict; the input is left untouched.
    """
    config = copy.deepcopy(config)

    business = config.get("business")
    if not isinstance(business, dict):
        business = config["business"] = {}
    if _is_blank(business.get("name")):
        business["name"] = DEFAULT_BUSINESS_NAME
    business.setdefault("logo", "")

    hero = config["hero"]
    if not hero.get("cta") and hero.get("ctaText"):
        hero["cta"] = hero.pop("ctaText")
    if not isinstance(hero.get("headlineHighlights"), list):
        hero["headlineHighlights"] = []
    if _is_blank(hero.get("heroTag")):
        hero["heroTag"] = DEFAULT_HERO_TAG
    if hero.get("heroTagIcon") not in HERO_TAG_ICONS:
        hero["heroTagIcon"] = DEFAULT_HERO_TAG_ICON

    for section, fallback in SECTION_FALLBACKS.items():
        if not isinstance(config.get(section), dict):
            config[section] = copy.deepcopy(fallback)
    for section, field in SECTION_LIST_FIELDS.items():
        if not isinstance(config[section].get(field), list):
            config[section][field] = []
    stats = config["socialProof"].get("stats")
    if not isinstance(stats, list) or not stats:
        config["socialProof"]["stats"] = copy.deepcopy(DEFAULT_STATS)

    for field, fallback in TEXT_FALLBACKS.items():
        if _is_blank(config.get(field)):
            config[field] = fallback

    if not isinstance(config.get("sectionOrder"), list) or not config["sectionOrder"]:
        config["sectionOrder"] = list(DEFAULT_SECTION_ORDER)

    # One canonical theme; legacy colors only feed the resolver
    config["theme"] = resolve_config_theme(config).model_dump()
    config.pop("themeColors", None)
    config.pop("theme_colors", None)

    return config


def discard_invalid_parts(config: Dict[str, Any], errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Reset the optional parts of a config that failed schema validation.

    Optional sections go back to their fallback, bad feature items and hero
    extras are dropped. The hero headline and the features list are never
    invented here, so a config without them still fails.

    Returns a new dict; the input is left untouched.
    """
    config = copy.deepcopy(config)
    bad_features = set()

    for error in errors:
        loc = error.get("loc") or ()
        if not loc:
            continue
        top = loc[0]
        if top == "features":
            if len(loc) > 1 and isinstance(loc[1], int):
                bad_features.add(loc[1])
        elif top == "hero":
            if len(loc) > 1 and loc[1] != "headline" and isinstance(config.get("hero"), dict):
                config["hero"].pop(loc[1], None)
        elif top in SECTION_FALLBACKS:
            config[top] = copy.deepcopy(SECTION_FALLBACKS[top])
        elif top in TEXT_FALLBACKS:
            config[top] = TEXT_FALLBACKS[top]
        elif top != "theme":
            config.pop(top, None)

    if bad_features and isinstance(config.get("features"), list):
        config["features"] = [f for i, f in enumerate(config["features"]) if i not in bad_features]
    return config


class ConfigGenerator:
    """Turns a natural language prompt into a LandingPageConfig via the AI service.

    One attempt per call. Retrying is up to the caller, and a failed attempt
    has no side effects.
    """

    def __init__(self, client: Optional[OpenAIClient] = None):
        self.client = client or openai_client

    async def generate(self, prompt: str, existing_config: Optional[Dict[str, Any]] = None) -> LandingPageConfig:
        """
        Generate (or regenerate) a landing page config.

        Args:
            prompt: The user's description of the product
            existing_config: Current config when regenerating

        Returns:
            A validated config with fallbacks applied and a resolved theme

        Raises:
            ValidationError: If the prompt is empty
            GenerationFailed: If the AI call or its output is unusable
        """
        if not isinstance(prompt, str) or not prompt.strip():
            raise ValidationError("Prompt is required.", field="prompt")

        schema_string = get_schema_string()
        if existing_config:
            system_prompt = create_regeneration_prompt(schema_string, prompt, existing_config)
            max_tokens = settings.openai_regeneration_max_tokens
        else:
            system_prompt = create_new_generation_prompt(schema_string, prompt)
            max_tokens = settings.openai_max_tokens

        logger.info(f"[Generator] {'Regenerating' if existing_config else 'Generating'} config | prompt_length={len(prompt)}")
        content = await self.client.complete(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            max_tokens=max_tokens,
        )

        raw_config = parse_config_content(content)
        validate_config_structure(raw_config)

        config_data = apply_fallbacks(raw_config)
        try:
            config = LandingPageConfig.model_validate(config_data)
        except SchemaValidationError as e:
            logger.warning(f"[Generator] Discarding unusable parts: {e}")
            cleaned = discard_invalid_parts(config_data, e.errors())
            validate_config_structure(cleaned)
            try:
                config = LandingPageConfig.model_validate(cleaned)
            except SchemaValidationError as retry_error:
                logger.error(f"[Generator] Config schema validation failed: {retry_error}")
                raise GenerationFailed(
                    f"Config schema validation failed: {retry_error.error_count()} error(s)"
                ) from retry_error

        logger.info(f"[Generator] ✓ Config ready | features={len(config.features)} | theme={config.theme.mode}")
        return config


async def generate_config(prompt: str, existing_config: Optional[Dict[str, Any]] = None) -> LandingPageConfig:
    """Generate a config with the default OpenAI client."""
    return await ConfigGenerator().generate(prompt, existing_config)
