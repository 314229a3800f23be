"""System prompts for landing page config generation"""
import json
from typing import Any, Dict

from launchgen_api.agents.generator_schemas import HERO_TAG_ICONS

_ICON_LIST = ", ".join(f'"{icon}"' for icon in HERO_TAG_ICONS)

_FIELD_RULES = f"""
CRITICAL REQUIREMENTS - ALWAYS INCLUDE THESE FIELDS:
- business.name: A creative, memorable business name that fits the product. If the user names the business, use that name. Must NOT be empty.
- business.logo: Leave empty string "" for the default logo placeholder.
- hero.headline: A compelling, conversion-focused headline that states the main value proposition.
- hero.headlineHighlights: Array of 1-3 words taken from the headline to show in the accent color (e.g. "AI", "Smart", "Fast", "Best"). Must be an array, even if empty.
- hero.heroTag: A short badge text (e.g. "AI-Powered", "Trusted by 10K+"). Must NOT be empty.
- hero.heroTagIcon: MUST be one of: {_ICON_LIST}.
- hero.subheadline: A subheadline that expands on the value proposition.
- hero.cta: A clear call-to-action button text (e.g. "Get Started", "Start Free Trial").
- hero.media: enabled (true only if media helps), type ("image", "video", "youtube" or "vimeo"), url (real Unsplash or Pexels image URLs only, never placeholder domains), altText, thumbnail.

// Problem Section
- problemSection.title, problemSection.subtitle, and problemSection.painPoints: 3-5 specific, emotionally resonant pain points.

// Social Proof Section
- socialProof.title, socialProof.subtitle.
- socialProof.stats: EXACTLY 3 statistics, each with number, label and description.
- socialProof.testimonials: 2-3 testimonials with specific results.

// Features Section
- featuresTitle and featuresSubtitle: Must NOT be empty.
- features: 3-6 features with title, description, icon and benefit.

// Pricing Section
- pricing.title, pricing.description and exactly 3 pricing.plans (id, name, price, period, description, 4-6 features, popular, ctaText, ctaLink). Only the middle plan has popular: true.

// Risk Reversal, FAQ and closing CTA
- guarantees.title, guarantees.subtitle and 2-3 guarantees.guarantees.
- faq.title, faq.subtitle and 3-5 faq.questions with answers that address objections.
- ctaTitle and ctaSubtitle: Must NOT be empty.
- urgency.enabled, urgency.message, urgency.deadline.

// Theme Selection - analyze the business type first
- theme.mode: MUST be "white" (light) or "black" (dark).
  * "white" for professional services, healthcare, finance, education, B2B SaaS, corporate tools
  * "black" for creative agencies, gaming, entertainment, luxury, tech startups, fashion, music, art
- theme.accentColor: A 6-digit hex color that fits the business:
  * Professional/Corporate: #2563eb, #1d4ed8, #059669
  * Tech/Startup: #7c3aed, #8b5cf6, #3b82f6, #14b8a6
  * Creative/Art: #ea580c, #db2777, #a855f7, #ef4444
  * Health/Wellness: #059669, #10b981, #0ea5e9
  * Finance/Trust: #1e40af, #1e3a8a, #374151
  * Luxury/Premium: #d97706, #f59e0b, #6b21a8
  * Food/Restaurant: #dc2626, #ea580c, #eab308
"""


def create_new_generation_prompt(schema_string: str, user_prompt: str) -> str:
    """System prompt for a first generation."""
    return (
        "You are an expert SaaS landing page copywriter and designer. You must respond with ONLY a valid "
        "JSON object that follows this exact schema structure. Do not include any explanations, markdown "
        "formatting, or text outside the JSON object.\n\n"
        "CRITICAL: Before generating any content, analyze the business type, industry, and target audience "
        "from the user's prompt, and choose the theme and accent color accordingly.\n\n"
        f"SCHEMA:\n{schema_string}\n"
        f"{_FIELD_RULES}\n"
        "IMPORTANT: All required fields above MUST be present and must NOT be empty. If you are unsure, "
        "use a sensible default value.\n\n"
        "CRITICAL: Ensure your JSON is complete and properly formatted. Do not truncate or leave strings unclosed.\n\n"
        f"Generate a landing page config for: {user_prompt}\n\n"
        "Respond with ONLY the JSON object, no markdown formatting."
    )


def create_regeneration_prompt(schema_string: str, user_prompt: str, existing_config: Dict[str, Any]) -> str:
    """System prompt for improving an existing config against the original prompt."""
    return (
        "You are an expert SaaS landing page copywriter and designer. You are REGENERATING an existing "
        "landing page to improve its content based on the user's ORIGINAL PROMPT. You must respond with ONLY "
        "a valid JSON object that follows this exact schema structure.\n\n"
        f"SCHEMA:\n{schema_string}\n\n"
        f'ORIGINAL USER PROMPT (this is what the user originally requested):\n"{user_prompt}"\n\n'
        "EXISTING CONFIG (current landing page content - improve upon this):\n"
        f"{json.dumps(existing_config, indent=2, ensure_ascii=False)}\n\n"
        "CRITICAL REQUIREMENTS FOR REGENERATION:\n"
        "- Use the ORIGINAL USER PROMPT as your primary guide\n"
        "- IMPROVE the existing content, don't just repeat it\n"
        "- Fill in any empty sections with content specific to the original prompt\n"
        "- Keep the same business name and theme if they are still relevant\n"
        "- PRESERVE existing headlineHighlights if the headline stays similar; pick new ones only if it changes significantly\n"
        f"{_FIELD_RULES}\n"
        "CRITICAL: Ensure your JSON is complete and properly formatted. If you cannot generate meaningful "
        "content for a section, leave that section out rather than filling it with placeholder text.\n\n"
        f'Regenerate and improve the landing page config to better match the original user request: "{user_prompt}"\n\n'
        "Respond with ONLY the JSON object, no markdown formatting."
    )
