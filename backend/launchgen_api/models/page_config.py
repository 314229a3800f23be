"""Landing page configuration models"""

import re
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Renderable sections, in default order
DEFAULT_SECTION_ORDER = [
    "problemSection",
    "features",
    "socialProof",
    "pricing",
    "guarantees",
    "faq",
    "cta",
]

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class ConfigModel(BaseModel):
    """Base for config parts; unknown keys from the AI or the editor are kept.

    Numbers are accepted wherever text is expected ("number": 10000).
    """
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class Theme(BaseModel):
    """Canonical theme"""
    mode: Literal["white", "black"] = "white"
    accentColor: str

    @field_validator("accentColor")
    @classmethod
    def check_hex(cls, value: str) -> str:
        """Accent must be #RGB or #RRGGBB; the short form is expanded"""
        value = value.strip()
        if not _HEX_COLOR_RE.match(value):
            raise ValueError(f"accentColor must be a hex color like #6366f1, got {value!r}")
        if len(value) == 4:
            value = "#" + "".join(ch * 2 for ch in value[1:])
        return value


class ThemeColors(ConfigModel):
    """Legacy theme description"""
    primaryColor: Optional[str] = None
    secondaryColor: Optional[str] = None
    accentColor: Optional[str] = None


class Business(ConfigModel):
    name: str = ""
    logo: str = ""


class HeroMedia(ConfigModel):
    enabled: bool = False
    type: str = "image"
    url: str = ""
    altText: str = ""
    thumbnail: str = ""


class Hero(ConfigModel):
    headline: str
    headlineHighlights: List[str] = []
    subheadline: str = ""
    cta: str = ""
    backgroundImage: Optional[str] = None
    heroTag: Optional[str] = None
    heroTagIcon: Optional[str] = None
    media: Optional[HeroMedia] = None


class PainPoint(ConfigModel):
    text: str = ""
    icon: str = ""

    @model_validator(mode="before")
    @classmethod
    def coerce_plain_text(cls, value: Any) -> Any:
        """The AI sometimes returns pain points as bare strings"""
        if isinstance(value, str):
            return {"text": value}
        return value


class ProblemSection(ConfigModel):
    title: str = ""
    subtitle: str = ""
    painPoints: List[PainPoint] = []


class Testimonial(ConfigModel):
    name: str = ""
    role: str = ""
    company: str = ""
    quote: str = ""
    rating: float = 5
    result: str = ""

    @field_validator("rating", mode="before")
    @classmethod
    def lenient_rating(cls, value: Any) -> Any:
        """Accept strings like 4.5 or 4/5 from the AI; anything unreadable becomes 5"""
        if isinstance(value, str):
            match = re.match(r"\s*(\d+(?:\.\d+)?)", value)
            return float(match.group(1)) if match else 5
        if value is None:
            return 5
        return value


class Stat(ConfigModel):
    number: str = ""
    label: str = ""
    description: str = ""


class SocialProof(ConfigModel):
    title: str = ""
    subtitle: str = ""
    testimonials: List[Testimonial] = []
    stats: List[Stat] = []


class Feature(ConfigModel):
    title: str = ""
    description: str = ""
    icon: Optional[str] = None
    benefit: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def accept_name_or_text(cls, value: Any) -> Any:
        """Features sometimes come back as bare strings or keyed by name"""
        if isinstance(value, str):
            return {"title": value}
        if isinstance(value, dict) and not value.get("title") and value.get("name"):
            return {**value, "title": value["name"]}
        return value


class GuaranteeItem(ConfigModel):
    title: str = ""
    description: str = ""
    icon: str = ""


class Guarantees(ConfigModel):
    title: str = ""
    subtitle: str = ""
    guarantees: List[GuaranteeItem] = []


class FAQEntry(ConfigModel):
    question: str = ""
    answer: str = ""


class FAQ(ConfigModel):
    title: str = ""
    subtitle: str = ""
    questions: List[FAQEntry] = []


class PricingPlan(ConfigModel):
    id: str = ""
    name: str = ""
    price: str = ""
    period: str = ""
    description: str = ""
    features: List[str] = []
    popular: bool = False
    ctaText: str = ""
    ctaLink: str = ""


class Pricing(ConfigModel):
    title: str = ""
    description: str = ""
    plans: List[PricingPlan] = []


class Urgency(ConfigModel):
    enabled: bool = False
    message: str = ""
    deadline: str = ""


class LandingPageConfig(ConfigModel):
    """Generated/persisted configuration for one landing page"""
    business: Optional[Business] = None
    hero: Hero
    problemSection: Optional[ProblemSection] = None
    socialProof: Optional[SocialProof] = None
    features: List[Feature]
    featuresTitle: Optional[str] = None
    featuresSubtitle: Optional[str] = None
    pricing: Optional[Pricing] = None
    guarantees: Optional[Guarantees] = None
    faq: Optional[FAQ] = None
    ctaTitle: Optional[str] = None
    ctaSubtitle: Optional[str] = None
    urgency: Optional[Urgency] = None
    theme: Optional[Theme] = None
    themeColors: Optional[ThemeColors] = None
    sectionOrder: Optional[List[str]] = None

    def ordered_sections(self, visibility: Optional[Dict[str, bool]] = None) -> List[str]:
        """Section ids to render, in order, skipping unknown and hidden ones."""
        order = self.sectionOrder or DEFAULT_SECTION_ORDER
        visibility = visibility or {}
        seen = []
        for section in order:
            if section in DEFAULT_SECTION_ORDER and section not in seen and visibility.get(section, True):
                seen.append(section)
        return seen


class PageStyle(ConfigModel):
    """Stored presentation settings for a page"""
    theme: Optional[Theme] = None
    sectionVisibility: Dict[str, bool] = Field(default_factory=dict)
