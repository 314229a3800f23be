"""Landing page config shape shown to the model"""
import json

HERO_TAG_ICONS = [
    "zap", "star", "shield", "rocket", "target", "trendingUp", "award", "sparkles",
    "heart", "check", "arrow-up", "trophy", "gem", "crown", "fire", "flame", "bolt",
    "diamond", "medal", "lightning", "clock", "book", "wallet", "users", "chart",
    "globe", "exclamation", "question", "minus", "x", "alert", "warning", "info",
    "brain", "cart", "lock", "key", "safety", "guarantee", "certificate", "badge",
    "lightbulb", "wrench", "smartphone", "monitor", "heart-crack", "frown", "angry",
    "moon", "alert-triangle", "alert-circle", "sad",
]

LANDING_PAGE_SCHEMA_EXAMPLE = {
    "business": {"name": "", "logo": ""},
    "hero": {
        "headline": "",
        "headlineHighlights": [],
        "subheadline": "",
        "cta": "",
        "heroTag": "",
        "heroTagIcon": "",
        "backgroundImage": "",
        "media": {
            "enabled": False,
            "type": "image",
            "url": "",
            "altText": "",
            "thumbnail": "",
        },
    },
    "problemSection": {
        "title": "",
        "subtitle": "",
        "painPoints": [{"text": "", "icon": ""}],
    },
    "socialProof": {
        "title": "",
        "subtitle": "",
        "testimonials": [
            {"name": "", "role": "", "company": "", "quote": "", "rating": 5, "result": ""}
        ],
        "stats": [{"number": "", "label": "", "description": ""}],
    },
    "features": [{"title": "", "description": "", "icon": "", "benefit": ""}],
    "featuresTitle": "",
    "featuresSubtitle": "",
    "guarantees": {
        "title": "",
        "subtitle": "",
        "guarantees": [{"title": "", "description": "", "icon": ""}],
    },
    "faq": {
        "title": "",
        "subtitle": "",
        "questions": [{"question": "", "answer": ""}],
    },
    "pricing": {
        "title": "",
        "description": "",
        "plans": [
            {
                "id": "",
                "name": "",
                "price": "",
                "period": "",
                "description": "",
                "features": [""],
                "popular": False,
                "ctaText": "",
                "ctaLink": "",
            }
        ],
    },
    "ctaTitle": "",
    "ctaSubtitle": "",
    "urgency": {"enabled": False, "message": "", "deadline": ""},
    "theme": {"mode": "white", "accentColor": "#6366f1"},
    "sectionOrder": ["problemSection", "features", "socialProof", "pricing", "guarantees", "faq", "cta"],
}


def get_schema_string() -> str:
    return json.dumps(LANDING_PAGE_SCHEMA_EXAMPLE, indent=2)
