"""Prompt for hero background images"""
from typing import Optional

_IMAGE_RULES = """
CONCEPT: Think about what this product/service actually does and create a realistic scene that represents it. For example:
- If it's about productivity software: Show a clean desk with a laptop, coffee, and organized workspace
- If it's about fitness: Show gym equipment, healthy food, or people exercising
- If it's about finance: Show modern office, charts, or financial documents
- If it's about education: Show books, classroom, or learning materials
- If it's about design: Show design tools, creative workspace, or finished projects
- If it's about communication: Show people collaborating, meeting rooms, or communication devices

REQUIREMENTS:
- Use realistic objects and scenes, not abstract patterns
- Create a concept that directly relates to the product/service
- Professional and business-appropriate
- Subtle enough to not distract from text content
- Good contrast for text readability
- High quality, modern photography style
- No text, logos, or people's faces in the image
- Soft, slightly blurred background effect for hero section use
- Warm, inviting lighting that feels professional"""


def create_hero_image_prompt(headline: str, subheadline: Optional[str] = None, business_name: Optional[str] = None) -> str:
    """Image prompt describing a realistic background scene for the hero section."""
    parts = [f'Create a professional, realistic background image for a landing page about: "{headline.strip()}".']
    if subheadline and subheadline.strip():
        parts.append(f'The subheadline is: "{subheadline.strip()}".')
    if business_name and business_name.strip():
        parts.append(f"Business name: {business_name.strip()}.")
    return " ".join(parts) + "\n" + _IMAGE_RULES
