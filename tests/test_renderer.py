"""
Tests for server-side page rendering
"""
from bs4 import BeautifulSoup

from conftest import make_config
from launchgen_api.core.renderer import render_page
from launchgen_api.models.page_config import LandingPageConfig, Theme


def _render(config=None, theme=None, visibility=None, page_id="page-1"):
    config = LandingPageConfig.model_validate(config or make_config())
    theme = theme or Theme(mode="white", accentColor="#6366f1")
    return BeautifulSoup(render_page(config, theme, visibility, page_id=page_id), "html.parser")


def test_headline_highlights_are_wrapped():
    soup = _render()
    h1 = soup.find("h1")
    assert " ".join(h1.get_text().split()) == "Best Innovative AI Platform"
    assert [span.get_text() for span in h1.find_all("span", class_="highlight")] == ["Innovative"]


def test_stale_highlights_are_ignored():
    config = make_config()
    config["hero"]["headlineHighlights"] = ["Innovative", "Revolutionary"]
    spans = _render(config).find("h1").find_all("span", class_="highlight")
    assert [span.get_text() for span in spans] == ["Innovative"]


def test_theme_drives_classes_and_css_variables():
    soup = _render(theme=Theme(mode="black", accentColor="#10b981"))
    body = soup.find("body")
    assert body["data-theme"] == "black"
    assert "bg-black" in body["class"]
    assert "--accent: #10b981;" in soup.find("style").get_text()


def test_hidden_sections_are_not_rendered():
    config = make_config(faq={"title": "Questions", "questions": [{"question": "Why?", "answer": "Because."}]})
    assert _render(config).find("section", id="faq") is not None
    assert _render(config, visibility={"faq": False}).find("section", id="faq") is None


def test_section_order_is_respected():
    config = make_config(
        faq={"title": "Questions", "questions": []},
        sectionOrder=["faq", "features", "unknown", "faq"],
    )
    ids = [s.get("id") for s in _render(config).find_all("section") if s.get("id") in ("faq", "features")]
    assert ids == ["faq", "features"]


def test_user_content_is_escaped():
    config = make_config()
    config["features"][0]["title"] = "<script>alert(1)</script>"
    html = str(_render(config))
    assert "<script>alert(1)</script>" not in html


def test_tracking_only_with_page_id():
    assert "/api/analytics" in str(_render(page_id="page-1"))
    soup = _render(page_id=None)
    assert "/api/analytics" not in str(soup)
    assert soup.find("form", id="lead-capture") is None
