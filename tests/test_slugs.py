"""
Tests for public URL slugs
"""
import re

import pytest

from launchgen_api.utils.slugs import SLUG_MAX_BASE_LENGTH, is_valid_slug, make_slug


def test_make_slug_from_title():
    slug = make_slug("Ship Faster!")
    assert re.fullmatch(r"ship-faster-[0-9a-z]{6}", slug)


def test_make_slug_truncates_long_titles():
    slug = make_slug("An extremely long headline that keeps going and going")
    base, _, suffix = slug.rpartition("-")
    assert len(base) <= SLUG_MAX_BASE_LENGTH
    assert not base.endswith("-")
    assert len(suffix) == 6


def test_make_slug_without_usable_characters():
    slug = make_slug("!!!")
    assert re.fullmatch(r"[0-9a-z]{6}", slug)


def test_make_slug_is_valid_and_random():
    slugs = {make_slug("Same Title") for _ in range(5)}
    assert len(slugs) > 1
    assert all(is_valid_slug(s) for s in slugs)


@pytest.mark.parametrize("slug", ["my-page", "My_Page_2", "abc"])
def test_valid_slugs(slug):
    assert is_valid_slug(slug)


@pytest.mark.parametrize("slug", ["", "my page", "page/1", "über", "a.b"])
def test_invalid_slugs(slug):
    assert not is_valid_slug(slug)
