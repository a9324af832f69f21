"""Tests stories : registry, fixtures, pages d'aperçu."""
from homepage_cms.blocks import ButtonProps, CheckboxProps, HeaderProps, HeroProps, InputProps
from homepage_cms.renderer.html import render_story_index, render_story_page
from homepage_cms.stories import get_all_stories, get_story


def test_registry_names():
    assert [s.name for s in get_all_stories()] == ["button", "header", "hero", "input", "checkbox"]


def test_get_story_unknown():
    assert get_story("inexistant") is None


def test_fixture_types():
    expected = {
        "button": ButtonProps,
        "header": HeaderProps,
        "hero": HeroProps,
        "input": InputProps,
        "checkbox": CheckboxProps,
    }
    for name, cls in expected.items():
        assert isinstance(get_story(name).fixture(), cls)


def test_header_fixture():
    props = get_story("header").fixture()
    assert props.headline == "Sample Header Component"
    assert props.button.href == "https://www.google.com"


def test_every_story_renders():
    for story in get_all_stories():
        html = story.render(story.fixture())
        assert html.strip().startswith("<")


def test_story_index_lists_all():
    html = render_story_index(get_all_stories())
    for story in get_all_stories():
        assert f'href="/admin/features/{story.name}/"' in html


def test_story_page_shows_preview_and_fixture():
    html = render_story_page(get_story("input"))
    assert "Input Component" in html
    assert 'class="form-input"' in html
    # Fixture affichée avec la clé JSON "type", sans les champs vides
    assert "&quot;type&quot;: &quot;email&quot;" in html
    assert "aria_describedby" not in html


def test_story_page_stylesheets():
    html = render_story_page(get_story("header"))
    assert "/features/header/styles.css" in html
    assert "/features/button/styles.css" in html
