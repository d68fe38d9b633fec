import logging

import pytest

from varshaphala_engine.core.constants import Language, Planet, ZodiacSign
from varshaphala_engine.core.errors import CalculationError
from varshaphala_engine.core.report import WIDTH
from varshaphala_engine.core.templates import (
    ENGLISH, NEPALI, CatalogTemplates, default_templates,
)


@pytest.fixture
def text():
    return CatalogTemplates({
        Language.ENGLISH: {"greeting": "Hello {name}", "only.english": "fallback",
                           "list.and": "{head} and {last}", "tags": ["a", "b"],
                           "planet.SUN": "Sun", "planet.MOON": "Moon"},
        Language.NEPALI: {"greeting": "नमस्ते {name}", "planet.SUN": "सूर्य"},
    })


def test_render_in_requested_language(text):
    assert text.render("greeting", Language.ENGLISH, name="Ram") == "Hello Ram"
    assert text.render("greeting", "ne", name="Ram") == "नमस्ते Ram"


def test_missing_translation_falls_back_to_english(text, caplog):
    with caplog.at_level(logging.DEBUG, logger="varshaphala_engine.core.templates"):
        assert text.render("only.english", Language.NEPALI) == "fallback"
    assert "falling back to English" in caplog.text
    assert text.planet_name(Planet.MOON, "ne") == "Moon"
    assert text.planet_name(Planet.SUN, "ne") == "सूर्य"


def test_missing_key_raises(text, caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(CalculationError):
            text.render("no.such.key", Language.ENGLISH)
    assert "no.such.key" in caplog.text


def test_missing_parameter_raises(text):
    with pytest.raises(CalculationError):
        text.render("greeting", Language.ENGLISH)


def test_lists_and_joins(text):
    assert text.render_list("tags", "en") == ["a", "b"]
    assert text.render_list("greeting", "en") == ["Hello {name}"]
    assert text.render_join(["x"], "en") == "x"
    assert text.render_join(["x", "y", "z"], "en") == "x, y and z"
    assert text.planet_list([Planet.SUN, Planet.MOON], "en") == "Sun, Moon"


def test_english_catalogue_required():
    with pytest.raises(ValueError):
        CatalogTemplates({Language.NEPALI: {}})


def test_nepali_keys_exist_in_english():
    assert set(NEPALI) <= set(ENGLISH)


def test_every_planet_and_sign_named_in_both_languages():
    text = default_templates()
    for language in Language:
        for planet in Planet:
            assert text.planet_name(planet, language)
        for sign in ZodiacSign:
            assert text.sign_name(sign, language)
    assert text.sign_name(ZodiacSign.ARIES, "ne") != "Aries"


# ---- Plain-text report -------------------------------------------------------

def test_plain_text_report(result):
    report = result.to_plain_text()
    lines = report.splitlines()
    assert lines[0] == "=" * WIDTH
    assert "VARSHAPHALA" in lines[1]
    assert str(result.year) in report
    assert result.year_lord.planet.display_name in report
    assert result.overall_prediction.split()[0] in report
    for period in result.mudda_dasha:
        assert period.start.isoformat() in report


def test_nepali_report(orchestrator, natal_chart, as_of):
    nepali = orchestrator.compute(natal_chart, 2025, "ne", as_of=as_of)
    report = nepali.to_plain_text()
    assert "वर्षफल" in report
