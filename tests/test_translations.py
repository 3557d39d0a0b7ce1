from translations import TRANSLATIONS, get_text, toggle_language


def test_languages_share_keys():
    assert set(TRANSLATIONS["ro"]) == set(TRANSLATIONS["en"])


def test_get_text_fallbacks():
    assert get_text("en", "title") == "Net Salary Calculator"
    assert get_text("de", "title") == "Calculator Salariu Net"
    assert get_text("en", "missing") == "missing"


def test_language_button_shows_current_language():
    assert get_text("ro", "language") == "RO"
    assert get_text("en", "language") == "EN"


def test_toggle_language():
    assert toggle_language("ro") == "en"
    assert toggle_language("en") == "ro"
