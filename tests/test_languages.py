from voxlist.languages import available_languages, resolve_language_pack


def test_resolve_language_pack_alias() -> None:
    assert resolve_language_pack("en-US").code == "en"
    assert resolve_language_pack("he-IL").code == "he"
    assert resolve_language_pack("iw").code == "he"
    assert resolve_language_pack("EN_gb").code == "en"


def test_region_variant_falls_back_to_base_language() -> None:
    assert resolve_language_pack("he-XX").code == "he"


def test_unknown_language_falls_back_to_english() -> None:
    pack = resolve_language_pack("fr")

    assert pack.code == "en"


def test_available_languages() -> None:
    assert available_languages() == ["ar", "en", "he", "ru"]


def test_strip_article_keeps_short_words() -> None:
    pack = resolve_language_pack("he")

    assert pack.strip_article("הזית") == "זית"
    assert pack.strip_article("הר") == "הר"
    assert resolve_language_pack("en").strip_article("hello") == "hello"


def test_russian_and_arabic_aliases() -> None:
    assert resolve_language_pack("ru-RU").code == "ru"
    assert resolve_language_pack("ar-SA").code == "ar"
    assert resolve_language_pack("ar-EG").code == "ar"
