import random

from roastmaster.services.prompts import (
    FALLBACK_ROASTS,
    VISION_FALLBACK,
    fallback_roast,
    sound_fallback,
    sound_prompt,
    text_prompt,
)


def test_text_prompt_quotes_description():
    p = text_prompt("socks with sandals")
    assert '"socks with sandals"' in p
    assert "2 sentences max" in p
    assert "never mean-spirited" in p


def test_text_prompt_keeps_braces_in_description():
    assert '"{weird}"' in text_prompt("{weird}")


def test_sound_prompt_embeds_catalog_and_format():
    p = sound_prompt("Alert.mp3: beep\nRimshot.mp3: drum")
    assert "Alert.mp3: beep\nRimshot.mp3: drum" in p
    assert p.rstrip().endswith("Sound: <sound effect name>")


def test_sound_fallback_embeds_default():
    assert sound_fallback("Rimshot.mp3") == f"{VISION_FALLBACK}\nSound: Rimshot.mp3"


def test_fallback_roast_substitutes_description():
    expected = {t.replace("{description}", "a mullet") for t in FALLBACK_ROASTS}
    for seed in range(20):
        out = fallback_roast("a mullet", random.Random(seed))
        assert out in expected
        assert "{description}" not in out


def test_fallback_roast_is_reproducible_with_seed():
    assert fallback_roast("x", random.Random(7)) == fallback_roast("x", random.Random(7))
