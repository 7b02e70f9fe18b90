import datetime as dt
import os
import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

from comedy_styles import get_comedy_style, list_style_names  # noqa: E402
from models import CustomOptions, GenerationRequest, Headshot, ImageRequest  # noqa: E402
from prompts import compose_excuse_prompt, compose_image_prompt, pick_random, resolve_style  # noqa: E402

TODAY = dt.date(2025, 2, 10)


def make_request(**custom) -> GenerationRequest:
    opts = CustomOptions(**custom) if custom else None
    return GenerationRequest(scenario="I forgot my mum's birthday", audience="family", custom_options=opts)


def test_builtin_styles_are_registered():
    assert list_style_names() == [
        "Absurdist",
        "Deadpan",
        "Hyperbolic",
        "Ironic",
        "Meta",
        "Observational",
        "Paranoid",
        "Self-deprecating",
    ]


def test_explicit_style_is_always_used():
    request = make_request(style="Deadpan")
    for seed in range(20):
        composed = compose_excuse_prompt(request, rng=random.Random(seed), today=TODAY)
        assert composed.resolved_style == "Deadpan"


def test_random_draw_reaches_every_style():
    rng = random.Random(1234)
    drawn = {resolve_style(make_request(), rng) for _ in range(400)}
    assert drawn == set(list_style_names())


def test_seeded_draws_are_reproducible():
    first = [resolve_style(make_request(), random.Random(7)) for _ in range(3)]
    assert len(set(first)) == 1


def test_pick_random_rejects_empty():
    try:
        pick_random([])
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError")


def test_prompt_contains_scenario_audience_and_style_block():
    composed = compose_excuse_prompt(make_request(style="Paranoid"), today=TODAY)
    prompt = composed.prompt

    assert "SCENARIO: I forgot my mum's birthday" in prompt
    assert "AUDIENCE: family" in prompt
    assert "British English" in prompt
    assert get_comedy_style("Paranoid").instructions in prompt
    assert "EXCUSE 1" in prompt and "EXCUSE 2" in prompt
    assert '"excuse1"' in prompt and '"excuse2"' in prompt


def test_narrative_elements_appear_as_optional_seasoning():
    composed = compose_excuse_prompt(
        make_request(style="Absurdist", narrative_element_ids=("suspicious-duck", "cupid-revenge")),
        today=TODAY,
    )
    assert "OPTIONAL SEASONING FOR EXCUSE 2" in composed.prompt
    assert "a suspicious-looking duck" in composed.prompt
    assert "Cupid" in composed.prompt


def test_expired_element_never_reaches_the_prompt():
    composed = compose_excuse_prompt(
        make_request(style="Absurdist", narrative_element_ids=("cupid-revenge",)),
        today=dt.date(2025, 8, 1),
    )
    assert "Cupid" not in composed.prompt
    assert "OPTIONAL SEASONING" not in composed.prompt


def test_focus_block_and_neutral_focus():
    focused = compose_excuse_prompt(make_request(style="Meta", focus_id="blame-transport"), today=TODAY)
    neutral = compose_excuse_prompt(make_request(style="Meta", focus_id="let-ai-decide"), today=TODAY)

    assert "CREATIVE ANGLE" in focused.prompt
    assert "transportation issues" in focused.prompt
    assert "CREATIVE ANGLE" not in neutral.prompt


def test_image_prompt_with_headshot_uses_subject_template():
    request = ImageRequest(
        excuse_text="The pigeon {objected} to my parking.",
        comedic_style="Ironic",
        headshot=Headshot(base64="aGk=", mime_type="image/png"),
    )
    prompt = compose_image_prompt(request)

    assert get_comedy_style("Ironic").visuals.with_headshot in prompt
    assert "RECOGNIZABLE" in prompt
    assert "The pigeon {objected} to my parking." in prompt
    assert "16:9 aspect ratio" in prompt


def test_image_prompt_without_headshot_shows_the_scene():
    prompt = compose_image_prompt(ImageRequest(excuse_text="Sideways hail.", comedic_style="Hyperbolic"))

    assert get_comedy_style("Hyperbolic").visuals.without_headshot in prompt
    assert "environmental evidence" in prompt
    assert "TEXT RULES" in prompt
