"""Prompt assembly for the text and image generation services."""
from __future__ import annotations

import datetime as dt
import random
from typing import List, Optional, Sequence, TypeVar

from pydantic import BaseModel

from comedy_styles import get_comedy_style, list_style_names, render_style_template
from config import settings
from custom_options import NEUTRAL_FOCUS_ID, NarrativeElement, available_elements_by_id, get_focus
from models import GenerationRequest, ImageRequest

T = TypeVar("T")

_RULE = "═══════════════════════════════════════════════════════════"


class ComposedPrompt(BaseModel):
    prompt: str
    resolved_style: str


def pick_random(options: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Uniform choice; pass a seeded ``random.Random`` for reproducible draws."""
    if not options:
        raise ValueError("cannot pick from an empty sequence")
    return (rng or random).choice(list(options))


def resolve_style(request: GenerationRequest, rng: Optional[random.Random] = None) -> str:
    """Explicit style wins; otherwise (surprise-me or no options) draw from all styles."""
    opts = request.custom_options
    if opts is not None and opts.style:
        return opts.style
    return pick_random(list_style_names(), rng)


# ----------------------------
# Excuse prompt
# ----------------------------

def _mundane_block() -> str:
    return (
        f"{_RULE}\n"
        "EXCUSE 1 - THE BELIEVABLE EXCUSE (Mundane & Practical)\n"
        f"{_RULE}\n\n"
        "This is your BORING excuse. Make it:\n"
        "- Completely mundane and realistic\n"
        "- Something that actually could have happened\n"
        "- Short and to the point (2-5 sentences)\n"
        "- An EXCUSE (explain what prevented you), not an apology\n"
        "- Title: Short and boring (3-5 words) like \"Traffic Delay\" or \"Phone Battery Died\"\n\n"
        "Examples of good mundane excuses:\n"
        "• \"My alarm didn't go off\"\n"
        "• \"I got stuck in traffic\"\n"
        "• \"My phone battery died and I didn't see your message\"\n\n"
        "The humour comes from how BORING and ORDINARY this is compared to excuse 2."
    )


def _comedic_block(style_name: str, audience: str) -> str:
    style = get_comedy_style(style_name)
    return (
        f"{_RULE}\n"
        f"EXCUSE 2 - THE RISKY EXCUSE ({style_name} Comedy Style)\n"
        f"{_RULE}\n\n"
        f"{style.instructions}\n\n"
        "REQUIREMENTS:\n"
        "- Length: 3-7 sentences (you have room to develop the comedy)\n"
        "- Make it FUNNY and highly creative within this comedic style\n"
        "- Title: Short and punchy (4-6 words max)\n"
        f"- Appropriate for {audience} but push comedic boundaries\n"
        "- Be SPECIFIC and VIVID - avoid vague generic humour\n"
        "- Find FRESH angles - avoid overused tropes for this style\n\n"
        f"Remember: The two excuses should be POLAR OPPOSITES - one boring and realistic, "
        f"one wildly comedic using {style_name} style."
    )


def _narrative_block(elements: List[NarrativeElement]) -> str:
    lines = "\n".join(f"- {e.prompt_text}" for e in elements)
    return (
        "OPTIONAL SEASONING FOR EXCUSE 2:\n"
        "If they fit naturally, weave some of these ingredients into the risky excuse. "
        "They are inspiration, not a checklist - never force one in at the cost of the joke.\n"
        f"{lines}"
    )


def _focus_block(prompt_text: str) -> str:
    return (
        "CREATIVE ANGLE:\n"
        f"{prompt_text}\n"
        "Treat this as a guiding angle for both excuses rather than a hard rule; "
        "excuse 1 must still stay mundane and believable."
    )


def _output_contract(style_name: str) -> str:
    return (
        "Return your response as a JSON object with this EXACT structure:\n"
        "{\n"
        '  "excuse1": {\n'
        '    "title": "short boring title (3-5 words)",\n'
        '    "text": "the mundane believable excuse (2-5 sentences)"\n'
        "  },\n"
        '  "excuse2": {\n'
        '    "title": "short punchy title (4-6 words)",\n'
        f'    "text": "the {style_name} comedy excuse (3-7 sentences)"\n'
        "  }\n"
        "}\n\n"
        "DO NOT include any text outside the JSON object. DO NOT use markdown code blocks. "
        "Return ONLY the raw JSON."
    )


def compose_excuse_prompt(
    request: GenerationRequest,
    rng: Optional[random.Random] = None,
    today: Optional[dt.date] = None,
) -> ComposedPrompt:
    style_name = resolve_style(request, rng)
    opts = request.custom_options

    sections = [
        "You are an expert excuse generator creating highly varied, genuinely funny excuses for "
        "comedy entertainment. Generate TWO distinct excuses for the following scenario.",
        "LANGUAGE: Use British English spelling throughout (realise, colour, favour, whilst, etc.)",
        f"SCENARIO: {request.scenario}\nAUDIENCE: {request.audience}",
        "Generate TWO excuses - one mundane, one comedic:",
        _mundane_block(),
        _comedic_block(style_name, request.audience),
    ]

    if opts is not None and opts.narrative_element_ids:
        # Re-checked against the calendar so a stale id can never reach the prompt
        available = available_elements_by_id(today or dt.date.today())
        elements = [available[i] for i in opts.narrative_element_ids if i in available]
        if elements:
            sections.append(_narrative_block(elements))

    if opts is not None and opts.focus_id and opts.focus_id != NEUTRAL_FOCUS_ID:
        focus = get_focus(opts.focus_id)
        if focus is not None and focus.prompt_text:
            sections.append(_focus_block(focus.prompt_text))

    sections.append(_output_contract(style_name))

    return ComposedPrompt(prompt="\n\n".join(sections), resolved_style=style_name)


# ----------------------------
# Image prompt
# ----------------------------

HEADSHOT_TEMPLATE = (
    "{visual_style}\n\n"
    "EXCUSE CONTEXT: {excuse_text}\n\n"
    "YOUR TASK: Photograph this person in a scenario visually depicting their excuse. Their face and "
    "body must remain 100% PHOTOREALISTIC and RECOGNIZABLE - treat them as a real person being "
    "photographed, not a cartoon or illustration. Integrate them naturally into the scene with proper "
    "lighting, shadows, and perspective.\n\n"
    "═══ CRITICAL RULES ═══\n\n"
    "PEOPLE RULES:\n"
    "✓ ONLY the uploaded person may appear as a main subject\n"
    "✓ Keep their face 100% recognizable (same person, just in this scenario)\n"
    "✓ Anonymous strangers in functional roles OK if essential (police officer, waiter, distant crowd)\n"
    "✗ NEVER: partners, family, friends, coworkers, anyone with a personal relationship\n"
    "✗ When unsure, show the subject alone\n\n"
    "{text_rules}\n\n"
    "PHOTO QUALITY:\n"
    "- Photorealistic subject integrated naturally into the styled scenario\n"
    "- Subject appears to genuinely inhabit this world\n"
    "- {aspect_ratio} aspect ratio"
)

SCENE_TEMPLATE = (
    "{visual_style}\n\n"
    "EXCUSE CONTEXT: {excuse_text}\n\n"
    "YOUR TASK: Create environmental evidence proving this excuse happened. Focus on the scene, "
    "aftermath, or objects - NOT people (we don't know what they look like). Photorealistic quality "
    "following the visual style.\n\n"
    "═══ CRITICAL RULES ═══\n\n"
    "PEOPLE RULES:\n"
    "✗ NO specific identifiable people (we don't know the excuse-maker)\n"
    "✓ Anonymous generic people OK if essential (distant police officer, crowd, stock-photo-style extras)\n"
    "✗ NEVER: anyone appearing to have a personal relationship\n"
    "✗ When unsure, focus on the environment only\n\n"
    "{text_rules}\n\n"
    "PHOTO QUALITY:\n"
    "- Photorealistic environmental evidence\n"
    "- Scenario details clearly visible\n"
    "- {aspect_ratio} aspect ratio"
)

TEXT_RULES = (
    "TEXT RULES (CRITICAL):\n"
    "✗ NO readable text beyond single words - generated text becomes gibberish\n"
    "✗ NO documents, newspapers, books, or signs with multiple lines\n"
    "✗ NO speech bubbles with sentences\n"
    "✓ Single words only if essential (\"STOP\", \"EXIT\")\n"
    "✓ Focus on VISUAL storytelling, not text"
)


def compose_image_prompt(request: ImageRequest) -> str:
    style = get_comedy_style(request.comedic_style)
    if request.headshot is not None:
        template, visual_style = HEADSHOT_TEMPLATE, style.visuals.with_headshot
    else:
        template, visual_style = SCENE_TEMPLATE, style.visuals.without_headshot
    return render_style_template(
        template,
        {
            "visual_style": visual_style,
            "excuse_text": request.excuse_text,
            "text_rules": TEXT_RULES,
            "aspect_ratio": settings.image_aspect_ratio,
        },
    )
