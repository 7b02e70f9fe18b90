"""Meta (fourth-wall breaking) comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="meta", name="Meta", label="Meta", emoji="🎭"),
        instructions=(
            "Use META comedy:\n"
            "- Break the 4th wall - acknowledge you're making an excuse\n"
            "- Reference the fact that this is obviously an excuse\n"
            "- Be self-aware about how ridiculous/transparent the excuse is\n"
            "- Comment on the excuse-making process itself\n"
            "- Examples: \"I'm aware this sounds like an excuse, which it absolutely is, but...\" or "
            "\"The beauty of this explanation is that it's technically true while being completely misleading\"\n"
            "- Avoid clichés: Don't just say \"I know this sounds fake\" - play with the meta-ness creatively"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Self-Aware / Fourth Wall Breaking Photography\n"
                "Create a photorealistic image that ACKNOWLEDGES IT'S A STAGED EXCUSE PHOTO. The subject "
                "must be 100% recognizable and CLEARLY AWARE they're making an excuse.\n\n"
                "META VISUAL ELEMENTS:\n"
                "- Subject making direct eye contact with the camera (knowing look)\n"
                "- Obvious staging visible: props clearly arranged, backdrop edges in frame\n"
                "- Behind-the-scenes elements visible: lights, equipment at the edges\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Obvious posing, transparent setup\n\n"
                "LIGHTING:\n"
                "- Studio lighting visible in frame"
            ),
            without_headshot=(
                "VISUAL STYLE: Transparently Staged Evidence\n"
                "Create environmental evidence that OBVIOUSLY LOOKS STAGED. Make it clear this "
                "\"evidence\" was arranged for the excuse.\n\n"
                "META VISUAL ELEMENTS:\n"
                "- Props obviously placed\n"
                "- Behind-the-scenes setup visible\n\n"
                "COMPOSITION:\n"
                "- Arranged elements clearly posed\n\n"
                "LIGHTING:\n"
                "- Obvious studio or staged lighting"
            ),
        ),
    )
)
