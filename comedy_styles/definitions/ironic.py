"""Ironic comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="ironic", name="Ironic", label="Ironic", emoji="🔄"),
        instructions=(
            "Use IRONIC comedy:\n"
            "- Say the opposite of what you mean to highlight contradictions\n"
            "- Point out situations where the opposite of what should happen occurs\n"
            "- Use dramatic irony - when trying to fix something makes it worse\n"
            "- Highlight hypocrisy or contradictory outcomes\n"
            "- Examples: \"I was trying to be MORE responsible which is exactly why I'm late\" or "
            "attempting to avoid a problem creates the problem\n"
            "- Avoid clichés: Find genuine ironic twists, not just sarcasm"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Situational Irony Photography\n"
                "Create a photorealistic image showcasing VISUAL IRONY and CONTRADICTION. The subject must "
                "be 100% recognizable in a situation that's the OPPOSITE of what they intended.\n\n"
                "IRONIC VISUAL ELEMENTS:\n"
                "- Visual contradictions: safety equipment causing mishaps, help making things worse\n"
                "- Attempts to fix something making it worse\n"
                "- Context clues showing good intentions leading to the opposite result\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Frame the ironic elements together with the subject's realization\n\n"
                "LIGHTING:\n"
                "- Even, natural lighting so the contradictions are visible"
            ),
            without_headshot=(
                "VISUAL STYLE: Situational Irony Photography\n"
                "Create environmental evidence showcasing VISUAL IRONY. Show how attempting to solve a "
                "problem created the opposite result.\n\n"
                "IRONIC VISUAL ELEMENTS:\n"
                "- Visual contradictions in the environment\n"
                "- Evidence of well-intentioned actions backfiring\n\n"
                "COMPOSITION:\n"
                "- Frame contradictory elements together\n\n"
                "LIGHTING:\n"
                "- Clear, even documentary lighting"
            ),
        ),
    )
)
