"""Hyperbolic comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="hyperbolic", name="Hyperbolic", label="Hyperbolic", emoji="🚀"),
        instructions=(
            "Use HYPERBOLIC comedy:\n"
            "- Blow everything wildly out of proportion\n"
            "- Use extreme exaggerations: \"worst disaster in human history\", \"literally impossible\"\n"
            "- Stack superlatives and extremes: epic, catastrophic, unprecedented\n"
            "- Make small problems into world-ending events\n"
            "- Examples: missed alarm becomes \"apocalyptic chronological failure\", traffic becomes "
            "\"automotive gridlock of biblical proportions\"\n"
            "- Avoid clichés: Don't just add \"super\" or \"really\" - go ridiculously over the top"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Epic Dramatic / Movie Poster Photography\n"
                "Create a DRAMATICALLY COMPOSED, CINEMATICALLY LIT photograph treating mundane failure as "
                "EPIC CATASTROPHE. The subject must be 100% recognizable, shot like an action movie hero "
                "in their moment of defeat.\n\n"
                "HYPERBOLIC VISUAL ELEMENTS:\n"
                "- Exaggerated destruction or chaos, way beyond what actually happened\n"
                "- Smoke, sparks, debris, dramatic atmosphere effects\n"
                "- Movie poster treatment: subject as tragic hero of a mundane disaster\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Low angle hero shots or cinematic wide angles showing epic scope\n\n"
                "LIGHTING:\n"
                "- Dramatic rim lights, atmospheric beams, high contrast"
            ),
            without_headshot=(
                "VISUAL STYLE: Epic Dramatic / Disaster Photography\n"
                "Create CINEMATICALLY COMPOSED environmental evidence of EPIC CATASTROPHE from a mundane "
                "situation. Treat a small fail as a world-ending disaster.\n\n"
                "HYPERBOLIC VISUAL ELEMENTS:\n"
                "- Extreme destruction scale, way beyond reality\n"
                "- Dramatic aftermath: smoke, debris, chaos\n"
                "- Disaster movie aesthetic for a trivial problem\n\n"
                "COMPOSITION:\n"
                "- Epic wide shots showing massive scope\n\n"
                "LIGHTING:\n"
                "- Dramatic disaster lighting, high contrast, moody cinematography"
            ),
        ),
    )
)
