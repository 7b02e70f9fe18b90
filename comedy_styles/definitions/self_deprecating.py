"""Self-deprecating comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(
            id="self-deprecating",
            name="Self-deprecating",
            label="Self-Deprecating",
            emoji="🤦",
        ),
        instructions=(
            "Use SELF-DEPRECATING comedy:\n"
            "- Make yourself the fool/incompetent one\n"
            "- Highlight your own flaws, mistakes, or poor judgement\n"
            "- Own the failure completely - you're the problem, not circumstances\n"
            "- Be specific about your incompetence (can't read clocks, terrible at technology, etc.)\n"
            "- Examples: \"I have the spatial awareness of a concussed pigeon\" or "
            "\"My organisational skills peaked in kindergarten\"\n"
            "- Avoid clichés: Don't just say \"I'm bad at things\" - be creatively self-critical"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Professional Photo / Amateur Moment\n"
                "Create a PROFESSIONALLY SHOT photograph of the subject looking FOOLISH/INCOMPETENT. High "
                "photo quality contrasting with an embarrassing moment. The subject must be 100% "
                "recognizable, clearly the fool in this scenario.\n\n"
                "SELF-DEPRECATING VISUAL ELEMENTS:\n"
                "- Subject caught making an obvious mistake\n"
                "- Expressions of confusion, mistake realization, sheepishness\n"
                "- Environmental evidence of their incompetence visible\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Subject fully visible in their moment of incompetence\n"
                "- No flattering angles - honest capture of the fail\n\n"
                "LIGHTING:\n"
                "- Clear, natural lighting that makes everything painfully obvious"
            ),
            without_headshot=(
                "VISUAL STYLE: Evidence of Incompetence\n"
                "Create clear environmental evidence of FOOLISH MISTAKES and POOR JUDGEMENT. Professional "
                "photo quality documenting an amateur-hour disaster.\n\n"
                "SELF-DEPRECATING VISUAL ELEMENTS:\n"
                "- Clear evidence of incompetence in the scene\n"
                "- Environmental storytelling of the fail\n\n"
                "COMPOSITION:\n"
                "- Straightforward, honest framing of the mistake\n\n"
                "LIGHTING:\n"
                "- Clear, honest lighting showing everything"
            ),
        ),
    )
)
