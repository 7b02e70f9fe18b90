"""Observational comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="observational", name="Observational", label="Observational", emoji="🔍"),
        instructions=(
            "Use OBSERVATIONAL comedy:\n"
            "- Point out the ironic, annoying, or contradictory aspects of everyday situations\n"
            "- \"Have you ever noticed...\" style observations about modern life\n"
            "- Highlight the absurdity in normal social conventions or technology\n"
            "- Make it relatable - focus on universal frustrations everyone experiences\n"
            "- Examples: smartphone glitches at crucial moments, autocorrect disasters, "
            "social media timing fails\n"
            "- Avoid clichés: Find fresh angles on common annoyances, not tired old \"traffic sucks\" jokes"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Modern Life Photography / Perfect Timing\n"
                "Create a photorealistic image capturing RELATABLE MODERN FRUSTRATIONS with perfect comic "
                "timing. The subject must be 100% recognizable, caught in a universally relatable fail moment.\n\n"
                "OBSERVATIONAL VISUAL ELEMENTS:\n"
                "- Technology fails: phone glitches, dead batteries, tangled charging cables\n"
                "- Perfect timing captures: mid-spill, mid-trip, moment of realization\n"
                "- Relatable everyday settings: coffee shop, office, home, public transit\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Candid, documentary-style capture of the moment\n"
                "- Natural angles like smartphone photos or security cameras\n"
                "- Subject's expression of recognition/frustration/embarrassment clearly visible\n\n"
                "LIGHTING:\n"
                "- Natural, realistic lighting (indoor fluorescent, daylight, phone screen glow)"
            ),
            without_headshot=(
                "VISUAL STYLE: Modern Life Photography / Environmental Evidence\n"
                "Create photorealistic evidence of RELATABLE MODERN FRUSTRATIONS. Focus on environmental "
                "details everyone will recognize and relate to.\n\n"
                "OBSERVATIONAL VISUAL ELEMENTS:\n"
                "- Technology fail evidence: cracked phone screens, dead batteries\n"
                "- Everyday settings with perfect comic timing details\n"
                "- Small frustrations made visible: spilled coffee, missed deliveries\n\n"
                "COMPOSITION:\n"
                "- Documentary/candid style capturing aftermath\n"
                "- Focus on details everyone has experienced"
            ),
        ),
    )
)
