"""Paranoid / conspiracy comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="paranoid", name="Paranoid", label="Paranoid", emoji="👁️"),
        instructions=(
            "Use PARANOID/CONSPIRACY comedy:\n"
            "- Connect unrelated events into elaborate conspiracy theories\n"
            "- Everything is suspicious and interconnected\n"
            "- Use phrases like \"it's no coincidence that...\", \"they don't want you to know...\"\n"
            "- Build increasingly complex chains of cause and effect\n"
            "- Examples: neighbours are in on it, corporations tracking you, elaborate schemes by "
            "mundane organisations\n"
            "- Avoid clichés: Don't just say \"Illuminati\" - create specific, silly conspiracies"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Conspiracy / Surveillance Photography\n"
                "Create a photorealistic image with a PARANOID, UNDER-SURVEILLANCE aesthetic. The subject "
                "must be 100% recognizable, photographed like they're being watched as part of an "
                "elaborate conspiracy.\n\n"
                "PARANOID VISUAL ELEMENTS:\n"
                "- Security camera angles, dramatic shadows suggesting being watched\n"
                "- Mysterious figures in the background (blurred/distant)\n"
                "- Red string / conspiracy board aesthetic in the background\n\n"
                "COMPOSITION & CAMERA:\n"
                "- High corner angles, security cam POV\n\n"
                "LIGHTING:\n"
                "- Harsh surveillance lighting, night vision feel OR harsh fluorescent"
            ),
            without_headshot=(
                "VISUAL STYLE: Conspiracy / Surveillance Evidence\n"
                "Create environmental evidence with a PARANOID, UNDER-SURVEILLANCE aesthetic. Document the "
                "conspiracy scene.\n\n"
                "PARANOID VISUAL ELEMENTS:\n"
                "- Security footage style\n"
                "- Conspiracy evidence scattered in the environment\n\n"
                "COMPOSITION:\n"
                "- Surveillance POV framing, unsettling observation angles\n\n"
                "LIGHTING:\n"
                "- Harsh surveillance lighting and ominous shadows"
            ),
        ),
    )
)
