"""Absurdist comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="absurdist", name="Absurdist", label="Absurdist", emoji="🌀"),
        instructions=(
            "Use ABSURDIST comedy:\n"
            "- Introduce surreal, impossible scenarios that defy logic and physics\n"
            "- Include talking animals, sentient objects, or things that shouldn't exist\n"
            "- Make the bizarre feel matter-of-fact (quantum mechanics in daily life, time paradoxes)\n"
            "- Layer absurdity upon absurdity - don't settle for one weird thing\n"
            "- Examples of absurdist elements: parallel dimensions, objects with personalities, "
            "animals doing human jobs, impossible weather\n"
            "- Avoid clichés: Don't just say \"aliens did it\" - be creative and specific"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Absurdist/Surreal Photography\n"
                "Create a photorealistic image with SURREAL, REALITY-BENDING elements. The subject's "
                "face/body must be photorealistic and 100% recognizable, but the scenario should defy "
                "logic and physics.\n\n"
                "ABSURDIST VISUAL ELEMENTS:\n"
                "- Impossible physics: floating objects, reversed gravity, size distortions\n"
                "- Surreal juxtapositions: everyday objects in impossible contexts\n"
                "- Reality-bending: mirrors showing different realities, impossible perspectives\n"
                "- Talking/sentient objects or animals (shown through visual cues, NOT text)\n"
                "- Dreamlike atmosphere while maintaining photo quality\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Slightly Dutch angle or unusual perspective to enhance surreality\n"
                "- Subject photographed realistically but integrated into impossible scenario\n\n"
                "LIGHTING:\n"
                "- Realistic lighting on subject, but may include impossible light sources or shadows"
            ),
            without_headshot=(
                "VISUAL STYLE: Absurdist/Surreal Photography\n"
                "Create photorealistic environmental evidence with SURREAL, REALITY-BENDING elements. "
                "No main subject - focus on the aftermath or scenario proving this absurd excuse happened.\n\n"
                "ABSURDIST VISUAL ELEMENTS:\n"
                "- Impossible physics: floating objects, reversed gravity, size distortions\n"
                "- Surreal juxtapositions: everyday objects in impossible contexts\n"
                "- Environmental clues that defy logic\n"
                "- Dreamlike atmosphere while maintaining photo quality\n\n"
                "COMPOSITION:\n"
                "- Documentary style capturing impossible scenarios\n"
                "- Unusual angles that enhance surreality"
            ),
        ),
    )
)
