"""Deadpan comedic style."""
from comedy_styles.core import ComedyStyle, StyleMeta, VisualTemplates, register_style

register_style(
    ComedyStyle(
        meta=StyleMeta(id="deadpan", name="Deadpan", label="Deadpan", emoji="😐"),
        instructions=(
            "Use DEADPAN comedy:\n"
            "- State completely outrageous things in a serious, matter-of-fact tone\n"
            "- No exclamation marks, no dramatics - just calm delivery of absurd content\n"
            "- Use formal, professional language to describe ridiculous situations\n"
            "- The humour comes from the contrast between tone and content\n"
            "- Examples: \"I was engaged in a minor territorial dispute with a swan\" or "
            "\"A series of cascading failures in my morning routine\"\n"
            "- Avoid clichés: Don't be boring - make the content wild but the delivery flat"
        ),
        visuals=VisualTemplates(
            with_headshot=(
                "VISUAL STYLE: Serious Documentary / Editorial Photography\n"
                "Create a FORMALLY COMPOSED, PROFESSIONALLY SHOT photograph of absurd content. Treat "
                "ridiculous subject matter with absolute seriousness. The subject must be 100% "
                "recognizable, photographed with professional gravitas.\n\n"
                "DEADPAN VISUAL ELEMENTS:\n"
                "- Formal composition: centred framing, professional portrait techniques\n"
                "- Editorial magazine aesthetic\n"
                "- Subject maintaining a neutral, serious expression while the situation is absurd\n\n"
                "COMPOSITION & CAMERA:\n"
                "- Clean, uncluttered professional composition\n"
                "- Subject looking dignified despite absurd context\n\n"
                "LIGHTING:\n"
                "- Professional editorial lighting: soft key light, fill light, clean shadows"
            ),
            without_headshot=(
                "VISUAL STYLE: Serious Documentary / Editorial Photography\n"
                "Create FORMALLY COMPOSED, PROFESSIONALLY SHOT environmental evidence. Treat the absurd "
                "scenario with documentary seriousness.\n\n"
                "DEADPAN VISUAL ELEMENTS:\n"
                "- Formal documentary composition\n"
                "- Serious staging of absurd aftermath\n"
                "- Clean, professional presentation of a ridiculous scenario\n\n"
                "COMPOSITION:\n"
                "- Formal, symmetrical framing\n\n"
                "LIGHTING:\n"
                "- Professional documentary lighting with clean, controlled shadows"
            ),
        ),
    )
)
