# routes/options.py
# Read-only catalogs for the customise panel.

from fastapi import APIRouter

from comedy_styles import SURPRISE_ME, list_style_meta
from config import settings
from custom_options import FOCUS_OPTIONS, MAX_NARRATIVE_ELEMENTS, available_elements
from utils import local_today

router = APIRouter(prefix="/api/options", tags=["options"])


@router.get("")
def get_options():
    # Surprise-me first, as the UI shows it
    styles = [{"id": SURPRISE_ME, "name": None, "label": "Surprise Me", "emoji": "🎲"}]
    styles.extend(meta.model_dump() for meta in list_style_meta())

    today = local_today(settings.calendar_timezone)
    elements = [
        {
            "id": e.id,
            "label": e.label,
            "emoji": e.emoji,
            "limited_time": e.window is not None,
        }
        for e in available_elements(today)
    ]
    focus = [{"id": f.id, "label": f.label, "emoji": f.emoji} for f in FOCUS_OPTIONS]

    return {
        "ok": True,
        "styles": styles,
        "narrative_elements": elements,
        "max_narrative_elements": MAX_NARRATIVE_ELEMENTS,
        "focus_options": focus,
        "date": today.isoformat(),
    }
