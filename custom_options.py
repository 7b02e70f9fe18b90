"""Narrative elements and excuse-focus options offered by the customise panel.

Limited-time elements are only on offer inside their calendar window. The
window check works on month/day alone and always takes "today" as an
argument, so the same id can be valid in February and rejected in March.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_NARRATIVE_ELEMENTS = 3
NEUTRAL_FOCUS_ID = "let-ai-decide"


class DateWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_month: int = Field(ge=1, le=12)
    start_day: int = Field(ge=1, le=31)
    end_month: int = Field(ge=1, le=12)
    end_day: int = Field(ge=1, le=31)

    def contains(self, today: dt.date) -> bool:
        month, day = today.month, today.day
        if self.start_month == self.end_month:
            return month == self.start_month and self.start_day <= day <= self.end_day
        # Spans two months; year boundaries are not supported
        return (month == self.start_month and day >= self.start_day) or (
            month == self.end_month and day <= self.end_day
        )


class NarrativeElement(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    emoji: str = ""
    prompt_text: str
    window: Optional[DateWindow] = None  # None = always available

    def is_available(self, today: dt.date) -> bool:
        return self.window is None or self.window.contains(today)


class FocusOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    emoji: str = ""
    prompt_text: str  # empty for the neutral option


ALWAYS_AVAILABLE_ELEMENTS: List[NarrativeElement] = [
    NarrativeElement(id="barrister-pigeon", label="Barrister Pigeon", emoji="🐦",
                     prompt_text="a pigeon wearing a barrister's wig"),
    NarrativeElement(id="suspicious-duck", label="Suspicious Duck", emoji="🦆",
                     prompt_text="a suspicious-looking duck"),
    NarrativeElement(id="shifty-dog", label="Dog with Shifty Eyes", emoji="🐕",
                     prompt_text="a dog with shifty, suspicious eyes"),
    NarrativeElement(id="victorian-gentleman", label="Victorian Gentleman", emoji="🎩",
                     prompt_text="a Victorian gentleman in a top hat and monocle"),
    NarrativeElement(id="alien-involvement", label="Alien Involvement", emoji="👽",
                     prompt_text="alien presence or extraterrestrial technology"),
    NarrativeElement(id="freak-weather", label="Freak Weather", emoji="🌧️",
                     prompt_text="impossibly specific freak weather event (sideways hail, localised tornado, etc.)"),
    NarrativeElement(id="robot-malfunction", label="Robot Malfunction", emoji="🤖",
                     prompt_text="a malfunctioning robot or AI system"),
    NarrativeElement(id="time-traveler", label="Time Traveller", emoji="⏰",
                     prompt_text="a confused time traveller from the past or future"),
]

LIMITED_TIME_ELEMENTS: List[NarrativeElement] = [
    NarrativeElement(id="cupid-revenge", label="Cupid's Revenge", emoji="💘",
                     prompt_text="Cupid or Valentine's Day-related romantic mishap",
                     window=DateWindow(start_month=2, start_day=1, end_month=2, end_day=14)),
    NarrativeElement(id="easter-bunny", label="Easter Bunny Incident", emoji="🐰",
                     prompt_text="Easter Bunny causing chaos or mischief",
                     window=DateWindow(start_month=3, start_day=15, end_month=4, end_day=30)),
    NarrativeElement(id="fireworks-disaster", label="Fireworks Disaster", emoji="🎆",
                     prompt_text="explosive fireworks-related incident",
                     window=DateWindow(start_month=7, start_day=1, end_month=7, end_day=14)),
    NarrativeElement(id="halloween-chaos", label="Halloween Chaos", emoji="🎃",
                     prompt_text="spooky Halloween-related supernatural event",
                     window=DateWindow(start_month=10, start_day=1, end_month=10, end_day=31)),
    NarrativeElement(id="santa-fault", label="Santa's Fault", emoji="🎅",
                     prompt_text="Santa Claus or Christmas elves causing problems",
                     window=DateWindow(start_month=12, start_day=1, end_month=12, end_day=25)),
]

FOCUS_OPTIONS: List[FocusOption] = [
    FocusOption(id=NEUTRAL_FOCUS_ID, label="Let AI Decide", emoji="✨", prompt_text=""),
    FocusOption(id="blame-technology", label="Blame Technology", emoji="💻",
                prompt_text="The excuse should primarily blame technology, apps, devices, or digital systems."),
    FocusOption(id="blame-nature", label="Blame Nature", emoji="🌿",
                prompt_text="The excuse should primarily blame natural phenomena, weather, or environmental factors."),
    FocusOption(id="blame-animals", label="Blame Animals", emoji="🐾",
                prompt_text="The excuse should primarily blame animals, pets, or wildlife."),
    FocusOption(id="blame-other-people", label="Blame Other People", emoji="👥",
                prompt_text="The excuse should primarily blame other people, strangers, or human interference."),
    FocusOption(id="blame-yourself", label="Blame Yourself", emoji="🙋",
                prompt_text="The excuse should primarily blame your own mistakes, incompetence, or poor judgement."),
    FocusOption(id="blame-universe", label="Blame The Universe", emoji="🌌",
                prompt_text="The excuse should primarily blame cosmic forces, fate, destiny, or universal conspiracies."),
    FocusOption(id="blame-transport", label="Blame Transport", emoji="🚗",
                prompt_text="The excuse should primarily blame transportation issues, traffic, public transport, or vehicles."),
    FocusOption(id="blame-time", label="Blame Time Itself", emoji="⏳",
                prompt_text="The excuse should primarily blame time paradoxes, temporal anomalies, or the nature of time itself."),
]

FOCUS_BY_ID: Dict[str, FocusOption] = {f.id: f for f in FOCUS_OPTIONS}


def available_elements(today: dt.date) -> List[NarrativeElement]:
    """Always-available elements plus the limited ones whose window covers ``today``."""
    active = [e for e in LIMITED_TIME_ELEMENTS if e.is_available(today)]
    return [*ALWAYS_AVAILABLE_ELEMENTS, *active]


def available_elements_by_id(today: dt.date) -> Dict[str, NarrativeElement]:
    return {e.id: e for e in available_elements(today)}


def get_focus(focus_id: str) -> Optional[FocusOption]:
    return FOCUS_BY_ID.get(focus_id)
