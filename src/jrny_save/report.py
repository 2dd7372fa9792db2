"""Plain-text overview of a savefile."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .companion import CompanionWithId
from .level import NAMES
from .savefile import Savefile

BANNER = "------======::::: WAYFARER :::::======------"
FOOTER = "------======::::::::::::::::::::======------"
DIVIDER = "---===---===---===---===---===---===---===---"


def _flag_rows(rows: Iterable[Tuple[int, List[bool]]]) -> Iterator[str]:
    for level, flags in rows:
        marks = "".join(f"{'X' if found else 'O':3}" for found in flags)
        yield f"{NAMES[level]:<16} {marks}"


def _companion_rows(companions: Iterable[CompanionWithId]) -> Iterator[str]:
    for companion in companions:
        yield f"{companion.name:24} {companion.steam_url()}"


def render_report(save: Savefile) -> str:
    sections = [
        [
            f"Journeys Completed: {save.journey_count}",
            f"Total Companions Met: {save.total_companions_met}",
            f"Total Symbols Collected: {save.total_collected_symbols}",
        ],
        [
            f"Current Level: {save.current_level_name()}",
            f"Companions Met: {save.companions_met}",
            f"Scarf Length: {save.scarf_length}",
            f"Symbol Number: {save.symbol.id}",
            f"Robe: {save.robe.color().value}, Tier {save.robe.tier()}",
            f"Last Played: {save.last_played.isoformat(timespec='milliseconds')}",
        ],
        list(_flag_rows(save.glyphs.all())),
        list(_flag_rows(save.murals.all())),
        list(_companion_rows(save.current_companions())),
        list(_companion_rows(save.past_companions())),
    ]
    body = f"\n\n{DIVIDER}\n\n".join("\n".join(lines) for lines in sections)
    return f"{BANNER}\n\n{body}\n\n{FOOTER}"
