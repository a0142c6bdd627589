"""Draw time slots and regional lotteries offered by the terminal."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class DrawCode(str, Enum):
    """Daily draw (sorteo) time slots."""

    LAPREVIA = "LAPREVIA"
    PRIMERA = "PRIMERA"
    MATUTINA = "MATUTINA"
    VESPERTINA = "VESPERTINA"
    NOCTURNA = "NOCTURNA"

    @property
    def abbreviation(self) -> str:
        return _DRAW_ABBREVIATIONS[self]

    @property
    def label(self) -> str:
        return _DRAW_LABELS[self]


class RegionCode(str, Enum):
    """Regional lotteries (loterias) a bet is placed into."""

    NACION = "NACION"
    PROVIN = "PROVIN"
    SANTA = "SANTA"
    CORDOB = "CORDOB"
    URUGUA = "URUGUA"
    ENTRE = "ENTRE"
    MENDOZ = "MENDOZ"
    CORRIE = "CORRIE"
    CHACO = "CHACO"

    @property
    def abbreviation(self) -> str:
        return _REGION_ABBREVIATIONS[self]

    @property
    def label(self) -> str:
        return _REGION_LABELS[self]


_DRAW_ABBREVIATIONS = {
    DrawCode.LAPREVIA: "PRE",
    DrawCode.PRIMERA: "PR",
    DrawCode.MATUTINA: "MA",
    DrawCode.VESPERTINA: "VE",
    DrawCode.NOCTURNA: "NO",
}

_DRAW_LABELS = {
    DrawCode.LAPREVIA: "La Previa (10:15)",
    DrawCode.PRIMERA: "Primera (12:00)",
    DrawCode.MATUTINA: "Matutina (15:00)",
    DrawCode.VESPERTINA: "Vespertina (18:00)",
    DrawCode.NOCTURNA: "Nocturna (21:00)",
}

_REGION_ABBREVIATIONS = {
    RegionCode.NACION: "N",
    RegionCode.PROVIN: "P",
    RegionCode.SANTA: "SF",
    RegionCode.CORDOB: "C",
    RegionCode.URUGUA: "U",
    RegionCode.ENTRE: "E",
    RegionCode.MENDOZ: "M",
    RegionCode.CORRIE: "CR",
    RegionCode.CHACO: "CH",
}

_REGION_LABELS = {
    RegionCode.NACION: "Nacional",
    RegionCode.PROVIN: "Provincia",
    RegionCode.SANTA: "Santa Fe",
    RegionCode.CORDOB: "Córdoba",
    RegionCode.URUGUA: "Uruguay",
    RegionCode.ENTRE: "Entre Ríos",
    RegionCode.MENDOZ: "Mendoza",
    RegionCode.CORRIE: "Corrientes",
    RegionCode.CHACO: "Chaco",
}


def code_value(code: str) -> str:
    """Raw code string of an enum member or plain string."""

    if isinstance(code, Enum):
        return str(code.value)
    return str(code)


def draw_abbreviation(code: str) -> str:
    """Abbreviation printed on the ticket; unknown codes print as-is."""

    raw = code_value(code)
    try:
        return DrawCode(raw).abbreviation
    except ValueError:
        return raw


def region_abbreviation(code: str) -> str:
    raw = code_value(code)
    try:
        return RegionCode(raw).abbreviation
    except ValueError:
        return raw


def distinct_codes(codes: Iterable[str]) -> list[str]:
    """Drop repeated codes, keeping first-seen order."""

    seen: dict[str, None] = {}
    for code in codes:
        seen.setdefault(code_value(code), None)
    return list(seen)


def catalog() -> dict[str, list[dict[str, str]]]:
    """Options for the draw and lottery selection lists."""

    return {
        "sorteos": [
            {"id": d.value, "abbreviation": d.abbreviation, "label": d.label}
            for d in DrawCode
        ],
        "loterias": [
            {"id": r.value, "abbreviation": r.abbreviation, "label": r.label}
            for r in RegionCode
        ],
    }
