"""Statistics Finland municipality codes for the cities we list."""

from __future__ import annotations

MUNICIPALITY_CODES: dict[str, str] = {
    "Helsinki": "091",
    "Espoo": "049",
    "Tampere": "837",
    "Vantaa": "092",
    "Oulu": "564",
    "Turku": "853",
    "Jyväskylä": "179",
    "Lahti": "398",
    "Kuopio": "297",
    "Pori": "609",
    "Kouvola": "286",
    "Joensuu": "167",
    "Vaasa": "905",
    "Lappeenranta": "405",
    "Hämeenlinna": "109",
    "Rovaniemi": "698",
    "Seinäjoki": "743",
    "Mikkeli": "491",
    "Kotka": "285",
    "Salo": "734",
}


def municipality_code_for(city: str | None) -> str | None:
    if not city:
        return None
    needle = city.strip().casefold()
    for name, code in MUNICIPALITY_CODES.items():
        if name.casefold() == needle:
            return code
    return None
