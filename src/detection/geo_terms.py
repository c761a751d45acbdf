"""Geographic and proper-noun terms stripped before scoring.

Place names in their local spelling look foreign to word-level checks
even inside English sentences. Each entry pairs a term with whether its
plural form is stripped too. Only the first occurrence of each term is
removed; repeats stay in the text and are scored like any other word.
"""

from __future__ import annotations

import re
from typing import Iterable

from detection.document_patterns import normalize_whitespace

_COUNTRIES = (
    "Deutschland",
    "Österreich",
    "Schweiz",
    "Suisse",
    "Svizzera",
    "España",
    "Italia",
    "Nederland",
    "België",
    "Belgique",
    "Danmark",
    "Norge",
    "Sverige",
    "Suomi",
    "Ísland",
    "Polska",
    "Česko",
    "Slovensko",
    "Magyarország",
    "România",
    "Türkiye",
    "Hellas",
    "Brasil",
    "México",
    "Perú",
    "Panamá",
    "Afghanistan",
    "Azerbaijan",
    "Bangladesh",
    "Botswana",
    "Burkina Faso",
    "Côte d'Ivoire",
    "Djibouti",
    "Eswatini",
    "Kazakhstan",
    "Kyrgyzstan",
    "Liechtenstein",
    "Luxembourg",
    "Madagascar",
    "Mozambique",
    "Nicaragua",
    "Paraguay",
    "Tajikistan",
    "Turkmenistan",
    "Uzbekistan",
    "Venezuela",
    "Zimbabwe",
)

_REGIONS = (
    "Bayern",
    "Baden-Württemberg",
    "Nordrhein-Westfalen",
    "Niedersachsen",
    "Sachsen",
    "Hessen",
    "Thüringen",
    "Brandenburg",
    "Tirol",
    "Kärnten",
    "Steiermark",
    "Île-de-France",
    "Bretagne",
    "Normandie",
    "Provence",
    "Auvergne",
    "Occitanie",
    "Catalunya",
    "Cataluña",
    "Andalucía",
    "Galicia",
    "Euskadi",
    "Lombardia",
    "Toscana",
    "Piemonte",
    "Sicilia",
    "Sardegna",
    "Veneto",
    "Vlaanderen",
    "Wallonie",
    "Jylland",
    "Skåne",
    "Małopolska",
    "Mazowsze",
)

_CITIES = (
    "München",
    "Köln",
    "Düsseldorf",
    "Frankfurt",
    "Stuttgart",
    "Nürnberg",
    "Leipzig",
    "Dresden",
    "Hannover",
    "Hamburg",
    "Bremen",
    "Wien",
    "Salzburg",
    "Innsbruck",
    "Zürich",
    "Genève",
    "Lausanne",
    "Luzern",
    "Bruxelles",
    "Brussel",
    "Antwerpen",
    "Liège",
    "Rotterdam",
    "Utrecht",
    "Eindhoven",
    "Den Haag",
    "Marseille",
    "Toulouse",
    "Bordeaux",
    "Strasbourg",
    "Montpellier",
    "Grenoble",
    "Montréal",
    "Québec",
    "Zaragoza",
    "Sevilla",
    "Málaga",
    "Córdoba",
    "Bilbao",
    "València",
    "Lisboa",
    "Coimbra",
    "Milano",
    "Napoli",
    "Torino",
    "Firenze",
    "Venezia",
    "Genova",
    "Bologna",
    "Palermo",
    "København",
    "Aarhus",
    "Göteborg",
    "Malmö",
    "Uppsala",
    "Tromsø",
    "Trondheim",
    "Reykjavík",
    "Warszawa",
    "Kraków",
    "Wrocław",
    "Gdańsk",
    "Poznań",
    "Praha",
    "Brno",
    "Bratislava",
    "București",
    "Cluj-Napoca",
    "Ljubljana",
    "Zagreb",
    "Beograd",
    "Sarajevo",
    "Thessaloniki",
    "Ankara",
    "İzmir",
    "São Paulo",
    "Rio de Janeiro",
    "Belo Horizonte",
    "Brasília",
    "Bogotá",
    "Medellín",
    "Guadalajara",
    "Monterrey",
    "Ciudad de México",
    "Buenos Aires",
    "Asunción",
    "Montevideo",
    "Valparaíso",
    "Tokyo",
    "Osaka",
    "Kyoto",
    "Yokohama",
    "Beijing",
    "Shanghai",
    "Shenzhen",
    "Guangzhou",
    "Hangzhou",
    "Chongqing",
    "Seoul",
    "Busan",
    "Mumbai",
    "Bengaluru",
    "Chennai",
    "Kolkata",
    "Hyderabad",
    "Ahmedabad",
    "Karachi",
    "Lahore",
    "Dhaka",
    "Jakarta",
    "Surabaya",
    "Hanoi",
    "Ho Chi Minh",
    "Kuala Lumpur",
    "Johannesburg",
    "Nairobi",
    "Addis Ababa",
    "Casablanca",
    "Marrakesh",
)

GEO_TERMS: tuple[tuple[str, bool], ...] = tuple(
    (term, True) for term in (*_COUNTRIES, *_REGIONS, *_CITIES)
)


def compile_geo_term_patterns(
    terms: Iterable[tuple[str, bool]] = GEO_TERMS,
) -> tuple[re.Pattern[str], ...]:
    """Compile whole-word, case-insensitive patterns for geo terms.

    Args:
        terms: Ordered ``(term, include_plural)`` pairs.

    Returns:
        One compiled pattern per term, in input order.
    """
    patterns: list[re.Pattern[str]] = []
    for term, include_plural in terms:
        plural_suffix = "s?" if include_plural else ""
        patterns.append(re.compile(rf"\b{re.escape(term)}{plural_suffix}\b", re.IGNORECASE))
    return tuple(patterns)


def remove_geo_terms(text: str, patterns: Iterable[re.Pattern[str]]) -> str:
    """Strip the first occurrence of each geo term from text."""
    cleaned = text
    for pattern in patterns:
        cleaned = pattern.sub("", cleaned, count=1)
    return normalize_whitespace(cleaned)
