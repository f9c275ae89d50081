"""Static catalog of selectable cities and their IANA timezones."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AvailableTimeZone:
    """A city the user can add to their list."""

    identifier: str
    city_name: str
    abbreviation: str


_ENTRIES = [
    # North America - United States
    ("America/New_York", "New York", "EST"),
    ("America/New_York", "Miami", "EST"),
    ("America/New_York", "Boston", "EST"),
    ("America/New_York", "Philadelphia", "EST"),
    ("America/New_York", "Atlanta", "EST"),
    ("America/New_York", "Washington D.C.", "EST"),
    ("America/New_York", "Detroit", "EST"),
    ("America/Chicago", "Chicago", "CST"),
    ("America/Chicago", "Houston", "CST"),
    ("America/Chicago", "Dallas", "CST"),
    ("America/Chicago", "Austin", "CST"),
    ("America/Chicago", "San Antonio", "CST"),
    ("America/Chicago", "New Orleans", "CST"),
    ("America/Chicago", "Minneapolis", "CST"),
    ("America/Chicago", "Nashville", "CST"),
    ("America/Denver", "Denver", "MST"),
    ("America/Denver", "Salt Lake City", "MST"),
    ("America/Denver", "Albuquerque", "MST"),
    ("America/Phoenix", "Phoenix", "MST"),
    ("America/Los_Angeles", "Los Angeles", "PST"),
    ("America/Los_Angeles", "San Francisco", "PST"),
    ("America/Los_Angeles", "San Diego", "PST"),
    ("America/Los_Angeles", "Seattle", "PST"),
    ("America/Los_Angeles", "Portland", "PST"),
    ("America/Los_Angeles", "Las Vegas", "PST"),
    ("America/Anchorage", "Anchorage", "AKST"),
    ("Pacific/Honolulu", "Honolulu", "HST"),

    # North America - Canada
    ("America/Toronto", "Toronto", "EST"),
    ("America/Toronto", "Ottawa", "EST"),
    ("America/Toronto", "Montreal", "EST"),
    ("America/Winnipeg", "Winnipeg", "CST"),
    ("America/Edmonton", "Edmonton", "MST"),
    ("America/Edmonton", "Calgary", "MST"),
    ("America/Vancouver", "Vancouver", "PST"),
    ("America/Halifax", "Halifax", "AST"),
    ("America/St_Johns", "St. John's", "NST"),

    # North America - Mexico
    ("America/Mexico_City", "Mexico City", "CST"),
    ("America/Cancun", "Cancun", "EST"),
    ("America/Tijuana", "Tijuana", "PST"),
    ("America/Monterrey", "Monterrey", "CST"),
    ("America/Mexico_City", "Guadalajara", "CST"),

    # Central America & Caribbean
    ("America/Guatemala", "Guatemala City", "CST"),
    ("America/Panama", "Panama City", "EST"),
    ("America/Costa_Rica", "San José", "CST"),
    ("America/Havana", "Havana", "CST"),
    ("America/Jamaica", "Kingston", "EST"),
    ("America/Puerto_Rico", "San Juan", "AST"),
    ("America/Santo_Domingo", "Santo Domingo", "AST"),

    # South America
    ("America/Sao_Paulo", "São Paulo", "BRT"),
    ("America/Sao_Paulo", "Rio de Janeiro", "BRT"),
    ("America/Sao_Paulo", "Brasília", "BRT"),
    ("America/Argentina/Buenos_Aires", "Buenos Aires", "ART"),
    ("America/Santiago", "Santiago", "CLT"),
    ("America/Lima", "Lima", "PET"),
    ("America/Bogota", "Bogotá", "COT"),
    ("America/Bogota", "Medellín", "COT"),
    ("America/Caracas", "Caracas", "VET"),
    ("America/Guayaquil", "Quito", "ECT"),
    ("America/Guayaquil", "Guayaquil", "ECT"),
    ("America/Montevideo", "Montevideo", "UYT"),
    ("America/Asuncion", "Asunción", "PYT"),
    ("America/La_Paz", "La Paz", "BOT"),

    # Europe - Western
    ("Europe/London", "London", "GMT"),
    ("Europe/London", "Edinburgh", "GMT"),
    ("Europe/London", "Manchester", "GMT"),
    ("Europe/Dublin", "Dublin", "GMT"),
    ("Europe/Lisbon", "Lisbon", "WET"),
    ("Atlantic/Reykjavik", "Reykjavik", "GMT"),

    # Europe - Central
    ("Europe/Paris", "Paris", "CET"),
    ("Europe/Berlin", "Berlin", "CET"),
    ("Europe/Berlin", "Munich", "CET"),
    ("Europe/Berlin", "Frankfurt", "CET"),
    ("Europe/Amsterdam", "Amsterdam", "CET"),
    ("Europe/Brussels", "Brussels", "CET"),
    ("Europe/Zurich", "Zürich", "CET"),
    ("Europe/Zurich", "Geneva", "CET"),
    ("Europe/Vienna", "Vienna", "CET"),
    ("Europe/Rome", "Rome", "CET"),
    ("Europe/Rome", "Milan", "CET"),
    ("Europe/Madrid", "Madrid", "CET"),
    ("Europe/Madrid", "Barcelona", "CET"),
    ("Europe/Stockholm", "Stockholm", "CET"),
    ("Europe/Oslo", "Oslo", "CET"),
    ("Europe/Copenhagen", "Copenhagen", "CET"),
    ("Europe/Warsaw", "Warsaw", "CET"),
    ("Europe/Prague", "Prague", "CET"),
    ("Europe/Budapest", "Budapest", "CET"),

    # Europe - Eastern
    ("Europe/Athens", "Athens", "EET"),
    ("Europe/Helsinki", "Helsinki", "EET"),
    ("Europe/Bucharest", "Bucharest", "EET"),
    ("Europe/Sofia", "Sofia", "EET"),
    ("Europe/Kiev", "Kyiv", "EET"),
    ("Europe/Istanbul", "Istanbul", "TRT"),

    # Russia & CIS
    ("Europe/Moscow", "Moscow", "MSK"),
    ("Europe/Moscow", "St. Petersburg", "MSK"),
    ("Europe/Samara", "Samara", "SAMT"),
    ("Asia/Yekaterinburg", "Yekaterinburg", "YEKT"),
    ("Asia/Novosibirsk", "Novosibirsk", "NOVT"),
    ("Asia/Krasnoyarsk", "Krasnoyarsk", "KRAT"),
    ("Asia/Irkutsk", "Irkutsk", "IRKT"),
    ("Asia/Vladivostok", "Vladivostok", "VLAT"),
    ("Asia/Almaty", "Almaty", "ALMT"),
    ("Asia/Tashkent", "Tashkent", "UZT"),
    ("Asia/Baku", "Baku", "AZT"),
    ("Asia/Tbilisi", "Tbilisi", "GET"),
    ("Asia/Yerevan", "Yerevan", "AMT"),
    ("Europe/Minsk", "Minsk", "MSK"),

    # Middle East
    ("Asia/Dubai", "Dubai", "GST"),
    ("Asia/Dubai", "Abu Dhabi", "GST"),
    ("Asia/Qatar", "Doha", "AST"),
    ("Asia/Riyadh", "Riyadh", "AST"),
    ("Asia/Riyadh", "Jeddah", "AST"),
    ("Asia/Kuwait", "Kuwait City", "AST"),
    ("Asia/Bahrain", "Manama", "AST"),
    ("Asia/Muscat", "Muscat", "GST"),
    ("Asia/Jerusalem", "Jerusalem", "IST"),
    ("Asia/Jerusalem", "Tel Aviv", "IST"),
    ("Asia/Beirut", "Beirut", "EET"),
    ("Asia/Amman", "Amman", "EET"),
    ("Asia/Baghdad", "Baghdad", "AST"),
    ("Asia/Tehran", "Tehran", "IRST"),

    # South Asia
    ("Asia/Kolkata", "Mumbai", "IST"),
    ("Asia/Kolkata", "Delhi", "IST"),
    ("Asia/Kolkata", "Bangalore", "IST"),
    ("Asia/Kolkata", "Chennai", "IST"),
    ("Asia/Kolkata", "Kolkata", "IST"),
    ("Asia/Kolkata", "Hyderabad", "IST"),
    ("Asia/Kolkata", "Pune", "IST"),
    ("Asia/Kolkata", "Ahmedabad", "IST"),
    ("Asia/Karachi", "Karachi", "PKT"),
    ("Asia/Karachi", "Lahore", "PKT"),
    ("Asia/Karachi", "Islamabad", "PKT"),
    ("Asia/Dhaka", "Dhaka", "BST"),
    ("Asia/Colombo", "Colombo", "IST"),
    ("Asia/Kathmandu", "Kathmandu", "NPT"),

    # Southeast Asia
    ("Asia/Singapore", "Singapore", "SGT"),
    ("Asia/Kuala_Lumpur", "Kuala Lumpur", "MYT"),
    ("Asia/Bangkok", "Bangkok", "ICT"),
    ("Asia/Ho_Chi_Minh", "Ho Chi Minh City", "ICT"),
    ("Asia/Ho_Chi_Minh", "Hanoi", "ICT"),
    ("Asia/Jakarta", "Jakarta", "WIB"),
    ("Asia/Makassar", "Bali", "WITA"),
    ("Asia/Manila", "Manila", "PHT"),
    ("Asia/Yangon", "Yangon", "MMT"),
    ("Asia/Phnom_Penh", "Phnom Penh", "ICT"),

    # East Asia
    ("Asia/Tokyo", "Tokyo", "JST"),
    ("Asia/Tokyo", "Osaka", "JST"),
    ("Asia/Tokyo", "Kyoto", "JST"),
    ("Asia/Seoul", "Seoul", "KST"),
    ("Asia/Seoul", "Busan", "KST"),
    ("Asia/Shanghai", "Shanghai", "CST"),
    ("Asia/Shanghai", "Beijing", "CST"),
    ("Asia/Shanghai", "Guangzhou", "CST"),
    ("Asia/Shanghai", "Shenzhen", "CST"),
    ("Asia/Shanghai", "Chengdu", "CST"),
    ("Asia/Hong_Kong", "Hong Kong", "HKT"),
    ("Asia/Macau", "Macau", "CST"),
    ("Asia/Taipei", "Taipei", "CST"),
    ("Asia/Ulaanbaatar", "Ulaanbaatar", "ULAT"),

    # Africa - North
    ("Africa/Cairo", "Cairo", "EET"),
    ("Africa/Cairo", "Alexandria", "EET"),
    ("Africa/Casablanca", "Casablanca", "WET"),
    ("Africa/Casablanca", "Marrakech", "WET"),
    ("Africa/Tunis", "Tunis", "CET"),
    ("Africa/Algiers", "Algiers", "CET"),
    ("Africa/Tripoli", "Tripoli", "EET"),

    # Africa - West
    ("Africa/Lagos", "Lagos", "WAT"),
    ("Africa/Lagos", "Abuja", "WAT"),
    ("Africa/Accra", "Accra", "GMT"),
    ("Africa/Dakar", "Dakar", "GMT"),

    # Africa - East
    ("Africa/Nairobi", "Nairobi", "EAT"),
    ("Africa/Addis_Ababa", "Addis Ababa", "EAT"),
    ("Africa/Dar_es_Salaam", "Dar es Salaam", "EAT"),
    ("Africa/Kampala", "Kampala", "EAT"),
    ("Africa/Kigali", "Kigali", "CAT"),

    # Africa - South
    ("Africa/Johannesburg", "Johannesburg", "SAST"),
    ("Africa/Johannesburg", "Cape Town", "SAST"),
    ("Africa/Johannesburg", "Durban", "SAST"),
    ("Africa/Harare", "Harare", "CAT"),
    ("Indian/Mauritius", "Port Louis", "MUT"),

    # Australia & New Zealand
    ("Australia/Sydney", "Sydney", "AEST"),
    ("Australia/Melbourne", "Melbourne", "AEST"),
    ("Australia/Brisbane", "Brisbane", "AEST"),
    ("Australia/Perth", "Perth", "AWST"),
    ("Australia/Adelaide", "Adelaide", "ACST"),
    ("Australia/Darwin", "Darwin", "ACST"),
    ("Australia/Hobart", "Hobart", "AEST"),
    ("Pacific/Auckland", "Auckland", "NZST"),
    ("Pacific/Auckland", "Wellington", "NZST"),

    # Pacific Islands
    ("Pacific/Fiji", "Suva", "FJT"),
    ("Pacific/Guam", "Guam", "ChST"),
    ("Pacific/Tahiti", "Papeete", "TAHT"),
    ("Pacific/Port_Moresby", "Port Moresby", "PGT"),
    ("Pacific/Noumea", "Nouméa", "NCT"),
    ("Pacific/Apia", "Apia", "WST"),
    ("Pacific/Tongatapu", "Nukuʻalofa", "TOT"),

    # Atlantic
    ("Atlantic/Azores", "Azores", "AZOT"),
    ("Atlantic/Cape_Verde", "Praia", "CVT"),
    ("Atlantic/Bermuda", "Hamilton", "AST"),

    # UTC/Special
    ("UTC", "UTC", "UTC"),
]

CATALOG: tuple[AvailableTimeZone, ...] = tuple(
    AvailableTimeZone(identifier, city, abbreviation)
    for identifier, city, abbreviation in _ENTRIES
)


def search_catalog(text: str) -> list[AvailableTimeZone]:
    """Filter the catalog by city name or abbreviation, case-insensitively."""
    if not text:
        return list(CATALOG)
    needle = text.casefold()
    return [
        tz
        for tz in CATALOG
        if needle in tz.city_name.casefold() or needle in tz.abbreviation.casefold()
    ]


def find_city(city_name: str) -> Optional[AvailableTimeZone]:
    """Look up a catalog entry by exact city name."""
    for tz in CATALOG:
        if tz.city_name == city_name:
            return tz
    return None
