from yrboard.errors import UnknownCity

CITIES = {
    "oslo": {"name": "Oslo", "address": "Grev Wedels plass 9", "lat": 59.9139, "lon": 10.7522},
    "bergen": {"name": "Bergen", "address": "Bryggen", "lat": 60.3913, "lon": 5.3221},
    "trondheim": {"name": "Trondheim", "address": "Nidarosdomen", "lat": 63.4305, "lon": 10.3951},
    "stavanger": {"name": "Stavanger", "address": "Gamle Stavanger", "lat": 58.9699, "lon": 5.7331},
    "tromso": {"name": "Tromsø", "address": "Arktisk katedral", "lat": 69.6492, "lon": 18.9553},
    "bodo": {"name": "Bodø", "address": "Saltstraumen", "lat": 67.2804, "lon": 14.4049},
    "kristiansand": {"name": "Kristiansand", "address": "Posebyen", "lat": 58.1467, "lon": 7.9956},
    "alesund": {"name": "Ålesund", "address": "Art Nouveau sentrum", "lat": 62.4722, "lon": 6.1549},
    "fredrikstad": {"name": "Fredrikstad", "address": "Gamlebyen", "lat": 59.2181, "lon": 10.9378},
    "drammen": {"name": "Drammen", "address": "Spiralen", "lat": 59.7440, "lon": 10.2044},
}


def is_known_city(city_key: str | None) -> bool:
    return city_key in CITIES


def get_city(city_key: str) -> dict:
    try:
        return CITIES[city_key]
    except (KeyError, TypeError):
        raise UnknownCity(city_key) from None


def city_label(city_key: str) -> str:
    city = get_city(city_key)
    return f"{city['name']} ({city['address']})"
