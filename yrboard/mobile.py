from yrboard.cities import is_known_city


def _first(value):
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def parse_mobile_params(params) -> dict | None:
    """
    Read the `mobile=true&city=<key>` deep link.

    Returns None when the city picker should not open, otherwise a dict with
    the preselected city key (None if missing or unknown).
    """
    if params is None:
        return None
    if _first(params.get("mobile")) != "true":
        return None
    city = _first(params.get("city"))
    return {"selected": city if is_known_city(city) else None}
