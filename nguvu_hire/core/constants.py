# core/constants.py
"""
Country list shared by profiles, job posts and the region search.

Stored values are country names (what users type and what templates show);
codes are accepted anywhere a country is looked up.
"""

COUNTRIES = [
    ("AE", "United Arab Emirates"),
    ("AU", "Australia"),
    ("BE", "Belgium"),
    ("BI", "Burundi"),
    ("BR", "Brazil"),
    ("BW", "Botswana"),
    ("CA", "Canada"),
    ("CD", "Democratic Republic of the Congo"),
    ("CH", "Switzerland"),
    ("CM", "Cameroon"),
    ("CN", "China"),
    ("DE", "Germany"),
    ("DK", "Denmark"),
    ("EG", "Egypt"),
    ("ES", "Spain"),
    ("ET", "Ethiopia"),
    ("FI", "Finland"),
    ("FR", "France"),
    ("GB", "United Kingdom"),
    ("GH", "Ghana"),
    ("IE", "Ireland"),
    ("IN", "India"),
    ("IT", "Italy"),
    ("JP", "Japan"),
    ("KE", "Kenya"),
    ("MA", "Morocco"),
    ("MW", "Malawi"),
    ("MX", "Mexico"),
    ("MZ", "Mozambique"),
    ("NG", "Nigeria"),
    ("NL", "Netherlands"),
    ("NO", "Norway"),
    ("NZ", "New Zealand"),
    ("PH", "Philippines"),
    ("PL", "Poland"),
    ("PT", "Portugal"),
    ("QA", "Qatar"),
    ("RW", "Rwanda"),
    ("SA", "Saudi Arabia"),
    ("SE", "Sweden"),
    ("SG", "Singapore"),
    ("SN", "Senegal"),
    ("SO", "Somalia"),
    ("SS", "South Sudan"),
    ("TZ", "Tanzania"),
    ("UG", "Uganda"),
    ("US", "United States"),
    ("ZA", "South Africa"),
    ("ZM", "Zambia"),
    ("ZW", "Zimbabwe"),
]

COUNTRY_CHOICES = [(name, name) for _, name in COUNTRIES]

_BY_CODE = {code: name for code, name in COUNTRIES}
_BY_NAME = {name.lower(): code for code, name in COUNTRIES}


def country_name(value):
    """Return the display name for a code or name; unknown values pass through trimmed."""
    raw = (value or "").strip()
    if not raw:
        return ""
    if raw.upper() in _BY_CODE:
        return _BY_CODE[raw.upper()]
    code = _BY_NAME.get(raw.lower())
    return _BY_CODE[code] if code else raw


def country_code(value):
    """Return the ISO code for a code or name, or '' when the country is unknown."""
    raw = (value or "").strip()
    if not raw:
        return ""
    if raw.upper() in _BY_CODE:
        return raw.upper()
    return _BY_NAME.get(raw.lower(), "")
