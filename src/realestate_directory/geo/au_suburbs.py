"""
Australian Suburbs

Suburb, postcode, state and centroid coordinates offered by the
"Suburb or Postcode" pickers and used for surrounding-suburb search.
Order matters: lookups resolve ties by position in this list.
"""

# (suburb, postcode, state, latitude, longitude)
AU_SUBURBS = [
    ("Sydney", "2000", "NSW", -33.8688, 151.2093),
    ("Parramatta", "2150", "NSW", -33.815, 151.0011),
    ("Chatswood", "2067", "NSW", -33.7969, 151.182),
    ("Maroubra", "2035", "NSW", -33.9500, 151.2430),
    ("Bondi Junction", "2022", "NSW", -33.8932, 151.2477),
    ("North Sydney", "2060", "NSW", -33.8390, 151.2070),
    ("Melbourne", "3000", "VIC", -37.8136, 144.9631),
    ("Richmond", "3121", "VIC", -37.8183, 145.0018),
    ("St Kilda", "3182", "VIC", -37.8676, 144.9809),
    ("Carlton", "3053", "VIC", -37.8001, 144.9671),
    ("Fitzroy", "3065", "VIC", -37.7989, 144.9784),
    ("Brisbane City", "4000", "QLD", -27.4698, 153.0251),
    ("Fortitude Valley", "4006", "QLD", -27.457, 153.033),
    ("South Brisbane", "4101", "QLD", -27.4807, 153.0203),
    ("Gold Coast", "4217", "QLD", -28.0167, 153.4000),
    ("Perth", "6000", "WA", -31.9523, 115.8613),
    ("Fremantle", "6160", "WA", -32.0569, 115.7439),
    ("Northbridge", "6003", "WA", -31.9470, 115.8580),
    ("Adelaide", "5000", "SA", -34.9285, 138.6007),
    ("North Adelaide", "5006", "SA", -34.9065, 138.5930),
    ("Hobart", "7000", "TAS", -42.8821, 147.3272),
    ("Launceston", "7250", "TAS", -41.4332, 147.1441),
    ("Canberra", "2600", "ACT", -35.2809, 149.13),
    ("Darwin", "0800", "NT", -12.4634, 130.8456),
    ("Palmerston", "0830", "NT", -12.4860, 130.9833),
]
