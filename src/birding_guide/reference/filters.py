"""Vocabularies for filtering EBD rows."""

# ALL SPECIES REPORTED value for a complete checklist.
COMPLETE_CHECKLIST_FLAG: str = "1"

# LOCALITY TYPE for a public hotspot ("P" is a personal location).
HOTSPOT_LOCALITY_TYPE: str = "H"

# Case-insensitive substrings that mark a hotspot as off-limits.
RESTRICTED_ACCESS_TERMS: tuple[str, ...] = (
    "no access",
    "restricted access",
    "private property",
)

# Common names containing these aren't identified to species
# ("Empidonax sp.", "Greater/Lesser Scaup").
SPUH_MARKER: str = "sp."
SLASH_MARKER: str = "/"
