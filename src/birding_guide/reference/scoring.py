"""Notability scoring thresholds."""

# A hotspot needs at least this many complete checklists in a season to be scored.
MIN_COMPLETE_CHECKLISTS: int = 40

# Species must be 1.5x more frequent at the hotspot than across the region.
NOTABLE_SCORE_THRESHOLD: float = 1.5

# Cap so one ultra-rare sighting can't dominate the hotspot ranking.
MAX_SPECIES_SCORE: float = 15.0

# Present in at least 30% of the years the hotspot has data for the season...
MIN_YEARS_PRESENT_RATIO: float = 0.3
# ...and never fewer than 2 separate years (no one-year wonders).
MIN_YEARS_PRESENT_ABSOLUTE: int = 2

# Seen on < 1% of region checklists for the season.
RARITY_REGION_FREQ_THRESHOLD: float = 0.01

# Only checklists from the last N years (relative to the current year) count.
RECENT_YEARS: int = 10

TOP_HOTSPOTS_PER_SEASON: int = 15
TOP_SPECIES_PER_LIST: int = 5

# Hotspot index keeps hotspots with more than this many all-time species.
MIN_INDEX_SPECIES: int = 10
