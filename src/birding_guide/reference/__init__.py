"""Static birding constants.

Reference data that doesn't change between runs: scoring thresholds and the
vocabularies used to filter EBD rows.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from birding_guide.reference.filters import COMPLETE_CHECKLIST_FLAG as COMPLETE_CHECKLIST_FLAG
from birding_guide.reference.filters import HOTSPOT_LOCALITY_TYPE as HOTSPOT_LOCALITY_TYPE
from birding_guide.reference.filters import RESTRICTED_ACCESS_TERMS as RESTRICTED_ACCESS_TERMS
from birding_guide.reference.scoring import MIN_COMPLETE_CHECKLISTS as MIN_COMPLETE_CHECKLISTS
from birding_guide.reference.scoring import RECENT_YEARS as RECENT_YEARS
