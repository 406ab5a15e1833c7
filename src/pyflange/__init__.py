"""
pyflange - bolted flange joint sizing.

Sizes the bolt circle, gasket and bolting of a flange joint per TEMA
RCB-11.2 and ASME VIII, with an optional ASME PCC-1 bolt stress check and
a search over bolt size and count.
"""

# Engine
from .calculator import (
    CalculationResult,
    DesignInput,
    calculate,
)

# Supplementary design steps
from .pcc1 import Pcc1Result, apply_pcc1_defaults
from .records import RecordList, SavedRecord

# Search
from .search import SearchResult, search
from .shell import apply_auto_shell_thickness

# Reference data
from .tables import ReferenceTables, default_tables

__all__ = [
    # Engine
    "CalculationResult",
    "DesignInput",
    "calculate",
    # Search
    "SearchResult",
    "search",
    # Supplementary design steps
    "Pcc1Result",
    "apply_auto_shell_thickness",
    "apply_pcc1_defaults",
    # Records
    "RecordList",
    "SavedRecord",
    # Reference data
    "ReferenceTables",
    "default_tables",
]
