"""
Tera Raid Advisor - AI counter suggestions for solo Tera Raid battles.
"""

from .advisor import RaidAdvisor
from .config import AdvisorConfig
from .exceptions import AdvisorError, FormatError, NetworkError, ValidationError
from .matcher import ReferenceTable, load_reference_table, suggest, to_katakana
from .models import RaidQuery, RaidRank, Recommendation, ReferenceEntity, TeraType
from .parser import parse_recommendations
from .screen import Modal, RaidScreen, ScreenPhase

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("tera-raid-advisor")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable
__all__ = [
    "RaidAdvisor",
    "AdvisorConfig",
    "AdvisorError",
    "ValidationError",
    "NetworkError",
    "FormatError",
    "ReferenceTable",
    "load_reference_table",
    "suggest",
    "to_katakana",
    "RaidQuery",
    "RaidRank",
    "Recommendation",
    "ReferenceEntity",
    "TeraType",
    "parse_recommendations",
    "RaidScreen",
    "ScreenPhase",
    "Modal",
]
