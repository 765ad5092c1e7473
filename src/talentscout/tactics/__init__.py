"""Club tactical identities and how they are generated."""

from .matchup import TacticalMatchup, calculate_tactical_matchup
from .profiles import MatchEventType, ScoutingPhilosophy, TacticalIdentity
from .style import TacticalStyle, derive_tactical_style, generate_tactical_style, identity_weights

__all__ = [
    "MatchEventType",
    "ScoutingPhilosophy",
    "TacticalIdentity",
    "TacticalMatchup",
    "TacticalStyle",
    "calculate_tactical_matchup",
    "derive_tactical_style",
    "generate_tactical_style",
    "identity_weights",
]
