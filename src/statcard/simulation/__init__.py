from statcard.simulation.fallback import direct_outcome, is_card_value_mapped
from statcard.simulation.platoon import apply_platoon_adjustment, has_platoon_advantage

__all__ = ["apply_platoon_adjustment", "direct_outcome", "has_platoon_advantage", "is_card_value_mapped"]
