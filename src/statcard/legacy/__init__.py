from statcard.legacy.bridge import generate_card_from_legacy, run_legacy_pipeline
from statcard.legacy.loader import LegacySeason, load_legacy_season

__all__ = ["LegacySeason", "generate_card_from_legacy", "load_legacy_season", "run_legacy_pipeline"]
