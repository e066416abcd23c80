from statcard.cards.generator import generate_all_cards, generate_card

__all__ = ["generate_all_cards", "generate_card"]
