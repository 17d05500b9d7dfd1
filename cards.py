from clue_errors import UnknownCard

#Card Names
SUSPECTS = ["mustard", "plum", "green", "peacock", "scarlet", "white"]
WEAPONS = ["knife", "candlestick", "revolver", "rope", "lead pipe", "wrench"]
ROOMS = ["hall", "lounge", "dining room", "kitchen", "ballroom", "conservatory", "billiard room", "library", "study"]
ALL_CARDS = SUSPECTS + WEAPONS + ROOMS

#Case file categories, in the order solutions are reported
CATEGORIES = {
    "suspect": SUSPECTS,
    "weapon": WEAPONS,
    "room": ROOMS,
}

#Helper to index a card and handle any errors
def card_index(card):
    try:
        return ALL_CARDS.index(card)
    except ValueError:
        return None

def category_of(card):
    for name, cards in CATEGORIES.items():
        if card in cards:
            return name
    return None

#Raises if the card is unknown, or not in the given category
def require_card(card, category=None):
    found = category_of(card)
    if found is None:
        raise UnknownCard(f"unknown card: {card!r}")
    if category is not None and found != category:
        raise UnknownCard(f"{card!r} is a {found}, not a {category}")
    return card

#Orders cards the way they are indexed
def in_catalog_order(cards):
    return sorted(cards, key=card_index)
