import logging

from cards import ALL_CARDS, CATEGORIES, SUSPECTS, in_catalog_order, require_card
from constraints import ConstraintStore
from encoding import equals_card
from enumerate_solutions import enumerate_values
from clue_errors import (
    InvalidHandSize,
    InvalidPlayer,
    InvalidRefuter,
    InvalidShownCard,
    UnrepresentableFaceUpDeal,
)
from sat_oracle import DEFAULT_SOLVER, SatOracle

logger = logging.getLogger(__name__)


class ClueGame:
    """Deductions for one game of Clue.

    Players are named after suspects and listed in turn order. Facts go in
    through hand(), suggest() and friends and are never taken back; the
    possible case files come out of potential_solution().

    When the cards do not split evenly the leftovers lie face up, and the
    caller has to say which ones they are through face_up.
    """

    def __init__(self, players, face_up=(), solver_name=DEFAULT_SOLVER):
        players = list(players)
        face_up = list(face_up)
        if len(players) < 2:
            raise InvalidPlayer("a game needs at least two players")
        for player in players:
            if player not in SUSPECTS:
                raise InvalidPlayer(f"found invalid player: {player!r}")
        if len(set(players)) != len(players):
            raise InvalidPlayer(f"players listed twice: {players}")

        cards_not_in_case_file = len(ALL_CARDS) - 3
        cards_per_player = cards_not_in_case_file // len(players)
        cards_face_up = cards_not_in_case_file - cards_per_player * len(players)

        if len(face_up) != cards_face_up:
            raise UnrepresentableFaceUpDeal(
                f"{len(players)} players leave {cards_face_up} cards face up, got {len(face_up)}"
            )
        for card in face_up:
            require_card(card)
        if len(set(face_up)) != len(face_up):
            raise UnrepresentableFaceUpDeal(f"face-up cards listed twice: {face_up}")

        self.players = players
        self.cards_per_player = cards_per_player
        self.oracle = SatOracle(solver_name)
        self.store = ConstraintStore(self.oracle)

        #Add cards that are left face up
        self.face_up = [self.store.create_slot(f"face_up.{i}") for i in range(cards_face_up)]

        #Add cards for each player
        self.player_slots = {
            player: [self.store.create_slot(f"{player}.card.{i}") for i in range(cards_per_player)]
            for player in players
        }

        self.case_file = {
            category: self.store.create_slot(f"case.{category}")
            for category in CATEGORIES
        }

        shared = [slot for slots in self.player_slots.values() for slot in slots] + self.face_up
        for category, cards in CATEGORIES.items():
            self.store.constrain_category_exists_and_unique(cards, self.case_file[category], shared)

        for card in face_up:
            self.store.constrain_has_any(self.face_up, [card])

        logger.info(
            "New game: %d players, %d cards each, %d face up",
            len(players), cards_per_player, cards_face_up,
        )

    def _index(self, player):
        try:
            return self.players.index(player)
        except ValueError:
            raise InvalidPlayer(f"{player!r} is not playing") from None

    def _slots(self, player):
        self._index(player)
        return self.player_slots[player]

    #The player's hand, each card somewhere among their slots
    def hand(self, player, cards):
        slots = self._slots(player)
        cards = list(cards)
        if len(cards) != self.cards_per_player:
            raise InvalidHandSize(f"hand must be {self.cards_per_player} cards, got {len(cards)}")
        for card in cards:
            require_card(card)
        if len(set(cards)) != len(cards):
            raise InvalidHandSize(f"hand lists a card twice: {cards}")

        for card in cards:
            self.store.constrain_has_any(slots, [card])

    def has_card(self, player, card):
        slots = self._slots(player)
        require_card(card)
        self.store.constrain_has_any(slots, [card])

    def lacks_card(self, player, card):
        slots = self._slots(player)
        require_card(card)
        self.store.constrain_has_none(slots, [card])

    #Players after the suggester up to (not including) the refuter, wrapping around.
    #With no refuter, everyone but the suggester.
    def players_between(self, suggester, refuter=None):
        suggester_index = self._index(suggester)
        refuter_index = self._index(refuter) if refuter is not None else suggester_index
        last_index = refuter_index
        if refuter_index <= suggester_index:
            last_index += len(self.players)
        return [self.players[i % len(self.players)] for i in range(suggester_index + 1, last_index)]

    def suggest(self, suggester, suspect, weapon, room, refuter=None, card_shown=None):
        if refuter is not None and refuter == suggester:
            raise InvalidRefuter(f"refuter is the suggester: {refuter!r}")
        require_card(suspect, "suspect")
        require_card(weapon, "weapon")
        require_card(room, "room")
        suggested = [suspect, weapon, room]
        if card_shown is not None:
            if refuter is None:
                raise InvalidRefuter(f"{card_shown!r} was shown but nobody refuted")
            if card_shown not in suggested:
                raise InvalidShownCard(f"{card_shown!r} was not suggested")

        #Everyone asked before the refuter could not answer
        passed = self.players_between(suggester, refuter)
        for player in passed:
            self.store.constrain_has_none(self.player_slots[player], suggested)

        if card_shown is not None:
            self.store.constrain_has_any(self.player_slots[refuter], [card_shown])
        elif refuter is not None:
            self.store.constrain_has_any(self.player_slots[refuter], suggested)

    #A wrong accusation rules out that exact case file
    def failed_accusation(self, suspect, weapon, room):
        require_card(suspect, "suspect")
        require_card(weapon, "weapon")
        require_card(room, "room")
        self.store.constrain_not_all([
            (self.case_file["suspect"], suspect),
            (self.case_file["weapon"], weapon),
            (self.case_file["room"], room),
        ])

    def potential_solution(self):
        return {
            category: in_catalog_order(enumerate_values(self.oracle, slot))
            for category, slot in self.case_file.items()
        }

    def has_exact_solution(self):
        solution = self.potential_solution()
        return all(len(cards) == 1 for cards in solution.values())

    def check_accusation(self, suspect, weapon, room):
        require_card(suspect, "suspect")
        require_card(weapon, "weapon")
        require_card(room, "room")
        solution = self.potential_solution()
        return (
            suspect in solution["suspect"]
            and weapon in solution["weapon"]
            and room in solution["room"]
        )

    #Whether some solution has exactly this case file, not just each card on its own
    def accusation_possible(self, suspect, weapon, room):
        require_card(suspect, "suspect")
        require_card(weapon, "weapon")
        require_card(room, "room")
        assumptions = [
            equals_card(self.oracle, self.case_file[category], card)
            for category, card in zip(CATEGORIES, (suspect, weapon, room))
        ]
        return self.oracle.solve(assumptions) is not None

    #Every card the player might be holding
    def potential_cards(self, player):
        cards = set()
        for slot in self._slots(player):
            cards |= enumerate_values(self.oracle, slot)
        return in_catalog_order(cards)

    def is_consistent(self):
        return self.oracle.solve() is not None
