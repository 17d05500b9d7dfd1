import logging

from pysat.card import CardEnc, EncType

import encoding

logger = logging.getLogger(__name__)


class ConstraintStore:
    """Builds clauses over card slots and registers them on the oracle.

    Every registration is permanent; there is no way to take a clause back.
    """

    def __init__(self, oracle):
        self.oracle = oracle
        self.slots = []

    def create_slot(self, name):
        slot = encoding.create_slot(self.oracle, name)
        self.slots.append(slot)
        return slot

    def _equals(self, slot, card):
        return encoding.equals_card(self.oracle, slot, card)

    #At least one literal true, and no two of them together
    def _exactly_one(self, literals):
        self.oracle.require_clause(literals)
        at_most = CardEnc.atmost(lits=literals, bound=1, encoding=EncType.seqcounter, vpool=self.oracle.vpool)
        self.oracle.require(at_most.clauses)

    #The case file holds one card of this kind, and every card of this kind is in exactly one place
    def constrain_category_exists_and_unique(self, cards, case_file, shared_slots):
        self._exactly_one([self._equals(case_file, card) for card in cards])

        places = list(shared_slots) + [case_file]
        for card in cards:
            self._exactly_one([self._equals(slot, card) for slot in places])
        logger.debug("Constrained %d cards over %d places (case file %s)", len(cards), len(places), case_file.name)

    #Some slot holds some card
    def constrain_has_any(self, slots, cards):
        clause = [self._equals(slot, card) for slot in slots for card in cards]
        self.oracle.require_clause(clause)
        logger.debug("Has any of %s in %s", cards, [s.name for s in slots])

    #No slot holds any card
    def constrain_has_none(self, slots, cards):
        for slot in slots:
            for card in cards:
                self.oracle.require_clause([-self._equals(slot, card)])
        logger.debug("Has none of %s in %s", cards, [s.name for s in slots])

    #The (slot, card) pairs are not all true at once
    def constrain_not_all(self, pairs):
        self.oracle.require_clause([-self._equals(slot, card) for slot, card in pairs])
        logger.debug("Not all of %s", [(s.name, c) for s, c in pairs])
