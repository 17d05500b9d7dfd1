import logging

from cards import ALL_CARDS
from clue_errors import BlockingClauseIneffective

logger = logging.getLogger(__name__)


def enumerate_values(oracle, slot):
    """Every card the slot can hold in some solution of the current constraints.

    Each found value is excluded with a clause over the slot's own bits only,
    so other slots stay free while the solver looks for a different value.
    The blocking clauses live in a throwaway session and are gone once this
    returns.
    """
    found = set()
    blocking = []

    with oracle.session() as session:
        while True:
            model = session.solve()
            if model is None:
                break

            card = ALL_CARDS[oracle.evaluate(model, slot.bits)]
            if card in found:
                raise BlockingClauseIneffective(
                    f"{slot.name} came back as {card!r} after {len(blocking)} blocking clauses"
                )
            found.add(card)

            #Forbid this exact bit pattern for this slot
            true_bits = set(slot.bits[i] for name, i in oracle.true_vars(model) if name == slot.name)
            clause = [-bit if bit in true_bits else bit for bit in slot.bits]
            blocking.append(clause)
            session.add_clause(clause)

    logger.debug("%s can hold %d cards (%d solver calls)", slot.name, len(found), len(blocking) + 1)
    return found
