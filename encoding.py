import dataclasses
import math

from cards import ALL_CARDS, card_index

#Enough bits to hold the index of any card
BIT_WIDTH = math.ceil(math.log2(len(ALL_CARDS)))


#A card location: one card index written in BIT_WIDTH boolean variables
@dataclasses.dataclass(frozen=True)
class Slot:
    name: str
    bits: tuple


#Literals that hold exactly when the bits spell out value
def value_literals(bits, value):
    return [bit if (value >> i) & 1 else -bit for i, bit in enumerate(bits)]


#Clause forbidding the bits from spelling out value
def block_value(bits, value):
    return [-lit for lit in value_literals(bits, value)]


#Allocates fresh bits and bounds them below the card count
def create_slot(oracle, name):
    bits = tuple(oracle.new_var((name, i)) for i in range(BIT_WIDTH))
    for value in range(len(ALL_CARDS), 1 << BIT_WIDTH):
        oracle.require_clause(block_value(bits, value))
    return Slot(name, bits)


#Literal for "slot holds card", shared by every constraint that mentions the pair
def equals_card(oracle, slot, card):
    return oracle.define_and(("eq", slot.name, card), value_literals(slot.bits, card_index(card)))
