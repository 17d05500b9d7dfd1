#General imports
import logging
import sys

from cards import ALL_CARDS, ROOMS, SUSPECTS, WEAPONS
from clue_game import ClueGame
from clue_errors import ClueError
from sat_oracle import DEFAULT_SOLVER

USAGE = "Usage: python clue_cli.py [-v] [--solver=NAME] <player> <player> ..."

#Reads in card + error handling
def safe_card(ask, prompt, cards=ALL_CARDS):
    while True:
        card = ask(prompt).strip()
        if card in cards:
            return card
        print("Invalid card. Choose from:", cards)

#Reads in player + error handling, blank allowed when optional
def safe_player(ask, prompt, players, optional=False):
    while True:
        player = ask(prompt).strip()
        if optional and player == "":
            return None
        if player in players:
            return player
        print("Invalid player. Choose from:", players)

#Reads in a list of cards until END
def read_cards(ask, prompt, count=None):
    cards = []
    print(prompt)
    while count is None or len(cards) < count:
        card = ask("> ").strip()
        if card.upper() == "END":
            break
        if card in ALL_CARDS:
            cards.append(card)
        else:
            print("Invalid card.")
    return cards

#Reads in guess info
def read_guess(ask, players):
    suggester = safe_player(ask, "Who made the suggestion: ", players)
    suspect = safe_card(ask, "Enter the suspect: ", SUSPECTS)
    weapon = safe_card(ask, "Enter the weapon: ", WEAPONS)
    room = safe_card(ask, "Enter the room: ", ROOMS)
    refuter = safe_player(ask, "Who refuted (blank if no one): ", players, optional=True)
    #If someone refuted and the card was seen, what was it?
    shown = None
    if refuter is not None:
        shown = ask("What card was shown (blank if unseen): ").strip() or None
    return suggester, suspect, weapon, room, refuter, shown

def print_solution(game):
    solution = game.potential_solution()
    for category, cards in solution.items():
        print(f"{category}: {', '.join(cards) if cards else '(none - facts contradict)'}")
    if all(len(cards) == 1 for cards in solution.values()):
        print("===================")
        print(f"Solved: {solution['suspect'][0]}, {solution['weapon'][0]}, {solution['room'][0]}")
        print("===================")

#Applies one command to the game, returns False when the user quits
def handle_command(game, cmd, ask=input):
    cmd = cmd.strip().lower()
    if cmd == "hand":
        player = safe_player(ask, "Player: ", game.players)
        cards = read_cards(ask, f"Enter {game.cards_per_player} cards:", game.cards_per_player)
        game.hand(player, cards)
    elif cmd == "guess":
        game.suggest(*read_guess(ask, game.players))
    elif cmd == "has":
        #Not usually used, allows a user to manually enter a player has a card
        player = safe_player(ask, "Player: ", game.players)
        game.has_card(player, safe_card(ask, "Card: "))
    elif cmd == "not":
        #Not usually used, allows a user to manually enter a player does not have a card
        player = safe_player(ask, "Player: ", game.players)
        game.lacks_card(player, safe_card(ask, "Card: "))
    elif cmd == "accuse":
        #Record a wrong accusation
        game.failed_accusation(
            safe_card(ask, "Suspect: ", SUSPECTS),
            safe_card(ask, "Weapon: ", WEAPONS),
            safe_card(ask, "Room: ", ROOMS),
        )
    elif cmd == "check":
        possible = game.accusation_possible(
            safe_card(ask, "Suspect: ", SUSPECTS),
            safe_card(ask, "Weapon: ", WEAPONS),
            safe_card(ask, "Room: ", ROOMS),
        )
        print("Possible" if possible else "Ruled out")
    elif cmd == "cards":
        player = safe_player(ask, "Player: ", game.players)
        print(", ".join(game.potential_cards(player)))
    elif cmd == "solve":
        print_solution(game)
    elif cmd in ("quit", "exit"):
        return False
    else:
        print("Unknown command.")
    return True

#Main Loop
def input_loop(game, ask=input):
    while True:
        cmd = ask("Command (Hand / Guess / Has / Not / Accuse / Check / Cards / Solve / Quit): ")
        try:
            if not handle_command(game, cmd, ask):
                break
        except ClueError as e:
            print(f"Error Occured: {e}")

#Splits argv into players and options
def parse_args(argv):
    players = []
    solver_name = DEFAULT_SOLVER
    verbose = False
    for arg in argv:
        if arg == "-v":
            verbose = True
        elif arg.startswith("--solver="):
            solver_name = arg.split("=", 1)[1]
        else:
            players.append(arg)
    return players, solver_name, verbose

#Reads in players and starts the game
def main(argv=None, ask=input):
    players, solver_name, verbose = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if len(players) < 2:
        print(USAGE)
        return 1

    #Cards that do not split evenly are dealt face up
    leftover = (len(ALL_CARDS) - 3) % len(players)
    face_up = []
    if leftover:
        face_up = read_cards(ask, f"Enter the {leftover} face-up cards:", leftover)

    try:
        game = ClueGame(players, face_up=face_up, solver_name=solver_name)
    except ClueError as e:
        print(f"Error Occured: {e}")
        return 1

    input_loop(game, ask)
    return 0

if __name__ == "__main__":
    sys.exit(main())
