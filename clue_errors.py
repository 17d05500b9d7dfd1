class ClueError(Exception):
    """Base class for everything the deduction engine raises."""


class InvalidPlayer(ClueError, ValueError):
    pass


class InvalidHandSize(ClueError, ValueError):
    pass


class InvalidRefuter(ClueError, ValueError):
    pass


class InvalidShownCard(ClueError, ValueError):
    pass


class UnknownCard(ClueError, ValueError):
    pass


#Leftover cards after the deal that nobody declared face up
class UnrepresentableFaceUpDeal(ClueError, ValueError):
    pass


class OracleUnavailable(ClueError, RuntimeError):
    pass


#The solver handed back a value that a blocking clause should have excluded
class BlockingClauseIneffective(ClueError, AssertionError):
    pass
