import logging
from contextlib import contextmanager

#Pysat logic
from pysat.formula import CNF, IDPool
from pysat.solvers import NoSuchSolverError, Solver

from clue_errors import OracleUnavailable

logger = logging.getLogger(__name__)

DEFAULT_SOLVER = "glucose3"


class OracleSession:
    """A solver loaded with the permanent clauses plus any temporary ones.

    Clauses added here disappear with the session; the oracle's clause log
    is untouched.
    """

    def __init__(self, solver):
        self.solver = solver

    def add_clause(self, clause):
        self.solver.add_clause(clause)

    #Returns the set of true literals, or None if unsatisfiable
    def solve(self, assumptions=()):
        try:
            sat = self.solver.solve(assumptions=list(assumptions))
        except (RuntimeError, MemoryError) as e:
            raise OracleUnavailable(f"solver failed: {e}") from e
        if not sat:
            return None
        return set(lit for lit in self.solver.get_model() if lit > 0)


class SatOracle:
    def __init__(self, solver_name=DEFAULT_SOLVER):
        self.solver_name = solver_name
        self.cnf = CNF()
        self.vpool = IDPool()
        #Ids of variables that carry a user-visible name (slot bits)
        self.named = set()
        self.gates = {}

    #Generates a unique id for a named variable
    def new_var(self, name):
        if name in self.vpool.obj2id:
            raise ValueError(f"Variable name already exists: {name!r}")
        var = self.vpool.id(name)
        self.named.add(var)
        return var

    #Aux literal that is true exactly when all the literals are true
    def define_and(self, key, literals):
        if key in self.gates:
            return self.gates[key]
        gate = self.vpool.id(key)
        for lit in literals:
            self.cnf.append([-gate, lit])
        self.cnf.append([gate] + [-lit for lit in literals])
        self.gates[key] = gate
        return gate

    def require_clause(self, clause):
        self.cnf.append(list(clause))

    def require(self, clauses):
        for clause in clauses:
            self.require_clause(clause)

    @contextmanager
    def session(self):
        try:
            solver = Solver(name=self.solver_name, bootstrap_with=self.cnf.clauses)
        except (NoSuchSolverError, RuntimeError, MemoryError) as e:
            raise OracleUnavailable(f"could not start solver {self.solver_name!r}: {e}") from e
        logger.debug("Opened %s session over %d clauses", self.solver_name, len(self.cnf.clauses))
        try:
            yield OracleSession(solver)
        finally:
            solver.delete()

    def solve(self, assumptions=()):
        with self.session() as session:
            return session.solve(assumptions)

    #Integer value of a bit-group, bit 0 least significant
    def evaluate(self, model, bits):
        value = 0
        for i, bit in enumerate(bits):
            if bit in model:
                value |= 1 << i
        return value

    #Names of the true named variables, auxiliary ones excluded
    def true_vars(self, model):
        return [self.vpool.obj(var) for var in sorted(model) if var in self.named]
