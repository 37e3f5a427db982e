"""Call-by-value evaluation of nameless terms, and the run entry point used by sessions.

Source: http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html
"""

from nameless.lang.error import NonTerminationError
from nameless.pure.grammar import parse
from nameless.pure.substitution import beta_reduce
from nameless.pure.term import Abstraction, Application, Definition, render


def is_value(term):
    """Values are exactly abstractions: there is no reduction under binders."""
    return isinstance(term, Abstraction)


class CallByValueReducer:
    """Implements application-eager reduction: both sides of an application are reduced to values before the
    application itself is contracted. Reduction of a divergent term never returns unless max_steps is set.
    """

    def __init__(self, max_steps=None, error_handler=None):
        self.max_steps = max_steps
        self.error_handler = error_handler  # only used to trace steps
        self.steps = 0

    def reduce(self, term):
        """Returns the value of term (or of a Definition's body, keeping its name)."""
        self.steps = 0
        if isinstance(term, Definition):
            return Definition(term.name, self._reduce(term.body))
        return self._reduce(term)

    def _reduce(self, term):
        while isinstance(term, Application):
            lhs = term.lhs if is_value(term.lhs) else self._reduce(term.lhs)
            rhs = term.rhs if is_value(term.rhs) else self._reduce(term.rhs)

            if not is_value(lhs):
                return Application(lhs, rhs)  # stuck on a free variable

            term = self._contract(lhs, rhs)
        return term

    def _contract(self, abstraction, value):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            msg = "no value reached after {} β-reductions"
            raise NonTerminationError(msg, str(self.max_steps), diagnosis=False)

        result = beta_reduce(value, abstraction.body)
        if self.error_handler is not None:
            self.error_handler.register_step("β", render(result))
        return result


def evaluate(term, max_steps=None, error_handler=None):
    """Reduces a Term or Definition to a value with a fresh CallByValueReducer."""
    return CallByValueReducer(max_steps, error_handler).reduce(term)


def run(namespace, expr, max_steps=None, error_handler=None):
    """Parses and evaluates a single line. Doesn't modify namespace: storing a Definition is up to the caller."""
    return evaluate(parse(namespace, expr), max_steps, error_handler)
