"""Capture-avoiding substitution on nameless terms.

Source: https://en.wikipedia.org/wiki/De_Bruijn_index#Formal_definition

Beta reduction of (λ.M) N is done in three steps:
    1. shift N up by one, since it is moved under the binder of M
    2. substitute the shifted N for every occurrence of that binder's variable in M
    3. shift the result down by one, since the binder is gone

All three operations return new trees and leave their arguments untouched.
"""

from nameless.pure.term import Abstraction, Application, Identifier


def shift(by, term, cutoff=0):
    """Adds by to every Identifier in term whose index is >= cutoff, i.e. every variable that is free relative to the
    point where the shift started. cutoff grows by one under each Abstraction.
    """
    if by == 0:
        return term

    if isinstance(term, Identifier):
        if term.index >= cutoff:
            return Identifier(term.index + by)
        return term

    elif isinstance(term, Abstraction):
        return Abstraction(term.param, shift(by, term.body, cutoff + 1))

    return Application(shift(by, term.lhs, cutoff), shift(by, term.rhs, cutoff))


def substitute(value, term, depth=0):
    """Replaces the variable with index depth (the binder being eliminated, as seen from depth binders deeper) with
    value, shifted over the binders crossed on the way down.
    """
    if isinstance(term, Identifier):
        if term.index == depth:
            return shift(depth, value)
        return term

    elif isinstance(term, Abstraction):
        return Abstraction(term.param, substitute(value, term.body, depth + 1))

    return Application(substitute(value, term.lhs, depth), substitute(value, term.rhs, depth))


def beta_reduce(value, body):
    """Returns body[0 := value], where body is the body of the abstraction value is applied to."""
    return shift(-1, substitute(shift(1, value), body))
