"""Nameless (de Bruijn) representation of lambda terms.

A bound variable is stored as the number of binders between its point of use and the binder that introduces it:

```
λx.x        =>  Abstraction("x", Identifier(0))
λx.λy.x     =>  Abstraction("x", Abstraction("y", Identifier(1)))
λx.x λy.x   =>  Abstraction("x", Application(Identifier(0), Abstraction("y", Identifier(1))))
```

Binder names are kept for display only and take no part in equality, so two terms that differ only by the names of
their binders compare (and hash) equal. Terms are immutable: every rewrite builds a new tree.
"""

from dataclasses import dataclass, field


class Term:
    """Superclass for the three term variants: Abstraction, Application and Identifier."""

    def __str__(self):
        return render(self)


@dataclass(frozen=True)
class Abstraction(Term):
    """λ<param>.<body>. The bound variable is Identifier(0) at the top of body."""
    param: str = field(compare=False)
    body: Term


@dataclass(frozen=True)
class Application(Term):
    """<lhs> <rhs>, lhs applied to rhs."""
    lhs: Term
    rhs: Term


@dataclass(frozen=True)
class Identifier(Term):
    """Bound variable, counted outwards from the point of use to its binder."""
    index: int

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"de Bruijn index must be non-negative, got {self.index}")


@dataclass(frozen=True)
class Definition:
    """<name> = <body>. Binds name in the session namespace once body is reduced."""
    name: str
    body: Term

    def __str__(self):
        return f"{self.name} = {render(self.body)}"


def free_indices(term, depth=0):
    """Yields the index of every Identifier in term that is not bound inside term, relative to term's root."""
    if isinstance(term, Identifier):
        if term.index >= depth:
            yield term.index - depth
    elif isinstance(term, Abstraction):
        yield from free_indices(term.body, depth + 1)
    else:
        yield from free_indices(term.lhs, depth)
        yield from free_indices(term.rhs, depth)


def is_closed(term):
    """Whether or not term has no free variables."""
    return next(free_indices(term), None) is None


def render(term, names=()):
    """Returns the textual form of term. names holds the display names of the binders enclosing term, innermost first.

    Output re-parses to an equal term: abstractions carry their own parentheses (dropped only for the body of another
    abstraction, so λx.λy.x renders as '(\\x. \\y. x)'), and an application in argument position is parenthesized.
    """
    if isinstance(term, Abstraction):
        return f"({_render_abstraction(term, tuple(names))})"

    elif isinstance(term, Application):
        lhs = render(term.lhs, names)
        rhs = render(term.rhs, names)
        if isinstance(term.rhs, Application):
            rhs = f"({rhs})"
        return f"{lhs} {rhs}"

    elif 0 <= term.index < len(names):
        return names[term.index]

    return f"#{term.index - len(names)}"  # free variable, counted from the root: out of contract for closed programs


def _render_abstraction(abstraction, names):
    param = _display_name(abstraction, names)
    scope = (param,) + names

    body = abstraction.body
    if isinstance(body, Abstraction):
        return f"\\{param}. {_render_abstraction(body, scope)}"
    return f"\\{param}. {render(body, scope)}"


def _display_name(abstraction, names):
    """Returns abstraction.param, renamed if it would capture a reference to an outer binder of the same name."""
    # index 0 in the body is this binder, index i > 0 is names[i - 1]
    referenced = {names[idx - 1] for idx in free_indices(abstraction.body) if 0 < idx <= len(names)}

    param = abstraction.param
    while param in referenced:
        param += param[-1]
    return param
