"""Recursive-descent parser producing nameless terms.

```
<query>       ::= <definition> | <term>
<definition>  ::= <ident> "=" <term>
<term>        ::= "λ" <ident> "." <term>     ; bodies are greedy: λx.x y = λx.(x y) != (λx.x) (y)
                | <application>
<application> ::= <atom> <atom>*             ; associating by left: a b c d = (((a b) c) d)
<atom>        ::= "(" <term> ")"
                | <ident>
```

Identifiers are resolved while parsing. A name bound by an enclosing λ becomes an Identifier holding its distance to
that binder; any other name must be a named definition, whose (closed) term is spliced in as-is.
"""

from nameless.lang.error import ParseError, UnboundIdentifierError
from nameless.pure.lexical import TokenType, tokenize
from nameless.pure.term import Abstraction, Application, Definition, Identifier


class Parser:
    """Parses a single query from tokens. namespace maps names of definitions to their closed terms and is only read."""

    def __init__(self, tokens, namespace=None, expr=""):
        self.tokens = tokens
        self.namespace = namespace if namespace is not None else {}
        self.expr = expr  # used for error messages
        self.index = 0

    @property
    def current(self):
        return self.tokens[self.index]

    def next(self, token_type):
        """Whether or not the current token is of token_type."""
        return self.current.type is token_type

    def skip(self, token_type):
        """Consumes the current token if it is of token_type. Returns whether or not it was consumed."""
        if self.next(token_type):
            self.index += 1
            return True
        return False

    def match(self, token_type):
        """Consumes and returns the current token, raising ParseError if it isn't of token_type."""
        token = self.current
        if token.type is not token_type:
            self.fail(token_type.value if token_type is TokenType.IDENT else f"'{token_type.value}'")
        self.index += 1
        return token

    def fail(self, expected):
        token = self.current
        end = token.pos + (len(token.value) if token.value else 1)
        raise ParseError("'{}' expected {}, found {}", (self.expr, expected, str(token)), start=token.pos, end=end)

    def query(self):
        """Parses the whole token list as a definition or a term."""
        result = None
        if self.next(TokenType.IDENT):
            saved = self.index
            result = self.definition()
            if result is None:
                self.index = saved

        if result is None:
            result = self.term(())

        if not self.next(TokenType.EOF):
            self.fail("end of input")
        return result

    def definition(self):
        """Returns a Definition, or None if the tokens don't start with '<ident> ='."""
        name = self.match(TokenType.IDENT).value
        if not self.skip(TokenType.EQUAL):
            return None
        return Definition(name, self.term(()))

    def term(self, scope):
        """scope holds the names of the enclosing binders, innermost first."""
        if self.skip(TokenType.LAMBDA):
            param = self.match(TokenType.IDENT).value
            self.match(TokenType.DOT)
            return Abstraction(param, self.term((param,) + scope))
        return self.application(scope)

    def application(self, scope):
        lhs = self.atom(scope)
        if lhs is None:
            self.fail("term")

        while True:
            rhs = self.atom(scope)
            if rhs is None:
                return lhs
            lhs = Application(lhs, rhs)

    def atom(self, scope):
        """Returns None if no atom starts here (end of an application), which is distinct from an unbound identifier."""
        if self.skip(TokenType.LPAREN):
            term = self.term(scope)
            self.match(TokenType.RPAREN)
            return term

        elif self.next(TokenType.IDENT):
            token = self.match(TokenType.IDENT)
            return self.resolve(token, scope)

        return None

    def resolve(self, token, scope):
        name = token.value
        if name in scope:
            return Identifier(scope.index(name))
        elif name in self.namespace:
            return self.namespace[name]

        raise UnboundIdentifierError("'{}' contains unbound identifier '{}'", (self.expr, name),
                                     start=token.pos, end=token.pos + len(name))


def parse(namespace, expr):
    """Parses expr into a Term or Definition, resolving free identifiers against namespace."""
    return Parser(tokenize(expr), namespace, expr).query()
