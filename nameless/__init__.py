"""Call-by-value lambda calculus interpreter.

For reference:
- "pure": lambda terms, their nameless (de Bruijn) representation, parsing and reduction
- "lang": everything around the core needed to run it (sessions, the shell, error reporting)

Basic program flow:
    1. Lexer: splits a line into tokens (see nameless/pure/lexical.py)
    2. Parser: produces a nameless term or definition, resolving every identifier on the way (see
       nameless/pure/grammar.py): bound variables become de Bruijn indices, named definitions are spliced in
    3. Reduction: call-by-value, via shifting and substitution on indices (see nameless/pure/reducer.py and
       nameless/pure/substitution.py)
    4. Session: binds the names of reduced definitions for later lines (see nameless/lang/session.py)
"""
