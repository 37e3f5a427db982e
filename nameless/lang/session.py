"""Session control for the interpreter. Owns the namespace of named definitions and feeds lines to the core, either from
a file or from the command line.
"""

from nameless.lang.error import GenericException
from nameless.pure.reducer import run
from nameless.pure.term import Definition


class Session:
    """Governs an interpreter session, with control over scope of named definitions."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";;"

    def __init__(self, error_handler, path, cmd_line, max_steps=None):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path            # used for error messages
        self.cmd_line = cmd_line    # whether or not in command-line mode
        self.max_steps = max_steps  # β-reductions allowed per line, None for no limit

        self.namespace = {}  # dict of name: closed Term, written only after a definition is fully reduced
        self.results = []    # rendered results, in order of evaluation

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            exprs = []
            add_to_prev = False

            try:
                with open(path, "r") as file:
                    for line_num, line in enumerate(file):
                        __, add_to_prev = self.preprocess_line(line, line_num + 1, add_to_prev, exprs)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for expr, line_num in exprs:
                self.add(expr, line_num)
                print(self.results[-1])  # as each line runs

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or command-line. In command-line mode, exprs can be ignored (used to keep
        track of file's exprs), but add_to_prev will indicate whether a line continuation is necessary. Returns
        updated value of line and add_to_prev.
        """
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]  # get rid of comments

        line = line.strip()
        if exprs is not None:
            if add_to_prev and exprs:
                prev, prev_num = exprs.pop()
                line = f"{prev} {line}".rstrip()
                exprs.append((line, prev_num))
            elif line:
                exprs.append((line, line_num))

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Parses and reduces expr, then records its result. A Definition is bound in the namespace once reduced; if
        anything fails, the namespace is left as it was.
        """
        self.error_handler.register_line(self.path, expr, line_num)  # in case error is raised

        tracer = self.error_handler if self.error_handler.trace else None
        result = run(self.namespace, expr, self.max_steps, tracer)
        rendered = str(result)  # before binding: a failed render leaves the namespace as it was

        if isinstance(result, Definition):
            if result.name in self.namespace:
                start = expr.find(result.name)
                msg = "'{}' overwrites previous definition of '{}'"
                self.error_handler.warn(msg, (expr, result.name), start=start, end=start + len(result.name))
            self.namespace[result.name] = result.body

        self.results.append(rendered)
        self.error_handler.remove_line(self.path)  # error was not raised

        return result

    def pop(self):
        """Returns the most recent result."""
        return self.results.pop()
