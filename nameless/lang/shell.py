"""Handles interactive/command-line mode for the interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """Lambda calculus interpreter shell."""
    intro = "Lambda calculus interpreter :: call-by-value\nType '?' or 'help' for more information, 'q' to quit."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    COMMANDS = ["q", "exit", "help", "EOF"]  # only commands when typed alone, otherwise part of a λ-term

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def onecmd(self, line):
        """Routes lines to commands only if they consist of a bare command name, so definitions like 'q = λx.x' are
        still evaluated.
        """
        command, arg, parsed = self.parseline(line)  # parsed has '?' expanded to 'help'
        if command in Shell.COMMANDS and not arg and (command == "EOF" or not self._tmp_line):
            return super().onecmd(parsed)
        elif not parsed:
            return self.emptyline()
        return self.default(line.strip())

    def default(self, line):
        """Executes arbitrary λ-term or definition."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            if self._tmp_line:
                line = f"{self._tmp_line} {line}"
            line, add_to_prev = self.sess.preprocess_line(line, self.line_num, False)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            if line:
                self.sess.add(line, self.line_num)
                print(self.sess.pop())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lambda calculus interpreter!\n\n"
              "Terms are reduced call-by-value: both sides of an application are reduced to \n"
              "abstractions before the application itself. Write λ as '\\'.\n\n"
              "Try it out by typing 'id = \\x. x'. This will bind the term '\\x. x' to the \n"
              "name 'id'. Next, try typing 'id id'. This will apply 'id' to itself, giving \n"
              "'(\\x. x)' as the result. Type 'q' to quit.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_q(self, arg):
        """Exits interpreter."""
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
