import unittest

from nameless.pure.grammar import parse
from nameless.pure.term import Abstraction, Application, Definition, Identifier, free_indices, is_closed, render

I = Abstraction("x", Identifier(0))
K = Abstraction("x", Abstraction("y", Identifier(1)))


class TermTestCase(unittest.TestCase):

    def test_equality(self):
        self.assertEqual(Abstraction("x", Identifier(0)), Abstraction("y", Identifier(0)))
        self.assertEqual(hash(Abstraction("x", Identifier(0))), hash(Abstraction("y", Identifier(0))))
        self.assertEqual(Application(I, K), Application(Abstraction("a", Identifier(0)), K))

        should_differ = [
            (Abstraction("x", Identifier(0)), Abstraction("x", Identifier(1))),
            (Application(I, K), Application(K, I)),
            (Identifier(0), Identifier(1)),
            (K, Abstraction("x", Abstraction("y", Identifier(0)))),
        ]
        for left, right in should_differ:
            self.assertNotEqual(left, right, (left, right))

    def test_identifier(self):
        self.assertRaises(ValueError, Identifier, -1)
        self.assertEqual(3, Identifier(3).index)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            I.body = Identifier(1)

    def test_free_indices(self):
        cases = {
            Identifier(2): [2],
            I: [],
            K: [],
            Abstraction("x", Identifier(1)): [0],
            Abstraction("x", Application(Identifier(3), Abstraction("y", Identifier(1)))): [2],
            Application(Identifier(0), Identifier(1)): [0, 1],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, list(free_indices(case)), case)

    def test_is_closed(self):
        should_pass = [I, K, Application(I, K), Abstraction("x", Abstraction("y", Application(Identifier(0), Identifier(1))))]
        for case in should_pass:
            self.assertTrue(is_closed(case), case)

        should_fail = [Identifier(0), Abstraction("x", Identifier(1)), Application(I, Identifier(0))]
        for case in should_fail:
            self.assertFalse(is_closed(case), case)


class RenderTestCase(unittest.TestCase):

    def test_render(self):
        cases = {
            "\\x. x": "(\\x. x)",
            "\\x. \\y. x": "(\\x. \\y. x)",
            "\\x. x x": "(\\x. x x)",
            "\\x. x (x x)": "(\\x. x (x x))",
            "\\x. (x x) x": "(\\x. x x x)",
            "(\\x. x) (\\y. y)": "(\\x. x) (\\y. y)",
            "\\f. \\x. f (f x)": "(\\f. \\x. f (f x))",
            "\\x. (\\y. y) x": "(\\x. (\\y. y) x)",
            "\\x. \\x. x": "(\\x. \\x. x)",
            "λa.λb.b a": "(\\a. \\b. b a)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, render(parse({}, case)), case)
            self.assertEqual(expected, str(parse({}, case)), case)

    def test_render_definition(self):
        self.assertEqual("id = (\\x. x)", str(Definition("id", I)))
        self.assertEqual("k = (\\x. \\y. x)", str(parse({}, "k = \\x. \\y. x")))

    def test_render_with_names(self):
        self.assertEqual("a", render(Identifier(0), ["a", "b"]))
        self.assertEqual("b", render(Identifier(1), ["a", "b"]))
        self.assertEqual("(\\x. x b)", render(Abstraction("x", Application(Identifier(0), Identifier(2))), ["a", "b"]))

    def test_render_free(self):
        self.assertEqual("#0", render(Identifier(0)))
        self.assertEqual("(\\x. #0)", render(Abstraction("x", Identifier(1))))
        self.assertEqual("(\\x. \\y. #2 #0)",
                         render(Abstraction("x", Abstraction("y", Application(Identifier(4), Identifier(2))))))
        self.assertEqual("(\\x. x #0)", render(Abstraction("x", Application(Identifier(0), Identifier(2))), ["a"]))

    def test_render_renames_capturing_binder(self):
        cases = {
            Abstraction("x", Abstraction("x", Identifier(1))): "(\\x. \\xx. x)",
            Abstraction("x", Abstraction("x", Identifier(0))): "(\\x. \\x. x)",
            Abstraction("x", Abstraction("x", Application(Identifier(0), Identifier(1)))): "(\\x. \\xx. xx x)",
            Abstraction("x", Abstraction("xx", Abstraction("x", Application(Identifier(1), Identifier(2))))):
                "(\\x. \\xx. \\xxx. xx x)",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, render(case), expected)
            self.assertEqual(case, parse({}, expected), expected)

    def test_round_trip(self):
        cases = [
            "\\x. x",
            "\\x. \\y. \\z. x z (y z)",
            "(\\x. x x) (\\x. x x)",
            "\\f. (\\x. f (x x)) (\\x. f (x x))",
            "\\p. \\q. p q p",
            "(\\a. a) ((\\b. b) (\\c. c)) (\\d. d)",
            "\\x. \\x. \\y. x y",
        ]
        for case in cases:
            term = parse({}, case)
            self.assertEqual(term, parse({}, render(term)), case)


if __name__ == '__main__':
    unittest.main()
