"""
Argument builder tests.

Scope
- Every chainable operation: flag, value (pair/equals), value_string, value_token,
  value_number, repeatable, repeatable_map, bool_or_value, bool_or_equals, count,
  mutually_exclusive, extra, terminator, operand, operands.
- Commit discipline: a failing build leaves the bound argv untouched.
- Options are never mutated.

Conventions
- Test method names follow CamelCase per project convention.
- build() runs one `with builder(...)` block and returns the tokens appended after "prog".
"""
import copy
import unittest
from unittest import TestCase

from argwright import validate
from argwright.builder import ArgumentBuilder, builder
from argwright.faults import *


def build(options, apply):
    argv = ["prog"]
    with builder(argv, options) as b:
        apply(b)
    return argv[1:]


class TestConstruction(TestCase):

    def testArgvMustBeList(self):
        with self.assertRaises(TypeError):
            builder(("prog",), {})

    def testOptionsMustBeMapping(self):
        with self.assertRaises(TypeMismatchError):
            builder([], ["verbose"])

    def testNoneOptions(self):
        self.assertEqual(build(None, lambda b: b.flag("verbose", "-v")), [])

    def testOptionsViewIsReadOnly(self):
        b = builder([], {"verbose": True})
        with self.assertRaises(TypeError):
            b.options["verbose"] = False

    def testFactoryReturnsBuilder(self):
        self.assertIsInstance(builder([]), ArgumentBuilder)


class TestFlag(TestCase):

    def testTrueEmits(self):
        self.assertEqual(build({"verbose": True}, lambda b: b.flag("verbose", "-v")), ["-v"])

    def testFalseAbsentAndNoneEmitNothing(self):
        for options in ({"verbose": False}, {}, {"verbose": None}):
            self.assertEqual(build(options, lambda b: b.flag("verbose", "-v")), [])

    def testNonBoolRejected(self):
        with self.assertRaises(TypeMismatchError) as context:
            build({"verbose": 1}, lambda b: b.flag("verbose", "-v"))
        self.assertEqual(context.exception.label, "verbose")


class TestValue(TestCase):

    def testPair(self):
        self.assertEqual(build({"mode": "755"}, lambda b: b.value("mode", "-m")), ["-m", "755"])

    def testEquals(self):
        self.assertEqual(
            build({"suffix": ".bak"}, lambda b: b.value("suffix", "--suffix", mode="equals")),
            ["--suffix=.bak"],
        )

    def testNumberIsStringified(self):
        self.assertEqual(build({"level": 3}, lambda b: b.value("level", "-l")), ["-l", "3"])

    def testValidatorReceivesLabel(self):
        seen = []
        build({"mode": "x"}, lambda b: b.value("mode", "-m", label="file mode", validate=lambda v, l: seen.append((v, l))))
        self.assertEqual(seen, [("x", "file mode")])

    def testNonScalarRejected(self):
        with self.assertRaises(TypeMismatchError):
            build({"mode": ["x"]}, lambda b: b.value("mode", "-m"))

    def testUnknownModeRejected(self):
        with self.assertRaises(ValueError):
            build({}, lambda b: b.value("mode", "-m", mode="glued"))

    def testNonCallableValidatorRejected(self):
        with self.assertRaises(TypeError):
            build({}, lambda b: b.value("mode", "-m", validate="non_empty"))

    def testValueString(self):
        with self.assertRaises(InvalidArgumentError):
            build({"mode": ""}, lambda b: b.value_string("mode", "-m"))

    def testValueToken(self):
        self.assertEqual(build({"sort": "NAME"}, lambda b: b.value_token("sort", "--sort")), ["--sort", "NAME"])
        with self.assertRaises(InvalidArgumentError):
            build({"sort": "-NAME"}, lambda b: b.value_token("sort", "--sort"))


class TestValueNumber(TestCase):

    def testFloat(self):
        self.assertEqual(build({"interval": 0.5}, lambda b: b.value_number("interval", "-i")), ["-i", "0.5"])

    def testIntegerDropsFraction(self):
        self.assertEqual(
            build({"indent": 3.0}, lambda b: b.value_number("indent", "--indent", integer=True)),
            ["--indent", "3"],
        )

    def testIntegerRejectsFraction(self):
        with self.assertRaises(InvalidArgumentError):
            build({"indent": 2.5}, lambda b: b.value_number("indent", "--indent", integer=True))

    def testMin(self):
        with self.assertRaises(InvalidArgumentError):
            build({"count": 0}, lambda b: b.value_number("count", "-c", min=1))

    def testNonNegative(self):
        with self.assertRaises(InvalidArgumentError):
            build({"timeout": -1}, lambda b: b.value_number("timeout", "--timeout", non_negative=True))

    def testInfinityIsInvalid(self):
        with self.assertRaises(InvalidArgumentError):
            build({"interval": float("inf")}, lambda b: b.value_number("interval", "-i", min=0))

    def testEquals(self):
        self.assertEqual(
            build({"tries": 2}, lambda b: b.value_number("tries", "--tries", non_negative=True, mode="equals")),
            ["--tries=2"],
        )

    def testBoolRejected(self):
        with self.assertRaises(InvalidArgumentError):
            build({"count": True}, lambda b: b.value_number("count", "-c"))


class TestRepeatable(TestCase):

    def testList(self):
        self.assertEqual(
            build({"type": ["f", "l"]}, lambda b: b.repeatable("type", "-t")),
            ["-t", "f", "-t", "l"],
        )

    def testSingleString(self):
        self.assertEqual(build({"type": "f"}, lambda b: b.repeatable("type", "-t")), ["-t", "f"])

    def testEquals(self):
        self.assertEqual(
            build({"include": ["*.py", "*.txt"]}, lambda b: b.repeatable("include", "--include", mode="equals")),
            ["--include=*.py", "--include=*.txt"],
        )

    def testEmptyListRejected(self):
        with self.assertRaises(InvalidArgumentError):
            build({"type": []}, lambda b: b.repeatable("type", "-t"))

    def testValidatorRunsPerElement(self):
        with self.assertRaises(InvalidArgumentError):
            build({"type": ["f", "-x"]}, lambda b: b.repeatable("type", "-t", validate=validate.not_flag))


class TestRepeatableMap(TestCase):

    def testKeysAreSorted(self):
        self.assertEqual(
            build({"arg": {"z": "1", "a": "2"}}, lambda b: b.repeatable_map("arg", "--arg")),
            ["--arg", "a", "2", "--arg", "z", "1"],
        )

    def testDeterministicAcrossInsertionOrders(self):
        first = build({"arg": {"b": 1, "a": 2, "c": 3}}, lambda b: b.repeatable_map("arg", "--arg"))
        second = build({"arg": {"c": 3, "a": 2, "b": 1}}, lambda b: b.repeatable_map("arg", "--arg"))
        self.assertEqual(first, second)

    def testNonMappingRejected(self):
        with self.assertRaises(TypeMismatchError):
            build({"arg": ["a", "b"]}, lambda b: b.repeatable_map("arg", "--arg"))

    def testNonStringKeyRejected(self):
        with self.assertRaises(TypeMismatchError):
            build({"arg": {1: "x"}}, lambda b: b.repeatable_map("arg", "--arg"))

    def testEmptyKeyRejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            build({"arg": {"": "x"}}, lambda b: b.repeatable_map("arg", "--arg"))
        self.assertEqual(context.exception.label, "arg name")

    def testKeyValidator(self):
        def key_validate(name, label):
            if not name.isidentifier():
                raise InvalidArgumentError(f"{label} name is not an identifier", label=label, value=name)
        with self.assertRaises(InvalidArgumentError):
            build({"arg": {"1x": "v"}}, lambda b: b.repeatable_map("arg", "--arg", key_validate=key_validate))


class TestBoolOrValue(TestCase):

    def testTrue(self):
        self.assertEqual(build({"color": True}, lambda b: b.bool_or_value("color", "-c")), ["-c"])

    def testValue(self):
        self.assertEqual(build({"color": "always"}, lambda b: b.bool_or_value("color", "-c")), ["-c", "always"])

    def testFalseRejected(self):
        with self.assertRaises(InvalidArgumentError):
            build({"color": False}, lambda b: b.bool_or_value("color", "-c"))

    def testEquals(self):
        self.assertEqual(
            build({"debug": "out.txt"}, lambda b: b.bool_or_equals("debug", "--debug")),
            ["--debug=out.txt"],
        )
        self.assertEqual(build({"debug": True}, lambda b: b.bool_or_equals("debug", "--debug")), ["--debug"])


class TestCount(TestCase):

    def testTrue(self):
        self.assertEqual(build({"stats": True}, lambda b: b.count("stats", "-s")), ["-s"])

    def testTrueCount(self):
        self.assertEqual(build({"verbose": True}, lambda b: b.count("verbose", "-v", true_count=2)), ["-v", "-v"])

    def testInteger(self):
        self.assertEqual(build({"stats": 3}, lambda b: b.count("stats", "-s")), ["-s", "-s", "-s"])

    def testFalseIsNoop(self):
        self.assertEqual(build({"stats": False}, lambda b: b.count("stats", "-s")), [])

    def testBelowMinRejected(self):
        with self.assertRaises(InvalidArgumentError):
            build({"stats": 0}, lambda b: b.count("stats", "-s"))


class TestMutuallyExclusive(TestCase):

    def testConflict(self):
        with self.assertRaises(ConflictingOptionsError) as context:
            build({"force": True, "interactive": True}, lambda b: b.mutually_exclusive(["force", "interactive"]))
        self.assertEqual(context.exception.message, "force and interactive are mutually exclusive")
        self.assertEqual(context.exception.value, ("force", "interactive"))

    def testFalseDoesNotCount(self):
        self.assertEqual(
            build({"force": True, "interactive": False}, lambda b: b.mutually_exclusive(["force", "interactive"])),
            [],
        )

    def testZeroCounts(self):
        with self.assertRaises(ConflictingOptionsError):
            build({"context": 0, "after_context": 1}, lambda b: b.mutually_exclusive(["context", "after_context"]))

    def testThreeKeysLabel(self):
        with self.assertRaises(ConflictingOptionsError) as context:
            build({"extended": True, "perl": True}, lambda b: b.mutually_exclusive(["extended", "fixed", "perl"]))
        self.assertEqual(context.exception.message, "extended/fixed/perl are mutually exclusive")

    def testCustomLabel(self):
        with self.assertRaises(ConflictingOptionsError) as context:
            build({"a": True, "b": True}, lambda b: b.mutually_exclusive(["a", "b"], label="a/b"))
        self.assertEqual(context.exception.label, "a/b")

    def testKeysShape(self):
        with self.assertRaises(TypeError):
            build({}, lambda b: b.mutually_exclusive("force"))
        with self.assertRaises(TypeError):
            build({}, lambda b: b.mutually_exclusive(["force"]))


class TestTokens(TestCase):

    def testExtraVerbatim(self):
        self.assertEqual(build({"extra": ["--foo", "bar"]}, lambda b: b.extra()), ["--foo", "bar"])

    def testExtraCustomKey(self):
        self.assertEqual(build({"extra_expr": ["-print"]}, lambda b: b.extra("extra_expr")), ["-print"])

    def testExtraMustBeList(self):
        with self.assertRaises(TypeMismatchError):
            build({"extra": "--foo"}, lambda b: b.extra())

    def testTerminator(self):
        self.assertEqual(build({}, lambda b: b.terminator()), ["--"])

    def testOperandGuard(self):
        self.assertEqual(build({}, lambda b: b.operand("-x", "pattern")), ["-x"])
        with self.assertRaises(InvalidArgumentError):
            build({}, lambda b: b.operand("-x", "input", guard=True))

    def testLiteral(self):
        self.assertEqual(build({}, lambda b: b.literal("link", "show").literal("--color=auto")), ["link", "show", "--color=auto"])
        with self.assertRaises(InvalidArgumentError):
            build({}, lambda b: b.literal(""))

    def testOption(self):
        self.assertEqual(build({}, lambda b: b.option("-v", "a=1", "var")), ["-v", "a=1"])
        self.assertEqual(build({}, lambda b: b.option("--file", "x", "file", mode="equals")), ["--file=x"])
        with self.assertRaises(InvalidArgumentError):
            build({}, lambda b: b.option("-f", "", "script"))

    def testOperands(self):
        self.assertEqual(build({}, lambda b: b.operands(["a", "b"], "src")), ["a", "b"])
        self.assertEqual(build({}, lambda b: b.operands("a", "src")), ["a"])
        with self.assertRaises(InvalidArgumentError):
            build({}, lambda b: b.operands([], "src"))
        with self.assertRaises(InvalidArgumentError):
            build({}, lambda b: b.operands(["a", "-b"], "input", guard=True))


class TestCommitDiscipline(TestCase):

    def testFailureLeavesArgvUntouched(self):
        argv = ["cp"]
        with self.assertRaises(TypeMismatchError):
            with builder(argv, {"recursive": True, "verbose": "yes"}) as b:
                b.flag("recursive", "-r").flag("verbose", "-v")
        self.assertEqual(argv, ["cp"])

    def testConflictLeavesArgvUntouched(self):
        argv = ["rm"]
        with self.assertRaises(ConflictingOptionsError):
            with builder(argv, {"recursive": True, "force": True, "interactive": True}) as b:
                b.flag("recursive", "-r").mutually_exclusive(["force", "interactive"])
        self.assertEqual(argv, ["rm"])

    def testStagedUntilCommit(self):
        argv = ["cp"]
        b = builder(argv, {"verbose": True}).flag("verbose", "-v")
        self.assertEqual(b.tokens, ("-v",))
        self.assertEqual(argv, ["cp"])
        self.assertIs(b.commit(), argv)
        self.assertEqual(argv, ["cp", "-v"])
        self.assertEqual(b.tokens, ())

    def testDiscard(self):
        argv = ["cp"]
        builder(argv, {"verbose": True}).flag("verbose", "-v").discard().commit()
        self.assertEqual(argv, ["cp"])

    def testOptionsNeverMutated(self):
        options = {"extra": ["--x"], "arg": {"b": "1", "a": "2"}, "type": ["f", "l"], "verbose": True}
        snapshot = copy.deepcopy(options)
        build(options, lambda b: b.flag("verbose", "-v").repeatable("type", "-t").repeatable_map("arg", "--arg").extra())
        self.assertEqual(options, snapshot)

    def testCommitIsLogged(self):
        with self.assertLogs("argwright.builder", level="DEBUG") as logs:
            build({"verbose": True}, lambda b: b.flag("verbose", "-v"))
        self.assertIn("committed 1 token(s) to argv", logs.output[0])


if __name__ == "__main__":
    unittest.main()
