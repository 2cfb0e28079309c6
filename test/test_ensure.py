"""
Ensure helper tests.

Scope
- ensure.bin / ensure.bins: resolution result, fault types, hint overrides.
- ensure.env: single key, several keys, empty values, hint overrides.

Conventions
- Test method names follow CamelCase per project convention.
- Every probe in argwright.environ is patched.
"""
import unittest
from unittest import TestCase, mock

from argwright import ensure, environ
from argwright.faults import *


class TestEnsureBin(TestCase):

    def testBareNameResolvesThroughPath(self):
        with mock.patch.object(environ, "is_in_path", return_value=True), \
                mock.patch.object(environ, "which", return_value="/usr/bin/jq"):
            self.assertEqual(ensure.bin("jq"), "/usr/bin/jq")

    def testPathIsReturnedAsIs(self):
        with mock.patch.object(environ, "exists", return_value=True), \
                mock.patch.object(environ, "is_executable", return_value=True):
            self.assertEqual(ensure.bin("/opt/bin/jq"), "/opt/bin/jq")

    def testFaultPropagates(self):
        with mock.patch.object(environ, "is_in_path", return_value=False):
            with self.assertRaises(BinaryNotInPathError) as context:
                ensure.bin("jq", label="jq binary")
        self.assertEqual(context.exception.label, "jq binary")
        self.assertNotIn("hint", context.exception.options)

    def testHintOverride(self):
        with mock.patch.object(environ, "exists", return_value=False):
            with self.assertRaises(BinaryNotFoundError) as context:
                ensure.bin("/opt/bin/jq", hint="install jq into /opt/bin")
        self.assertEqual(context.exception.options["hint"], "install jq into /opt/bin")

    def testBins(self):
        locations = {"cp": "/bin/cp", "mv": "/bin/mv"}
        with mock.patch.object(environ, "is_in_path", return_value=True), \
                mock.patch.object(environ, "which", side_effect=locations.get):
            self.assertEqual(ensure.bins(["cp", "mv"]), locations)

    def testBinsStopsAtFirstMissing(self):
        with mock.patch.object(environ, "is_in_path", side_effect=lambda name: name == "cp"), \
                mock.patch.object(environ, "which", return_value=None):
            with self.assertRaises(BinaryNotInPathError) as context:
                ensure.bins(["cp", "nosuch", "other"])
        self.assertEqual(context.exception.value, "nosuch")


class TestEnsureEnv(TestCase):

    def testSingleKey(self):
        with mock.patch.object(environ, "getenv", return_value="/home/user"):
            self.assertEqual(ensure.env("HOME"), "/home/user")

    def testSeveralKeys(self):
        values = {"HOME": "/home/user", "SHELL": "/bin/sh"}
        with mock.patch.object(environ, "getenv", side_effect=values.get):
            self.assertEqual(ensure.env(["HOME", "SHELL"]), values)

    def testMissing(self):
        with mock.patch.object(environ, "getenv", return_value=None):
            with self.assertRaises(MissingEnvironmentError) as context:
                ensure.env("TOKEN")
        self.assertEqual(context.exception.message, "required environment variable is not set: TOKEN")

    def testEmptyCountsAsMissing(self):
        with mock.patch.object(environ, "getenv", return_value=""):
            with self.assertRaises(MissingEnvironmentError):
                ensure.env("TOKEN")
            self.assertEqual(ensure.env("TOKEN", allow_empty=True), "")

    def testHintOverride(self):
        with mock.patch.object(environ, "getenv", return_value=None):
            with self.assertRaises(MissingEnvironmentError) as context:
                ensure.env("TOKEN", hint="export TOKEN=...")
        self.assertEqual(context.exception.options["hint"], "export TOKEN=...")

    def testInvalidKey(self):
        with self.assertRaises(InvalidArgumentError):
            ensure.env([""])


if __name__ == "__main__":
    unittest.main()
