"""
Packaging checks: blueprint packages without __init__.py still ship.
"""
import importlib.util
import os
import sys
import unittest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@unittest.skipUnless(sys.version_info >= (3, 11), "tomllib needs Python 3.11")
class TestPackageDiscovery(unittest.TestCase):

    def setUp(self):
        import tomllib
        with open(os.path.join(ROOT, "pyproject.toml"), "rb") as f:
            self.find = tomllib.load(f)["tool"]["setuptools"]["packages"]["find"]

    def test_namespace_discovery_enabled(self):
        self.assertTrue(self.find["namespaces"])

    @unittest.skipUnless(importlib.util.find_spec("setuptools"), "setuptools not installed")
    def test_game_packages_found(self):
        from setuptools import find_namespace_packages
        packages = find_namespace_packages(where=ROOT, include=self.find["include"])
        for name in ("app.routes", "app.utils", "app.projects",
                     "app.projects.tic_tac_toe", "app.projects.tic_tac_toe.core"):
            self.assertIn(name, packages)
