"""Checks that the distribution ships the application packages and no tests."""

import tomllib
import unittest
from pathlib import Path

from setuptools import find_namespace_packages

_project_root = Path(__file__).parent.parent.parent.parent


class TestPackageDiscovery(unittest.TestCase):

    def setUp(self):
        with open(_project_root / "pyproject.toml", "rb") as f:
            find = tomllib.load(f)["tool"]["setuptools"]["packages"]["find"]
        self.packages = set(find_namespace_packages(
            where=str(_project_root / find["where"][0]),
            include=find["include"],
            exclude=find["exclude"],
        ))

    def test_application_packages_included(self):
        for name in ('domain.model', 'port', 'adapter.memory', 'services',
                     'view_model', 'utils', 'config'):
            self.assertIn(name, self.packages)

    def test_test_packages_excluded(self):
        self.assertEqual([p for p in self.packages if p.split('.')[-1] == 'tests'], [])


if __name__ == '__main__':
    unittest.main()
