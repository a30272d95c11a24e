"""Setup helpers for setup.py in typedcollections package."""

import fnmatch
import os
from os.path import exists
from shutil import rmtree

import setuptools


def parse_requirements(fname):
    """Turn requirements.txt into a list, skipping comments and pip options."""
    reqs = []
    with open(fname, encoding="utf-8") as stream:
        for line in stream:
            line = line.split("#", 1)[0].strip()
            if line and not line.startswith("-"):
                reqs.append(line)
    return reqs


# ======================================================================================
# Extending setup commands; here "clean"
# ======================================================================================


class CleanUp(setuptools.Command):
    """Custom ``clean`` command removing build output and caches."""

    description = "remove build output, caches and compiled files"
    user_options = [("dry-run-only", None, "only list what would be removed")]

    CLEANFOLDERS = (
        "dist",
        "build",
        "sdist",
        "wheel",
        ".eggs",
        ".pytest_cache",
        ".hypothesis",
    )

    CLEANFOLDERSRECURSIVE = ["__pycache__", "*.egg-info"]
    CLEANFILESRECURSIVE = ["*.pyc", "*.pyo"]

    def initialize_options(self):
        self.dry_run_only = False

    def finalize_options(self):
        pass

    @staticmethod
    def ffind(pattern, path):
        """Find files."""
        result = []
        for root, _, files in os.walk(path):
            for name in files:
                if fnmatch.fnmatch(name, pattern):
                    result.append(os.path.join(root, name))
        return result

    @staticmethod
    def dfind(pattern, path):
        """Find folders."""
        result = []
        for root, dirs, _ in os.walk(path):
            for name in dirs:
                if fnmatch.fnmatch(name, pattern):
                    result.append(os.path.join(root, name))
        return result

    def run(self):
        targets = [dir_ for dir_ in CleanUp.CLEANFOLDERS if exists(dir_)]
        for pattern in CleanUp.CLEANFOLDERSRECURSIVE:
            targets.extend(self.dfind(pattern, "."))
        for target in targets:
            print(f"Remove folder {target}")
            if not self.dry_run_only:
                rmtree(target, ignore_errors=True)

        for pattern in CleanUp.CLEANFILESRECURSIVE:
            for pfil in self.ffind(pattern, "."):
                print(f"Remove file {pfil}")
                if not self.dry_run_only:
                    os.unlink(pfil)
