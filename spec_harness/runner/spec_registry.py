# Copyright 2026 The spec_harness Authors
# SPDX-License-Identifier: Apache-2.0

"""
Spec registry for discovering and loading spec files.

A spec file is a Python module named ``*_spec.py`` or ``spec_*.py`` that
defines one or more ``SpecTree`` objects (usually a ``SpecBuilder``) at
module level.  Files given explicitly on the command line are loaded
whatever their name; directories are walked for matching files.
"""

import ast
import fnmatch
import importlib.util
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from spec_harness.core.tree import SpecTree

logger = logging.getLogger(__name__)


class SpecLoadError(Exception):
    """A spec file could not be imported."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"could not load {path}: {type(cause).__name__}: {cause}")


@dataclass
class SpecFileInfo:
    """Information about a discovered spec file."""

    name: str
    path: Path
    description: str = ""
    trees: List[SpecTree] = field(default_factory=list, repr=False)

    def __str__(self) -> str:
        return f"{self.name}: {self.path}"


class SpecRegistry:
    """Registry for discovering and loading spec files."""

    # Directories to skip during discovery
    SKIP_DIRS = {
        '.git', '.venv', 'venv', '__pycache__', 'build', 'dist',
        'node_modules', '.mypy_cache', '.pytest_cache', '.hypothesis',
        'site-packages', 'dist-packages', '.tox', '*.egg-info',
    }

    # Patterns that indicate a spec file
    SPEC_PATTERNS = [
        '*_spec.py',
        'spec_*.py',
    ]

    def __init__(self, root: Optional[Path] = None):
        """Initialize the registry.

        Args:
            root: Directory searched when no paths are given. Defaults to
                the current directory.
        """
        self.root = Path(root) if root else Path.cwd()
        self.specs: Dict[str, SpecFileInfo] = {}

    def _should_skip_dir(self, dir_path: Path) -> bool:
        """Check if directory should be skipped."""
        name = dir_path.name
        for skip in self.SKIP_DIRS:
            if skip.startswith('*'):
                if name.endswith(skip[1:]):
                    return True
            elif name == skip:
                return True
        return False

    def _is_spec_file(self, file_name: str) -> bool:
        return any(fnmatch.fnmatch(file_name, p) for p in self.SPEC_PATTERNS)

    def _extract_info(self, file_path: Path) -> SpecFileInfo:
        """Build SpecFileInfo, reading the module docstring without importing."""
        description = ""
        try:
            tree = ast.parse(file_path.read_text())
            docstring = ast.get_docstring(tree)
            if docstring:
                description = docstring.split('\n')[0].strip()
        except (SyntaxError, UnicodeDecodeError, OSError):
            pass

        return SpecFileInfo(
            name=file_path.stem,
            path=file_path,
            description=description,
        )

    def discover(
        self,
        paths: Optional[Iterable[Path]] = None,
        pattern: Optional[str] = None,
    ) -> List[SpecFileInfo]:
        """Discover spec files.

        Args:
            paths: Files and directories to search. Defaults to the root.
            pattern: Glob pattern to filter discovered files by name
                (e.g. "stack_*"); explicit files are always kept.

        Returns:
            List of SpecFileInfo objects, in path order.
        """
        self.specs.clear()
        found: List[SpecFileInfo] = []

        for path in (paths or [self.root]):
            path = Path(path)
            if path.is_file():
                found.append(self._extract_info(path))
            elif path.is_dir():
                found.extend(self._walk(path, pattern))
            else:
                logger.warning("spec path does not exist: %s", path)

        for info in found:
            self.specs[str(info.path)] = info
        return found

    def _walk(self, directory: Path, pattern: Optional[str]) -> List[SpecFileInfo]:
        specs = []
        for root, dirs, files in os.walk(directory):
            root_path = Path(root)

            # Filter out directories to skip; sort for a stable run order
            dirs[:] = sorted(d for d in dirs if not self._should_skip_dir(root_path / d))

            for file in sorted(files):
                if not self._is_spec_file(file):
                    continue
                file_path = root_path / file
                if pattern and not file_path.match(pattern) and not fnmatch.fnmatch(file_path.stem, pattern):
                    continue
                specs.append(self._extract_info(file_path))
        return specs

    def load(self, info: SpecFileInfo) -> List[SpecTree]:
        """Import a spec file and collect its module-level spec trees.

        The file's directory is on ``sys.path`` while it is imported, so
        spec files can import helpers that sit next to them.

        Raises:
            SpecLoadError: If the module raises while being imported.
        """
        path = info.path.resolve()
        module_name = f"_spec_harness_spec_{path.stem}_{abs(hash(str(path))):x}"
        module_spec = importlib.util.spec_from_file_location(module_name, path)
        if module_spec is None or module_spec.loader is None:
            raise SpecLoadError(path, ImportError("not a Python source file"))

        module = importlib.util.module_from_spec(module_spec)
        sys.modules[module_name] = module
        sys.path.insert(0, str(path.parent))
        try:
            module_spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise SpecLoadError(path, e) from e
        finally:
            sys.path.remove(str(path.parent))

        trees: List[SpecTree] = []
        seen = set()
        for value in vars(module).values():
            if isinstance(value, SpecTree) and id(value) not in seen:
                seen.add(id(value))
                trees.append(value)

        if not trees:
            logger.warning("no specs defined in %s", path)
        info.trees = trees
        return trees

    def get_spec(self, name_or_path: str) -> Optional[SpecFileInfo]:
        """Get a discovered spec file by name or path."""
        if name_or_path in self.specs:
            return self.specs[name_or_path]
        for info in self.specs.values():
            if info.name == name_or_path:
                return info
        return None


def discover_specs(
    paths: Optional[Iterable[Path]] = None,
    pattern: Optional[str] = None,
) -> List[SpecFileInfo]:
    """Convenience function to discover spec files."""
    return SpecRegistry().discover(paths=paths, pattern=pattern)
