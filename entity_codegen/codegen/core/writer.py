"""
Line-oriented text sink for generated source files.

Collects lines with their nesting depth, tracks imports registered through
``ref`` and renders the final source with configured indentation.
"""

import re
from typing import Dict, List, Optional, Tuple

from .schema import SurfaceSyntax

# Packages whose types are visible without an import
IMPLICIT_PACKAGES = {
    SurfaceSyntax.CLASS_BASED: {"java.lang"},
    SurfaceSyntax.TRAIT_BASED: {"java.lang", "scala"},
}

_QUALIFIED_NAME = re.compile(r"^(?P<package>[a-z_][\w]*(?:\.[a-z_][\w]*)*)\.(?P<simple>[A-Z]\w*)$")
_GENERIC_NAME = re.compile(r"^(?P<outer>[\w.]+)\[(?P<inner>.+)\]$")


class CodeWriter:
    """Append-only destination for generated lines."""

    def __init__(
        self,
        syntax: SurfaceSyntax = SurfaceSyntax.CLASS_BASED,
        indent_size: int = 4,
        use_tabs: bool = False,
        line_ending: str = "\n",
    ):
        self.syntax = syntax
        self.indent_unit = "\t" if use_tabs else " " * indent_size
        self.line_ending = line_ending
        self._lines: List[Tuple[int, str]] = []
        self._bound: Dict[str, str] = {}  # simple name -> qualified name
        self._imports: Dict[str, str] = {}
        self._local_names: set = set()
        self._package: Optional[str] = None

    @property
    def lines(self) -> List[str]:
        """Lines without indentation, as appended."""
        return [text for _, text in self._lines]

    @property
    def imports(self) -> List[str]:
        """Sorted qualified names that need an import statement."""
        return sorted(self._imports.values())

    def println(self, text: str = "", depth: int = 0) -> "CodeWriter":
        """Append one line at the given nesting depth."""
        self._lines.append((depth, text))
        return self

    def set_package(self, package: str):
        """Record the package of the file so same-package refs stay short."""
        self._package = package

    def declare_local(self, simple_name: str):
        """Reserve a simple name declared in this file (never imported over)."""
        self._local_names.add(simple_name)

    def ref(self, qualified_name: str) -> str:
        """
        Register a type reference and return the name to print.

        Names in implicit packages or the file's own package are shortened
        without an import. A simple name already bound to another package, or
        declared locally, keeps its qualified form.
        """
        if qualified_name.endswith("[]"):
            return self.ref(qualified_name[:-2]) + "[]"

        generic = _GENERIC_NAME.match(qualified_name)
        if generic:
            return f"{self.ref(generic.group('outer'))}[{self.ref(generic.group('inner'))}]"

        match = _QUALIFIED_NAME.match(qualified_name)
        if not match:
            return qualified_name

        package = match.group("package")
        simple = match.group("simple")

        if simple in self._local_names:
            return qualified_name

        bound = self._bound.get(simple)
        if bound is not None:
            return simple if bound == qualified_name else qualified_name

        self._bound[simple] = qualified_name
        if package not in IMPLICIT_PACKAGES[self.syntax] and package != self._package:
            self._imports[simple] = qualified_name
        return simple

    def getvalue(self) -> str:
        """Render the file, inserting imports after the package line."""
        rendered = []
        imports_written = False

        for depth, text in self._lines:
            rendered.append(self.indent_unit * depth + text if text else "")

            if not imports_written and depth == 0 and text.startswith("package "):
                imports_written = True
                if self._imports:
                    rendered.append("")
                    rendered.extend(self._import_lines())

        if not imports_written and self._imports:
            rendered[0:0] = self._import_lines() + [""]

        return self.line_ending.join(rendered) + self.line_ending

    def _import_lines(self) -> List[str]:
        terminator = ";" if self.syntax == SurfaceSyntax.CLASS_BASED else ""
        return [f"import {name}{terminator}" for name in self.imports]

    def __len__(self) -> int:
        return len(self._lines)
