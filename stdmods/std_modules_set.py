""" Classifies imports against a list produced by stdlib_modules.py.

The list is either loaded from a file generated earlier (so the answer does not
depend on whichever interpreter runs the check) or computed from the running
interpreter.
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from stdmods.stdlib_modules import list_public_modules

ROOT_SEPARATOR = "."


def parse_module_list(text: str) -> FrozenSet[str]:
    return frozenset(line.strip() for line in text.splitlines() if line.strip())


def load_module_set(path: str) -> FrozenSet[str]:
    with open(path, encoding="utf-8") as f:
        return parse_module_list(f.read())


def current_module_set() -> FrozenSet[str]:
    return frozenset(list_public_modules())


def is_stdlib_import(module: str, modules: Optional[FrozenSet[str]] = None) -> bool:
    # Relative imports always point into the importing package.
    if module.startswith(ROOT_SEPARATOR):
        return False
    if modules is None:
        modules = current_module_set()
    # Checking the root module is enough: "os.path" is stdlib iff "os" is.
    return module.partition(ROOT_SEPARATOR)[0] in modules
