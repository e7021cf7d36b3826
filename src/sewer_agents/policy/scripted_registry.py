"""Registry of scripted policy URIs derived from policy short_names."""

from __future__ import annotations

import ast
import functools
import importlib
from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import parse_qsl, urlparse

_POLICY_ROOT = Path(__file__).resolve().parent
_PACKAGE_ROOT = _POLICY_ROOT.parent
_SCRIPTED_SCAN_DIRS = (_POLICY_ROOT / "scripted_agent",)

URI_SCHEME = "sewer"


def _iter_policy_files() -> Iterable[Path]:
    for base_dir in _SCRIPTED_SCAN_DIRS:
        if not base_dir.exists():
            continue
        for path in sorted(base_dir.rglob("*.py")):
            if path.name.startswith("__"):
                continue
            yield path


def _extract_literal_strings(node: ast.AST) -> Optional[list[str]]:
    if isinstance(node, (ast.List, ast.Tuple)):
        values: list[str] = []
        for elt in node.elts:
            if isinstance(elt, ast.Constant) and isinstance(elt.value, str):
                values.append(elt.value)
            else:
                return None
        return values
    return None


def _extract_short_names_from_class(class_def: ast.ClassDef) -> list[str]:
    for stmt in class_def.body:
        if isinstance(stmt, ast.Assign):
            for target in stmt.targets:
                if isinstance(target, ast.Name) and target.id == "short_names":
                    value = _extract_literal_strings(stmt.value)
                    return value or []
        if isinstance(stmt, ast.AnnAssign):
            if isinstance(stmt.target, ast.Name) and stmt.target.id == "short_names":
                if stmt.value is None:
                    return []
                value = _extract_literal_strings(stmt.value)
                return value or []
    return []


def _module_name(path: Path) -> str:
    relative = path.relative_to(_PACKAGE_ROOT.parent).with_suffix("")
    return ".".join(relative.parts)


@functools.cache
def _scan_policies() -> dict[str, tuple[str, str]]:
    """Map short name -> (module, class name) without importing anything."""
    found: dict[str, tuple[str, str]] = {}
    for path in _iter_policy_files():
        try:
            source = path.read_text(encoding="utf-8")
        except OSError:
            continue
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError:
            continue
        for node in tree.body:
            if isinstance(node, ast.ClassDef):
                for name in _extract_short_names_from_class(node):
                    found[name] = (_module_name(path), node.name)
    return found


def list_scripted_agent_names() -> tuple[str, ...]:
    return tuple(sorted(_scan_policies()))


SCRIPTED_AGENT_URIS: dict[str, str] = {
    name: f"{URI_SCHEME}://policy/{name}" for name in list_scripted_agent_names()
}


def resolve_scripted_agent_uri(name: str) -> str:
    if name in SCRIPTED_AGENT_URIS:
        return SCRIPTED_AGENT_URIS[name]
    available = ", ".join(sorted(SCRIPTED_AGENT_URIS))
    raise ValueError(f"Unknown scripted agent '{name}'. Available: {available}")


def _coerce(value: str) -> object:
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def parse_policy_uri(uri: str) -> tuple[str, dict[str, object]]:
    """Split ``sewer://policy/diver?trace=1`` into ("diver", {"trace": 1})."""
    parsed = urlparse(uri)
    if parsed.scheme != URI_SCHEME or parsed.netloc != "policy":
        raise ValueError(f"Not a {URI_SCHEME}://policy URI: '{uri}'")
    name = parsed.path.strip("/")
    kwargs = {key: _coerce(value) for key, value in parse_qsl(parsed.query)}
    return name, kwargs


def load_scripted_agent(uri_or_name: str) -> object:
    """Instantiate a scripted policy from a URI or a bare short name."""
    if "://" in uri_or_name:
        name, kwargs = parse_policy_uri(uri_or_name)
    else:
        name, kwargs = uri_or_name, {}
    resolve_scripted_agent_uri(name)
    module_name, class_name = _scan_policies()[name]
    policy_cls = getattr(importlib.import_module(module_name), class_name)
    return policy_cls(**kwargs)
