from __future__ import annotations

import ast
import importlib
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[2] / "src" / "mattermost_client"


def _declared_all(source: str) -> list[str] | None:
    for node in ast.parse(source).body:
        if isinstance(node, ast.Assign) and any(
            isinstance(target, ast.Name) and target.id == "__all__" for target in node.targets
        ):
            return list(ast.literal_eval(node.value))
    return None


def _module_name(path: Path) -> str:
    parts = path.relative_to(PACKAGE_ROOT.parent).with_suffix("").parts
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def test_all_source_modules_define_resolvable_dunder_all() -> None:
    missing: list[str] = []
    unresolved: list[str] = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        names = _declared_all(path.read_text(encoding="utf-8"))
        if names is None:
            missing.append(path.as_posix())
            continue
        module = importlib.import_module(_module_name(path))
        unresolved.extend(f"{module.__name__}.{name}" for name in names if not hasattr(module, name))
    assert missing == []
    assert unresolved == []
