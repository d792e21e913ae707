from __future__ import annotations

from collections.abc import Iterable, Sequence
from importlib import import_module
from types import ModuleType
from typing import Any

DEFAULT_PROJECT_NAME = "xlsxbuild"


def _collect_dotted_parts(names: Iterable[str]) -> set[str]:
    set_parts: set[str] = set()
    for c_name in names:
        l_parts = c_name.split(".")
        set_parts.update(l_parts)
    set_parts.discard("")
    return set_parts


def build_optional_dependency_error(
    *,
    feature: str,
    extras: Sequence[str],
    missing_module: str | None,
) -> ModuleNotFoundError:
    c_extras = ",".join(dict.fromkeys(extras))
    c_missing = (
        f"Missing optional dependency `{missing_module}`."
        if missing_module
        else "Missing optional dependency."
    )
    return ModuleNotFoundError(
        f"{feature} is unavailable. {c_missing} "
        f"Install extras with `pip install \"{DEFAULT_PROJECT_NAME}[{c_extras}]\"` "
        f"or sync in development with `pdm sync -G dev -G {c_extras}`."
    )


def import_optional_module(
    *,
    module_name: str,
    feature: str,
    extras: Sequence[str],
    required_modules: Sequence[str],
    package: str | None = None,
) -> ModuleType:
    """Import ``module_name``, turning a missing optional dependency into a hint.

    Only failures caused by one of ``required_modules`` are rewritten; any other
    ``ModuleNotFoundError`` is a real bug and propagates untouched. An empty
    ``required_modules`` rewrites every failure.
    """
    try:
        return import_module(module_name, package=package)
    except ModuleNotFoundError as exc:
        set_missing = _collect_dotted_parts([exc.name or ""])
        set_required = _collect_dotted_parts(required_modules)
        if not required_modules or set_missing & set_required:
            raise build_optional_dependency_error(
                feature=feature,
                extras=extras,
                missing_module=exc.name,
            ) from exc
        raise


def import_optional_attr(
    *,
    module_name: str,
    attr_name: str,
    feature: str,
    extras: Sequence[str],
    required_modules: Sequence[str],
    package: str | None = None,
) -> Any:
    module = import_optional_module(
        module_name=module_name,
        package=package,
        feature=feature,
        extras=extras,
        required_modules=required_modules,
    )
    return getattr(module, attr_name)
