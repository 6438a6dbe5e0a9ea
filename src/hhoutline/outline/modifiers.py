"""Modifier normalization."""

from __future__ import annotations

from collections.abc import Iterable

from hhoutline.core.errors import InternalError
from hhoutline.outline.models import Modifier
from hhoutline.syntax.ast import FunKind, ModifierKeyword

_MODIFIER_OF_KEYWORD: dict[ModifierKeyword, Modifier] = {
    ModifierKeyword.FINAL: Modifier.FINAL,
    ModifierKeyword.STATIC: Modifier.STATIC,
    ModifierKeyword.ABSTRACT: Modifier.ABSTRACT,
    ModifierKeyword.PRIVATE: Modifier.PRIVATE,
    ModifierKeyword.PUBLIC: Modifier.PUBLIC,
    ModifierKeyword.PROTECTED: Modifier.PROTECTED,
}

_ASYNC_FUN_KINDS = frozenset({FunKind.ASYNC, FunKind.ASYNC_GENERATOR})


def modifiers_of_keywords(keywords: Iterable[ModifierKeyword]) -> tuple[Modifier, ...]:
    """Map source keywords to canonical modifiers, keeping order and duplicates.

    Raises:
        InternalError: For anything outside ``ModifierKeyword``. Callers only
            ever pass parser output, so this is a bug, not bad input.
    """
    result: list[Modifier] = []
    for keyword in keywords:
        modifier = _MODIFIER_OF_KEYWORD.get(keyword)  # type: ignore[call-overload]
        if modifier is None:
            raise InternalError.unexpected("unknown modifier keyword", keyword=repr(keyword))
        result.append(modifier)
    return tuple(result)


def modifiers_of_fun_kind(fun_kind: FunKind) -> tuple[Modifier, ...]:
    """``(ASYNC,)`` for async functions and async generators, else empty."""
    return (Modifier.ASYNC,) if fun_kind in _ASYNC_FUN_KINDS else ()
