"""Per-declaration summaries: one syntax node in, outline entries out."""

from __future__ import annotations

from typing import assert_never

from hhoutline.outline.models import Def, Kind, Modifier
from hhoutline.outline.modifiers import modifiers_of_fun_kind, modifiers_of_keywords
from hhoutline.syntax.ast import (
    AbsConstMember,
    ClassDecl,
    ClassKind,
    ClassMember,
    ClassVar,
    ClassVarsMember,
    ConstDeclarator,
    ConstMember,
    FunDecl,
    MethodMember,
    ModifierKeyword,
    OmittedMember,
    TypeConstMember,
    XhpAttrMember,
)
from hhoutline.syntax.pos import Pos

_KIND_OF_CLASS_KIND: dict[ClassKind, Kind] = {
    ClassKind.CLASS: Kind.CLASS,
    ClassKind.ABSTRACT: Kind.CLASS,
    ClassKind.INTERFACE: Kind.INTERFACE,
    ClassKind.TRAIT: Kind.TRAIT,
    ClassKind.ENUM: Kind.ENUM,
}


def summarize_fun(fun: FunDecl) -> Def:
    return Def(
        kind=Kind.FUNCTION,
        name=fun.name,
        pos=fun.name_pos,
        span=fun.span,
        modifiers=modifiers_of_fun_kind(fun.fun_kind),
    )


def summarize_method(method: MethodMember) -> Def:
    # Keyword modifiers first, async last
    modifiers = modifiers_of_keywords(method.keywords) + modifiers_of_fun_kind(method.fun_kind)
    return Def(
        kind=Kind.METHOD,
        name=method.name,
        pos=method.name_pos,
        span=method.span,
        modifiers=modifiers,
    )


def summarize_property(keywords: tuple[ModifierKeyword, ...], var: ClassVar) -> Def:
    return Def(
        kind=Kind.PROPERTY,
        name=var.name,
        pos=var.name_pos,
        span=var.span,
        modifiers=modifiers_of_keywords(keywords),
    )


def summarize_const(const: ConstDeclarator) -> Def:
    return Def(
        kind=Kind.CONST,
        name=const.name,
        pos=const.name_pos,
        span=Pos.btw(const.name_pos, const.value_pos),
    )


def summarize_abs_const(const: AbsConstMember) -> Def:
    return Def(
        kind=Kind.CONST,
        name=const.name,
        pos=const.name_pos,
        span=const.name_pos,
        modifiers=(Modifier.ABSTRACT,),
    )


def summarize_typeconst(typeconst: TypeConstMember) -> Def:
    return Def(
        kind=Kind.TYPECONST,
        name=typeconst.name,
        pos=typeconst.name_pos,
        span=typeconst.span,
        modifiers=(Modifier.ABSTRACT,) if typeconst.is_abstract else (),
    )


def summarize_member(member: ClassMember) -> list[Def]:
    """Outline entries for one class body member.

    Omitted shapes (trait use, require clauses, XHP category and children
    declarations, unknown nodes) yield no entries.
    """
    if isinstance(member, MethodMember):
        return [summarize_method(member)]
    if isinstance(member, ClassVarsMember):
        return [summarize_property(member.keywords, var) for var in member.vars]
    if isinstance(member, XhpAttrMember):
        return [summarize_property((), member.var)]
    if isinstance(member, ConstMember):
        return [summarize_const(const) for const in member.consts]
    if isinstance(member, AbsConstMember):
        return [summarize_abs_const(member)]
    if isinstance(member, TypeConstMember):
        return [summarize_typeconst(member)]
    if isinstance(member, OmittedMember):
        return []
    assert_never(member)


def summarize_class(class_: ClassDecl) -> Def:
    modifiers: tuple[Modifier, ...] = (Modifier.FINAL,) if class_.is_final else ()
    if class_.class_kind is ClassKind.ABSTRACT:
        modifiers = (Modifier.ABSTRACT, *modifiers)
    children = tuple(child for member in class_.body for child in summarize_member(member))
    return Def(
        kind=_KIND_OF_CLASS_KIND[class_.class_kind],
        name=class_.name,
        pos=class_.name_pos,
        span=class_.span,
        modifiers=modifiers,
        children=children,
    )
