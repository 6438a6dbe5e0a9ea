"""Tree-sitter parsing of Hack source into the declaration syntax model.

Parsing is best-effort: tree-sitter recovers from syntax errors by inserting
ERROR / MISSING nodes, and ``parse_best_effort`` lowers whatever tree results.
Diagnostics are counted and logged, never raised. A declaration that the
grammar could not recover simply does not appear in the program.

Usage::

    program = parse_best_effort("<?hh\\nfunction f(): void {}\\n")
    [decl] = program.decls  # FunDecl(name="f", ...)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tree_sitter_language_pack import Error as LanguagePackError
from tree_sitter_language_pack import get_parser

from hhoutline.core.errors import ParserError
from hhoutline.core.logging import get_logger
from hhoutline.syntax.ast import (
    AbsConstMember,
    ClassDecl,
    ClassKind,
    ClassMember,
    ClassVar,
    ClassVarsMember,
    ConstDeclarator,
    ConstMember,
    Decl,
    FunDecl,
    FunKind,
    MethodMember,
    ModifierKeyword,
    OmittedMember,
    OtherDecl,
    Program,
    TypeConstMember,
    XhpAttrMember,
)
from hhoutline.syntax.pos import Pos

if TYPE_CHECKING:
    from tree_sitter import Node, Parser, Tree

log = get_logger(__name__)

DEFAULT_GRAMMAR = "hack"

_CLASS_LIKE_TYPES: dict[str, ClassKind] = {
    "class_declaration": ClassKind.CLASS,
    "interface_declaration": ClassKind.INTERFACE,
    "trait_declaration": ClassKind.TRAIT,
    "enum_declaration": ClassKind.ENUM,
    "enum_class_declaration": ClassKind.ENUM,
}

_NAMESPACE_TYPES = frozenset({"namespace_declaration"})

_BODY_NODE_TYPES = frozenset({"member_declarations", "enumerator_list", "declaration_list"})

_NAME_NODE_TYPES = frozenset(
    {
        "identifier",
        "qualified_identifier",
        "name",
        "variable",
        "xhp_identifier",
        "xhp_class_identifier",
    }
)

# Nested function-like scopes whose ``yield`` does not make the outer one a generator
_NESTED_FUNCTION_TYPES = frozenset(
    {
        "function_declaration",
        "method_declaration",
        "lambda_expression",
        "anonymous_function_expression",
    }
)

_KEYWORDS_BY_TEXT: dict[str, ModifierKeyword] = {kw.value: kw for kw in ModifierKeyword}


def strip_ns(name: str) -> str:
    """Drop namespace qualification: ``\\Foo\\Bar`` -> ``Bar``."""
    return name.rsplit("\\", 1)[-1]


def _text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text else ""


def _name_node(node: Node) -> Node | None:
    name = node.child_by_field_name("name")
    if name is not None:
        return name
    for child in node.named_children:
        if child.type in _NAME_NODE_TYPES:
            return child
    return None


def _body_node(node: Node) -> Node:
    """The node whose named children are the members of a class-like declaration.

    Enums list their enumerators directly under the declaration.
    """
    body = node.child_by_field_name("body")
    if body is not None:
        return body
    for child in node.named_children:
        if child.type in _BODY_NODE_TYPES:
            return child
    return node


def _modifier_tokens(node: Node) -> list[str]:
    """Keyword texts of the modifier children of a declaration, in source order."""
    tokens: list[str] = []
    for child in node.children:
        if child.type.endswith("_modifier"):
            tokens.append(_text(child).strip().lower())
        elif child.type in _KEYWORDS_BY_TEXT or child.type == "async":
            tokens.append(child.type)
        elif child.type.endswith("_header"):
            tokens.extend(_modifier_tokens(child))
    return tokens


def _keywords(tokens: list[str]) -> tuple[ModifierKeyword, ...]:
    return tuple(_KEYWORDS_BY_TEXT[t] for t in tokens if t in _KEYWORDS_BY_TEXT)


def _contains_yield(node: Node) -> bool:
    stack = list(node.named_children)
    while stack:
        current = stack.pop()
        if "yield" in current.type:
            return True
        if current.type in _NESTED_FUNCTION_TYPES:
            continue
        stack.extend(current.named_children)
    return False


def _fun_kind(node: Node, tokens: list[str]) -> FunKind:
    is_async = "async" in tokens
    body = node.child_by_field_name("body")
    is_generator = body is not None and _contains_yield(body)
    if is_async and is_generator:
        return FunKind.ASYNC_GENERATOR
    if is_async:
        return FunKind.ASYNC
    if is_generator:
        return FunKind.GENERATOR
    return FunKind.SYNC


def count_errors(root: Node) -> tuple[int, int]:
    """Return (error_count, total_nodes) for a tree."""
    error_count = 0
    total_nodes = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total_nodes += 1
        if node.type == "ERROR" or node.is_missing:
            error_count += 1
        stack.extend(node.children)
    return error_count, total_nodes


@dataclass
class HackParser:
    """Lowers a tree-sitter Hack tree into a ``Program``.

    One instance holds one loaded tree-sitter parser; ``lower`` is pure for a
    given tree.
    """

    grammar: str = DEFAULT_GRAMMAR
    _parser: Parser = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            self._parser = get_parser(self.grammar)  # type: ignore[arg-type]
        except (LanguagePackError, LookupError, ValueError, ImportError, RuntimeError) as err:
            raise ParserError.grammar_unavailable(self.grammar, str(err)) from err

    def parse_tree(self, content: str | bytes) -> Tree:
        data = content.encode("utf-8") if isinstance(content, str) else content
        return self._parser.parse(data)

    def lower(self, root: Node, filename: str = "") -> list[Decl]:
        decls: list[Decl] = []
        self._lower_toplevel(root, filename, decls)
        return decls

    def _lower_toplevel(self, parent: Node, filename: str, out: list[Decl]) -> None:
        for node in parent.named_children:
            if node.type == "comment":
                continue
            if node.type == "function_declaration":
                fun = self._lower_function(node, filename)
                if fun is not None:
                    out.append(fun)
            elif node.type in _CLASS_LIKE_TYPES:
                class_ = self._lower_class(node, filename)
                if class_ is not None:
                    out.append(class_)
            elif node.type in _NAMESPACE_TYPES or node.type == "ERROR":
                body = node.child_by_field_name("body")
                self._lower_toplevel(body if body is not None else node, filename, out)
            elif node.type == "compound_statement" and parent.type in _NAMESPACE_TYPES:
                self._lower_toplevel(node, filename, out)
            else:
                out.append(OtherDecl(node_type=node.type, span=Pos.from_node(node, filename)))

    def _lower_function(self, node: Node, filename: str) -> FunDecl | None:
        name = _name_node(node)
        if name is None:
            return None
        return FunDecl(
            name=strip_ns(_text(name)),
            name_pos=Pos.from_node(name, filename),
            span=Pos.from_node(node, filename),
            fun_kind=_fun_kind(node, _modifier_tokens(node)),
        )

    def _lower_class(self, node: Node, filename: str) -> ClassDecl | None:
        name = _name_node(node)
        if name is None:
            return None
        tokens = _modifier_tokens(node)
        class_kind = _CLASS_LIKE_TYPES[node.type]
        if class_kind is ClassKind.CLASS and "abstract" in tokens:
            class_kind = ClassKind.ABSTRACT

        members: list[ClassMember] = []
        for entry in _body_node(node).named_children:
            if entry.type == "comment":
                continue
            members.extend(self._lower_member(entry, filename))

        return ClassDecl(
            name=strip_ns(_text(name)),
            name_pos=Pos.from_node(name, filename),
            span=Pos.from_node(node, filename),
            class_kind=class_kind,
            is_final="final" in tokens,
            body=tuple(members),
        )

    def _lower_member(self, node: Node, filename: str) -> list[ClassMember]:
        if node.type == "method_declaration":
            name = _name_node(node)
            if name is None:
                return []
            tokens = _modifier_tokens(node)
            return [
                MethodMember(
                    name=_text(name),
                    name_pos=Pos.from_node(name, filename),
                    span=Pos.from_node(node, filename),
                    keywords=_keywords(tokens),
                    fun_kind=_fun_kind(node, tokens),
                )
            ]
        if node.type == "property_declaration":
            vars_ = tuple(
                var
                for child in node.named_children
                if child.type == "property_declarator"
                and (var := self._lower_var(child, filename)) is not None
            )
            return [ClassVarsMember(keywords=_keywords(_modifier_tokens(node)), vars=vars_)]
        if node.type == "const_declaration":
            return self._lower_consts(node, filename)
        if node.type == "type_const_declaration":
            name = _name_node(node)
            if name is None:
                return []
            return [
                TypeConstMember(
                    name=_text(name),
                    name_pos=Pos.from_node(name, filename),
                    span=Pos.from_node(node, filename),
                    is_abstract="abstract" in _modifier_tokens(node),
                )
            ]
        if node.type == "xhp_attribute_declaration":
            return [
                XhpAttrMember(var=var)
                for child in node.named_children
                if child.type == "xhp_class_attribute"
                and (var := self._lower_var(child, filename)) is not None
            ]
        if node.type == "enumerator":
            return self._lower_enumerator(node, filename)
        return [OmittedMember(node_type=node.type, span=Pos.from_node(node, filename))]

    def _lower_var(self, node: Node, filename: str) -> ClassVar | None:
        name = node.child_by_field_name("name")
        if name is None:
            name = next(
                (c for c in node.named_children if c.type in ("variable", "xhp_identifier")),
                None,
            )
        if name is None:
            return None
        return ClassVar(
            name=_text(name).lstrip("$"),
            name_pos=Pos.from_node(name, filename),
            span=Pos.from_node(node, filename),
        )

    def _lower_consts(self, node: Node, filename: str) -> list[ClassMember]:
        members: list[ClassMember] = []
        consts: list[ConstDeclarator] = []
        for declarator in node.named_children:
            if declarator.type != "const_declarator":
                continue
            name = _name_node(declarator)
            if name is None:
                continue
            name_pos = Pos.from_node(name, filename)
            value = declarator.child_by_field_name("value")
            if value is None:
                members.append(AbsConstMember(name=_text(name), name_pos=name_pos))
            else:
                consts.append(
                    ConstDeclarator(
                        name=_text(name),
                        name_pos=name_pos,
                        value_pos=Pos.from_node(value, filename),
                    )
                )
        if consts:
            members.insert(0, ConstMember(consts=tuple(consts)))
        return members

    def _lower_enumerator(self, node: Node, filename: str) -> list[ClassMember]:
        named = node.named_children
        name = node.child_by_field_name("name")
        if name is None:
            name = next((c for c in named if c.type == "identifier"), None)
        value = node.child_by_field_name("value")
        if value is None and len(named) > 1:
            value = named[-1]
        if name is None or value is None:
            return []
        return [
            ConstMember(
                consts=(
                    ConstDeclarator(
                        name=_text(name),
                        name_pos=Pos.from_node(name, filename),
                        value_pos=Pos.from_node(value, filename),
                    ),
                )
            )
        ]


def parse_best_effort(
    content: str | bytes, filename: str = "", grammar: str = DEFAULT_GRAMMAR
) -> Program:
    """Parse ``content`` and lower it, discarding syntax diagnostics.

    Raises:
        ParserError: Only when the tree-sitter grammar cannot be loaded.
    """
    parser = HackParser(grammar=grammar)
    tree = parser.parse_tree(content)
    error_count, total_nodes = count_errors(tree.root_node)
    log.debug(
        "parse.best_effort",
        filename=filename,
        error_count=error_count,
        total_nodes=total_nodes,
    )
    return Program(decls=tuple(parser.lower(tree.root_node, filename)), error_count=error_count)
