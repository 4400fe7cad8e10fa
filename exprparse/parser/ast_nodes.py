"""
Abstract Syntax Tree node definitions for exprparse.

Five node kinds cover the expression grammar. Every node records the
source span it came from and supports the visitor pattern.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation, Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    ERROR = "ErrorNode"
    NUMBER_LITERAL = "NumberLiteral"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"
    TERNARY_OP = "TernaryOp"


@dataclass
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    def visit(self, node: 'ASTNode') -> Any:
        """Visit a node by dispatching on its kind."""
        return node.accept(self)

    @abstractmethod
    def visit_error_node(self, node: 'ErrorNode') -> Any:
        pass

    @abstractmethod
    def visit_number_literal(self, node: 'NumberLiteral') -> Any:
        pass

    @abstractmethod
    def visit_unary_op(self, node: 'UnaryOp') -> Any:
        pass

    @abstractmethod
    def visit_binary_op(self, node: 'BinaryOp') -> Any:
        pass

    @abstractmethod
    def visit_ternary_op(self, node: 'TernaryOp') -> Any:
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, span: SourceSpan):
        self.node_type = node_type
        self.span = span
        self.parent: Optional['ASTNode'] = None
        # Levels from this node down to its deepest leaf; leaves are 1
        self.height = 1

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        pass

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def set_parent(self, parent: 'ASTNode'):
        """Set the parent node."""
        self.parent = parent

    @property
    def is_error(self) -> bool:
        return self.node_type == ASTNodeType.ERROR

    def contains_error(self) -> bool:
        """Check whether this subtree holds an ErrorNode anywhere."""
        if self.is_error:
            return True
        return any(child.contains_error() for child in self.children())

    def __str__(self) -> str:
        return f"{self.node_type.value}@{self.span}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(span={self.span})"


# ============================================================================
# Expressions
# ============================================================================

class ErrorNode(ASTNode):
    """Placeholder for an expression that could not be parsed."""

    def __init__(self, span: SourceSpan):
        super().__init__(ASTNodeType.ERROR, span)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_error_node(self)

    def children(self) -> List[ASTNode]:
        return []


class NumberLiteral(ASTNode):
    """Integer literal."""
    value: int

    def __init__(self, value: int, span: SourceSpan):
        super().__init__(ASTNodeType.NUMBER_LITERAL, span)
        self.value = value

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_number_literal(self)

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"NumberLiteral({self.value!r})"


class UnaryOp(ASTNode):
    """Prefix operation: negation or logical not."""
    operator: Token
    operand: ASTNode

    def __init__(self, operator: Token, operand: ASTNode, span: SourceSpan):
        super().__init__(ASTNodeType.UNARY_OP, span)
        self.operator = operator
        self.operand = operand

        operand.set_parent(self)
        self.height = operand.height + 1

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_unary_op(self)

    def children(self) -> List[ASTNode]:
        return [self.operand]

    def __repr__(self) -> str:
        return f"UnaryOp({self.operator.lexeme!r}, {self.operand!r})"


class BinaryOp(ASTNode):
    """Binary arithmetic operation."""
    operator: Token
    left: ASTNode
    right: ASTNode

    def __init__(self, operator: Token, left: ASTNode, right: ASTNode, span: SourceSpan):
        super().__init__(ASTNodeType.BINARY_OP, span)
        self.operator = operator
        self.left = left
        self.right = right

        left.set_parent(self)
        right.set_parent(self)
        self.height = max(left.height, right.height) + 1

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_binary_op(self)

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return f"BinaryOp({self.operator.lexeme!r}, {self.left!r}, {self.right!r})"


class TernaryOp(ASTNode):
    """Conditional expression `condition ? then_branch : else_branch`."""
    condition: ASTNode
    then_branch: ASTNode
    else_branch: ASTNode

    def __init__(self, condition: ASTNode, then_branch: ASTNode,
                 else_branch: ASTNode, span: SourceSpan):
        super().__init__(ASTNodeType.TERNARY_OP, span)
        self.condition = condition
        self.then_branch = then_branch
        self.else_branch = else_branch

        condition.set_parent(self)
        then_branch.set_parent(self)
        else_branch.set_parent(self)
        self.height = max(condition.height, then_branch.height, else_branch.height) + 1

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_ternary_op(self)

    def children(self) -> List[ASTNode]:
        return [self.condition, self.then_branch, self.else_branch]

    def __repr__(self) -> str:
        return f"TernaryOp({self.condition!r}, {self.then_branch!r}, {self.else_branch!r})"


class ASTPrinter(ASTVisitor):
    """
    Renders a tree as a parenthesized prefix expression.

    `1 + 2 * 3` prints as `(+ 1 (* 2 3))`, a conditional as `(?: c t e)`
    and a placeholder as `<error>`.
    """

    def print(self, node: ASTNode) -> str:
        return self.visit(node)

    def visit_error_node(self, node: ErrorNode) -> str:
        return "<error>"

    def visit_number_literal(self, node: NumberLiteral) -> str:
        return str(node.value)

    def visit_unary_op(self, node: UnaryOp) -> str:
        return self._parenthesize(node.operator.lexeme, node.operand)

    def visit_binary_op(self, node: BinaryOp) -> str:
        return self._parenthesize(node.operator.lexeme, node.left, node.right)

    def visit_ternary_op(self, node: TernaryOp) -> str:
        return self._parenthesize("?:", node.condition, node.then_branch, node.else_branch)

    def _parenthesize(self, name: str, *nodes: ASTNode) -> str:
        parts = [name] + [self.visit(node) for node in nodes]
        return "(" + " ".join(parts) + ")"


def print_ast(node: ASTNode) -> str:
    """Convenience wrapper around ASTPrinter."""
    return ASTPrinter().print(node)
