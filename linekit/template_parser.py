"""Tokenize template lines into literals, variables and if/for tags."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class TemplateSyntaxError(ValueError):
    """Raised for a tag line that does not have the expected shape."""


class Operation(Enum):
    """Operation in an if or for condition."""

    EQUAL = "="
    IN = "in"
    UNSUPPORTED = "Unrecognized operator"


@dataclass
class ExpressionData:
    """A line holding template variables such as ``{{name}}``."""

    expression: str
    var_map: List[str] = field(default_factory=list)
    gen_html: str = ""


@dataclass(frozen=True)
class ConditionData:
    left_operand: str
    operation: Operation
    right_operand: str


@dataclass
class Conditional:
    """A condition and the content it guards or repeats."""

    condition: ConditionData
    expression: "ContentType"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass
class ForTag:
    content: Conditional


@dataclass
class IfTag:
    content: Conditional


@dataclass(frozen=True)
class Unrecognized:
    """A line that looks like a tag but is neither an if nor a for."""


ContentType = Union[Literal, ExpressionData, ForTag, IfTag, Unrecognized]

_OPERATORS = (">", ">=", "=", "<=", "<", "in")


def check_symbol_string(text: str, pattern: str) -> bool:
    """Return whether ``pattern`` occurs in ``text``."""
    return pattern in text


def check_matching_pair(text: str, left: str, right: str) -> bool:
    """Return whether ``left`` and ``right`` occur equally often, at least once."""
    left_count = text.count(left)
    return left_count == text.count(right) and left_count != 0


def get_index_for_symbol(text: str, symbol: str) -> Optional[int]:
    """Return the index of the first ``symbol`` in ``text``, or None."""
    index = text.find(symbol)
    return None if index < 0 else index


def get_expression_data(text: str) -> ExpressionData:
    """Collect every whitespace-separated word holding both ``{{`` and ``}}``."""
    variables = [word for word in text.split() if "{{" in word and "}}" in word]
    return ExpressionData(expression=text, var_map=variables)


def get_operation_type(text: str) -> Operation:
    if text == "=":
        return Operation.EQUAL
    if text == "in":
        return Operation.IN
    return Operation.UNSUPPORTED


def get_conditional_expression(text: str) -> ConditionData:
    """Split a condition such as ``amount = 2000`` into its parts."""
    text = text.strip()
    for operator in _OPERATORS:
        if operator not in text:
            continue
        operands = text.split(operator)
        if len(operands) != 2:
            break
        left, right = operands
        return ConditionData(left.strip(), get_operation_type(operator), right.strip())
    raise TemplateSyntaxError("Invalid format")


def get_conditional_data(text: str) -> Conditional:
    """Parse a whole ``{% if ... %} ... {% endif %}`` or for-tag line."""
    if not (text.endswith("{% endif %}") or text.endswith("{% endfor %}")):
        raise TemplateSyntaxError("Invalid input format")

    if_start = text.find("{% if ")
    if if_start >= 0:
        start_condition = if_start + 6
    else:
        for_start = text.find("{% for ")
        if for_start < 0:
            raise TemplateSyntaxError("Invalid input format")
        start_condition = for_start + 7

    end_condition = text.find(" %}")
    end_expr = text.find("{% endif %}")
    if end_expr < 0:
        end_expr = text.find("{% endfor %}")

    if start_condition >= end_condition or end_condition + 3 > end_expr:
        raise TemplateSyntaxError("Invalid input format")

    return Conditional(
        condition=get_conditional_expression(text[start_condition:end_condition]),
        expression=get_content_type(text[end_condition + 3 : end_expr].strip()),
    )


def get_content_type(text: str) -> ContentType:
    """Classify one template line and parse it accordingly.

    Raises TemplateSyntaxError for a malformed if or for tag.
    """
    is_tag_expression = check_matching_pair(text, "{%", "%}")
    is_for_tag = ("for" in text and "in" in text) or "endfor" in text
    is_if_tag = "if" in text or "endif" in text
    is_template_variable = check_matching_pair(text, "{{", "}}")

    if is_tag_expression and is_for_tag:
        return ForTag(get_conditional_data(text))
    if is_tag_expression and is_if_tag:
        return IfTag(get_conditional_data(text))
    if is_template_variable:
        return get_expression_data(text)
    if not is_tag_expression:
        return Literal(text)
    return Unrecognized()