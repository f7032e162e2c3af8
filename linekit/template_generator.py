"""Render parsed template lines to HTML against a context."""

from __future__ import annotations

from typing import Dict, List, Mapping

from linekit.template_parser import (
    Conditional,
    ContentType,
    ExpressionData,
    ForTag,
    IfTag,
    Literal,
    Operation,
    Unrecognized,
    get_index_for_symbol,
)

Context = Mapping[str, List[str]]


def generate_html_template_var(content: ExpressionData, context: Context) -> ExpressionData:
    """Substitute every variable of ``content`` with its first context value.

    The result is stored in ``content.gen_html`` and ``content`` is returned.
    Raises KeyError for a variable missing from the context.
    """
    html = content.expression
    for var in content.var_map:
        start = get_index_for_symbol(var, "{")
        end = get_index_for_symbol(var, "}")
        name = var[start + 2 : end]
        html = html.replace(var, context[name][0])
    content.gen_html = html
    return content


def _render_nested(expression: ContentType, context: Context) -> str:
    if isinstance(expression, Literal):
        return expression.text
    if isinstance(expression, (IfTag, ForTag)):
        return generate_html_tag(expression.content, context)
    if isinstance(expression, ExpressionData):
        return generate_html_template_var(expression, context).gen_html
    if isinstance(expression, Unrecognized):
        return ""
    raise TypeError(f"unexpected content: {expression!r}")


def generate_html_tag(content: Conditional, context: Context) -> str:
    """Render an if or for tag.

    An operand missing from the context renders as a single space; an
    unsupported operator renders as its error text.
    """
    condition = content.condition
    operation = condition.operation

    if operation is Operation.EQUAL:
        left_operand = context.get(condition.left_operand)
        if left_operand is None:
            return " "
        if condition.right_operand.split(" ") != list(left_operand):
            return ""
        return _render_nested(content.expression, context)

    if operation is Operation.IN:
        right_operand = context.get(condition.right_operand)
        if right_operand is None:
            return " "
        expression = content.expression
        parts: List[str] = []
        for element in right_operand:
            if isinstance(expression, Literal):
                parts.append(expression.text)
            elif isinstance(expression, ExpressionData):
                expression.gen_html = expression.expression.replace(
                    expression.var_map[0], element
                )
                parts.append(expression.gen_html)
            parts.append("\n")
        return "".join(parts)

    return operation.value


__all__: List[str] = ["generate_html_template_var", "generate_html_tag"]
_: Dict[str, List[str]]