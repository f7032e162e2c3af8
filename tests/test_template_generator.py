import pytest

from linekit.template_generator import generate_html_tag, generate_html_template_var
from linekit.template_parser import (
    ConditionData,
    Conditional,
    ExpressionData,
    IfTag,
    Literal,
    Operation,
    Unrecognized,
    get_conditional_data,
)


@pytest.fixture
def context():
    return {"name": ["Bob"], "city": ["Boston"]}


def test_check_literals(context):
    data = ExpressionData(expression="{{name}}", var_map=["{{name}}"], gen_html="")
    assert generate_html_template_var(data, context).gen_html == "Bob"


def test_template_var_stored_on_content(context):
    data = ExpressionData(expression="Hi {{name}} ,welcome", var_map=["{{name}}"])
    result = generate_html_template_var(data, context)
    assert result is data
    assert data.gen_html == "Hi Bob ,welcome"


def test_template_var_missing_key_raises(context):
    data = ExpressionData(expression="{{age}}", var_map=["{{age}}"])
    with pytest.raises(KeyError):
        generate_html_template_var(data, context)


def test_check_if_tag(context):
    line = "{% if name = Bob %} <h1> hello Bob </h1> {% endif %}"
    assert get_conditional_data(line) == Conditional(
        condition=ConditionData("name", Operation.EQUAL, "Bob"),
        expression=Literal("<h1> hello Bob </h1>"),
    )
    assert generate_html_tag(get_conditional_data(line), context) == "<h1> hello Bob </h1>"


def test_check_if_tag_var(context):
    line = "{% if name = Bob %} <h1> hello {{name}} </h1> {% endif %}"
    assert get_conditional_data(line) == Conditional(
        condition=ConditionData("name", Operation.EQUAL, "Bob"),
        expression=ExpressionData(
            expression="<h1> hello {{name}} </h1>", var_map=["{{name}}"], gen_html=""
        ),
    )
    assert generate_html_tag(get_conditional_data(line), context) == "<h1> hello Bob </h1>"


def test_check_for_tag_one():
    context = {"name": ["Bob", "Lisa"], "city": ["Boston"]}
    line = "{% for costumer in name %} <li> {{customer}} </li> {% endfor %}"
    assert (
        generate_html_tag(get_conditional_data(line), context)
        == "<li> Bob </li>\n<li> Lisa </li>\n"
    )


def test_if_tag_not_matching_is_empty(context):
    line = "{% if city = Paris %} <p> hola </p> {% endif %}"
    assert generate_html_tag(get_conditional_data(line), context) == ""


def test_if_tag_missing_operand_is_space(context):
    line = "{% if amount = 2000 %} <p> hola </p> {% endif %}"
    assert generate_html_tag(get_conditional_data(line), context) == " "


def test_for_tag_missing_list_is_space(context):
    line = "{% for x in names %} <p> hola </p> {% endfor %}"
    assert generate_html_tag(get_conditional_data(line), context) == " "


def test_for_tag_literal_repeats_per_element():
    context = {"name": ["Bob", "Lisa"]}
    line = "{% for x in name %} <p> hola </p> {% endfor %}"
    result = generate_html_tag(get_conditional_data(line), context)
    assert result == "<p> hola </p>\n<p> hola </p>\n"
    assert result.count("\n") == len(context["name"])


def test_multi_word_right_operand_matches_list():
    context = {"name": ["Bob", "Lisa"]}
    conditional = Conditional(
        condition=ConditionData("name", Operation.EQUAL, "Bob Lisa"),
        expression=Literal("<p> both </p>"),
    )
    assert generate_html_tag(conditional, context) == "<p> both </p>"


def test_nested_if_tag(context):
    inner = Conditional(
        condition=ConditionData("city", Operation.EQUAL, "Boston"),
        expression=Literal("<p> hola </p>"),
    )
    outer = Conditional(
        condition=ConditionData("name", Operation.EQUAL, "Bob"),
        expression=IfTag(inner),
    )
    assert generate_html_tag(outer, context) == "<p> hola </p>"


def test_unrecognized_inner_renders_empty(context):
    conditional = Conditional(
        condition=ConditionData("name", Operation.EQUAL, "Bob"),
        expression=Unrecognized(),
    )
    assert generate_html_tag(conditional, context) == ""


def test_unsupported_operator(context):
    conditional = Conditional(
        condition=ConditionData("amount", Operation.UNSUPPORTED, "2000"),
        expression=Literal("<p> hola </p>"),
    )
    assert generate_html_tag(conditional, context) == "Unrecognized operator"