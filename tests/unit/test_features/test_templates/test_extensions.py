"""Tests for dot-prefixed field reference rewriting."""

import pytest

from notify_service.features.notifications.templates import rewrite_dot_fields


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("Hello {{.Name}}", "Hello {{Name}}"),
        ("{{ .User.Email }}", "{{ User.Email }}"),
        ("{{- .Name -}}", "{{- Name -}}"),
        ("{{ . }}", "{{ _root }}"),
        ("{% if .Admin %}x{% endif %}", "{% if Admin %}x{% endif %}"),
        ("{{ .Name | upper }}", "{{ Name | upper }}"),
    ],
)
def test_rewrites_dot_references(source: str, expected: str) -> None:
    assert rewrite_dot_fields(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "Visit example.com. Thanks.",
        "{{ user.name }}",
        "{{ items[0].name }}",
        "{{ price | round(2) }} {{ 1.5 }}",
        "{{ 'a.b' }}",
    ],
)
def test_leaves_other_text_untouched(source: str) -> None:
    assert rewrite_dot_fields(source) == source


@pytest.mark.parametrize(
    "source",
    [
        '{{ "a .b" }}',
        "{{ 'say .hi' ~ \" and . bye\" }}",
        '{{ "x".upper() }}',
        "{% raw %}{{ .X }}{% endraw %}",
        "{%- raw -%}{{ . }}{%- endraw -%}",
    ],
)
def test_string_literals_and_raw_blocks_are_kept(source: str) -> None:
    assert rewrite_dot_fields(source) == source


def test_rewrites_around_literals_and_raw_blocks() -> None:
    source = '{{ .Name ~ " .b" }} {% raw %}{{ .X }}{% endraw %} {{ .Y }}'

    assert rewrite_dot_fields(source) == '{{ Name ~ " .b" }} {% raw %}{{ .X }}{% endraw %} {{ Y }}'
