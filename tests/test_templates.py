"""Tests for the corpus templates."""

from __future__ import annotations

import pytest

from transpile_bench.corpus.templates import DEFAULT_TEMPLATES, data_service, react_component, utilities


@pytest.mark.parametrize("template", DEFAULT_TEMPLATES)
def test_templates_are_pure(template) -> None:
    assert template(42) == template(42)
    assert template(42) != template(43)


def test_templates_keep_typescript_interpolation_intact() -> None:
    assert "`/api/users/${user.id}/posts`" in react_component(1)
    assert "`${this.apiUrl}/${id}`" in data_service(2)
    assert "[P in keyof T]?: T[P] extends object ? DeepPartial3<T[P]> : T[P];" in utilities(3)


def test_every_symbol_is_indexed() -> None:
    text = react_component(7)

    assert "interface User7 {" in text
    assert "posts: Post7[];" in text
    assert "export default UserCard7;" in text
    assert "%(index)" not in text
