#
# Copyright (c) 2025 LateGenXer
#
# SPDX-License-Identifier: AGPL-3.0-or-later
#


import pytest

try:
    import streamlit
except ImportError:
    pytest.skip("No Streamlit; skipping.", allow_module_level=True)

import common
import environ


def test_menu_items(monkeypatch) -> None:
    monkeypatch.setattr(environ, 'project_url', None)
    items = common.menu_items()
    assert set(items) == {"About"}
    assert 'http' not in items["About"]

    monkeypatch.setattr(environ, 'project_url', 'https://example.org/ptproperty/')
    items = common.menu_items()
    assert items["Get help"] == 'https://example.org/ptproperty/discussions'
    assert items["Report a Bug"] == 'https://example.org/ptproperty/issues'
    assert 'https://example.org/ptproperty' in items["About"]


@pytest.mark.parametrize("production,project,security", [
    (False, None, None),
    (False, '123', 'abc'),
    (True, None, None),
    (True, '123', None),
    (True, None, 'abc'),
])
def test_statcounter_disabled(monkeypatch, production:bool, project, security) -> None:
    monkeypatch.setattr(environ, 'production', production)
    monkeypatch.setattr(environ, 'statcounter_project', project)
    monkeypatch.setattr(environ, 'statcounter_security', security)
    html = common.statcounter_html()
    assert '<script' not in html
    assert 'statcounter' in html


def test_statcounter_enabled(monkeypatch) -> None:
    monkeypatch.setattr(environ, 'production', True)
    monkeypatch.setattr(environ, 'statcounter_project', '123')
    monkeypatch.setattr(environ, 'statcounter_security', 'abc')
    html = common.statcounter_html()
    assert 'var sc_project=123;' in html
    assert 'var sc_security="abc";' in html
    assert 'counter.js' in html


def test_statcounter_bad_project(monkeypatch) -> None:
    monkeypatch.setattr(environ, 'production', True)
    monkeypatch.setattr(environ, 'statcounter_project', '1; alert(1)')
    monkeypatch.setattr(environ, 'statcounter_security', 'abc')
    with pytest.raises(ValueError):
        common.statcounter_html()
