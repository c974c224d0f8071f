"""Test the public API."""

import io
import logging

import pytest

from cssruleset import (
    DEFAULT_OPTIONS, Declaration, RuleSet, __main__, parse_declarations)

from .testing_utils import assert_no_logs, capture_logs


def _run(args, stdin=''):
    stdin = io.StringIO(stdin)
    stdout = io.StringIO()
    __main__.main(args.split(), stdin=stdin, stdout=stdout)
    return stdout.getvalue()


@assert_no_logs
def test_ruleset():
    ruleset = RuleSet('h1, h2', 'COLOR: red; margin: 0 !important')
    assert ruleset.selectors == 'h1, h2'
    assert ruleset.block == 'COLOR: red; margin: 0 !important'
    assert ruleset.specificity is None
    assert ruleset.declarations == {
        'color': Declaration('red', False),
        'margin': Declaration('0', True),
    }
    assert repr(ruleset) == "<RuleSet 'h1, h2'>"
    assert str(ruleset) == 'h1, h2 { color: red; margin: 0 !important; }'


@assert_no_logs
@pytest.mark.parametrize('block', (None, ''))
def test_ruleset_empty(block):
    ruleset = RuleSet('p', block)
    assert ruleset.declarations == {}
    ruleset.expand_shorthand()
    assert ruleset.declarations == {}
    assert ruleset.declarations_to_string() == ''
    assert list(ruleset.iter_declarations()) == []


@assert_no_logs
def test_iter_declarations():
    ruleset = RuleSet('p', 'color: red !important; margin: 0; color: blue')
    assert list(ruleset.iter_declarations()) == [
        ('margin', '0', False), ('color', 'blue', False)]


@assert_no_logs
def test_declarations_to_string():
    ruleset = RuleSet('p', 'color: red !important; margin: 0')
    assert ruleset.declarations_to_string() == (
        'color: red !important; margin: 0;')
    assert ruleset.declarations_to_string(force_important=True) == (
        'color: red !important; margin: 0 !important;')
    assert ruleset.declarations_to_string(**DEFAULT_OPTIONS) == (
        ruleset.declarations_to_string())


@assert_no_logs
def test_declarations_to_string_unknown_option():
    ruleset = RuleSet('p', 'color: red')
    with capture_logs() as logs:
        assert ruleset.declarations_to_string(media='print') == 'color: red;'
    assert logs == ['WARNING: Unknown option: media.']


@assert_no_logs
def test_iter_selectors_specificity():
    ruleset = RuleSet('h1 , #title', 'color: red', specificity=5)
    assert list(ruleset.iter_selectors()) == [
        ('h1', 'color: red;', 5), ('#title', 'color: red;', 5)]


@assert_no_logs
def test_iter_selectors_calculated_specificity():
    ruleset = RuleSet('h1, #title, ul li.item', 'color: red')
    assert list(ruleset.iter_selectors(force_important=True)) == [
        ('h1', 'color: red !important;', 1),
        ('#title', 'color: red !important;', 100),
        ('ul li.item', 'color: red !important;', 12)]


@assert_no_logs
def test_iter_selectors_score():
    scored = []

    def score(selector):
        scored.append(selector)
        return len(selector)

    ruleset = RuleSet('a, bb', 'color: red')
    assert [specificity for _, _, specificity in ruleset.iter_selectors(
        score=score)] == [1, 2]
    assert scored == ['a', 'bb']

    ruleset = RuleSet('a, bb', 'color: red', specificity=0)
    assert [specificity for _, _, specificity in ruleset.iter_selectors(
        score=score)] == [0, 0]
    assert scored == ['a', 'bb']


@assert_no_logs
@pytest.mark.parametrize('block', (
    'color: red',
    'color: red;',
    'margin: 1px; color: red !important',
    'color red',
))
def test_add_declaration(block):
    ruleset = RuleSet('p', block)
    ruleset.add_declaration('Margin', '2px')
    assert ruleset.declarations == parse_declarations(
        f'{block};Margin: 2px;')
    assert ruleset.declarations['margin'] == ('2px', False)


@assert_no_logs
def test_add_declaration_empty_block():
    ruleset = RuleSet('p', None)
    ruleset.add_declaration('color', 'red !important')
    assert ruleset.block == 'color: red !important;'
    assert ruleset.declarations == {'color': ('red', True)}


@assert_no_logs
def test_add_declaration_after_expansion():
    ruleset = RuleSet('p', 'margin: 1px')
    ruleset.expand_shorthand()
    assert 'margin' not in ruleset.declarations
    ruleset.add_declaration('color', 'red')
    assert ruleset.declarations == {
        'margin': ('1px', False), 'color': ('red', False)}


@assert_no_logs
def test_expand_shorthand():
    ruleset = RuleSet('p', (
        'margin: 0 auto; '
        'font: italic bold 12px/14px Arial, sans-serif !important; '
        'background: url(x.png) gray 50% repeat fixed'))
    ruleset.expand_shorthand()
    assert ruleset.declarations == {
        'margin-top': ('0', False),
        'margin-right': ('auto', False),
        'margin-bottom': ('0', False),
        'margin-left': ('auto', False),
        'font-style': ('italic', True),
        'font-variant': ('normal', True),
        'font-weight': ('bold', True),
        'font-size': ('12px', True),
        'line-height': ('14px', True),
        'font-family': ('Arial, sans-serif', True),
        'background-attachment': ('fixed', False),
        'background-repeat': ('repeat', False),
        'background-color': ('gray', False),
        'background-position': ('50%', False),
        'background-image': ('url(x.png)', False),
    }


@assert_no_logs
def test_expand_shorthand_twice():
    ruleset = RuleSet('p', 'padding: 1px 2px')
    ruleset.expand_shorthand()
    expanded = dict(ruleset.declarations)
    ruleset.expand_shorthand()
    assert ruleset.declarations == expanded


@assert_no_logs
def test_escape_declarations():
    ruleset = RuleSet('p', 'font-family: "Times New Roman", serif; color: red')
    ruleset.escape_declarations()
    assert ruleset.declarations == {
        'font-family': ("'Times New Roman', serif", False),
        'color': ('red', False),
    }


@assert_no_logs
def test_command_line():
    assert _run('-q -', 'COLOR: red; margin: 0 auto') == (
        'color: red; margin: 0 auto;\n')
    assert _run('-q --expand -', 'margin: 0 auto') == (
        'margin-top: 0; margin-right: auto; '
        'margin-bottom: 0; margin-left: auto;\n')
    assert _run('-q --force-important -', 'color: red') == (
        'color: red !important;\n')
    assert _run('-q --escape -', 'content: "a"') == "content: 'a';\n"


@assert_no_logs
def test_command_line_selectors():
    assert _run('-q -s h1,#title -', 'color: red') == (
        'h1 { color: red; } /* 1 */\n'
        '#title { color: red; } /* 100 */\n')


@assert_no_logs
def test_command_line_files(tmp_path):
    input_path = tmp_path / 'block.css'
    output_path = tmp_path / 'out.css'
    input_path.write_text('padding: 1px 2px 3px', encoding='utf-8')
    assert _run(f'-q -e {input_path} {output_path}') == ''
    assert output_path.read_text(encoding='utf-8') == (
        'padding-top: 1px; padding-right: 2px; '
        'padding-bottom: 3px; padding-left: 2px;\n')


def test_command_line_version(capsys):
    with pytest.raises(SystemExit):
        _run('--version')
    assert 'cssruleset version' in capsys.readouterr().out


def test_command_line_help(capsys):
    with pytest.raises(SystemExit):
        _run('--help')
    out = capsys.readouterr().out
    assert out.startswith('usage: cssruleset')
    for option in ('--selectors', '--expand', '--force-important', '--escape'):
        assert option in out


@assert_no_logs
def test_command_line_keeps_quotes():
    assert _run('-q -', "content: 'a'; *zoom: 1") == "content: 'a'; *zoom: 1;\n"


def test_capture_logs_level():
    with capture_logs() as logs:
        parse_declarations('color red')
        RuleSet('p', 'color: red').declarations_to_string(media='print')
    assert logs == ['WARNING: Unknown option: media.']

    with capture_logs(level=logging.DEBUG) as logs:
        parse_declarations('color red')
    assert logs == ['DEBUG: Ignored declaration at 1:1, `color red`.']
