import dataclasses

import pytest

from minire import code_gen, compiler, parser, syntax
from minire.errors import CompileError, InvalidQuantifierPosition
from minire.instruction import Any, AtLeast, AtMost, Final, Literal, Repeat

def test_compile_instructions():
    pattern = compiler.compile_regex("abc.*[]+")
    assert pattern.instructions == (
        Literal('a'), Literal('b'), Literal('c'),
        AtLeast(0), Any(),
        Literal('['),
        AtLeast(1), Literal(']'),
        Final())

@pytest.mark.parametrize("regex,expected", [
    ("", (Final(),)),
    ("a?", (AtMost(1), Literal('a'), Final())),
    (".+x", (AtLeast(1), Any(), Literal('x'), Final())),
    ("a?b*c+", (AtMost(1), Literal('a'), AtLeast(0), Literal('b'), AtLeast(1), Literal('c'), Final())),
    ("é😀", (Literal('é'), Literal('😀'), Final()))])
def test_compile_small_patterns(regex: str, expected: tuple):
    assert compiler.compile_regex(regex).instructions == expected

@pytest.mark.parametrize("regex,position,quantifier", [
    ("*abc", 0, '*'),
    ("+", 0, '+'),
    ("?a", 0, '?'),
    ("ab++", 3, '+'),
    ("a?+", 2, '+'),
    ("abc.[]+?", 7, '?'),
    ("a**", 2, '*')])
def test_invalid_quantifier_position(regex: str, position: int, quantifier: str):
    with pytest.raises(InvalidQuantifierPosition) as exc_info:
        compiler.compile_regex(regex)
    assert isinstance(exc_info.value, CompileError)
    assert exc_info.value.position == position
    assert exc_info.value.quantifier == quantifier
    assert str(exc_info.value) == f"invalid quantifier position: '{quantifier}' at {position}"

def test_compile_is_repeatable():
    first = compiler.compile_regex("ab*.?c+")
    second = compiler.compile_regex("ab*.?c+")
    assert first == second
    assert first.steps == second.steps
    assert hash(first) == hash(second)

def test_pattern_is_immutable():
    pattern = compiler.compile_regex("abc")
    with pytest.raises(dataclasses.FrozenInstanceError):
        pattern.instructions = ()

def test_parse_wraps_quantified_atoms():
    assert parser.parse("a.*b+c?") == [
        syntax.Literal('a'),
        syntax.Star(syntax.WildCard()),
        syntax.Some(syntax.Literal('b')),
        syntax.Option(syntax.Literal('c'))]

def test_link_fuses_quantifiers():
    pattern = compiler.compile_regex("a*b.?")
    assert pattern.steps == (
        Repeat(AtLeast(0), Literal('a')),
        Literal('b'),
        Repeat(AtMost(1), Any()),
        Final())

@pytest.mark.parametrize("code", [
    [AtLeast(1), Final()],
    [AtMost(1), AtLeast(0), Literal('a'), Final()],
    [Literal('a')],
    []])
def test_link_rejects_malformed_code(code: list):
    with pytest.raises(AssertionError):
        code_gen.link(code)

def test_code_gen_rejects_unknown_construction():
    with pytest.raises(AssertionError):
        code_gen.compile([syntax.Construction()])

@pytest.mark.parametrize("regex,expected", [
    ("ab+", "# regex: ab+\nLiteral a\nAtLeast 1\nLiteral b\nFinal"),
    ("", "# regex: \nFinal"),
    (".?", "# regex: .?\nAtMost 1\nAny\nFinal")])
def test_compile_wrapper(regex: str, expected: str):
    assert compiler.compile_wrapper(regex) == expected

@pytest.mark.parametrize("step,expected", [
    (Repeat(AtLeast(0), Literal('a')), "AtLeast 0\nLiteral a"),
    (Repeat(AtMost(1), Any()), "AtMost 1\nAny")])
def test_repeat_code(step: Repeat, expected: str):
    assert step.code() == expected

def test_compile_error_without_position():
    error = CompileError("bad regex")
    assert error.position is None
    assert str(error) == "bad regex"
