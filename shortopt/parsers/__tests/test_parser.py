#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod
import itertools as itz

import pytest
logging = logmod.root

import shortopt
from shortopt import errors
from shortopt._abstract import ArgParser_i
from shortopt.parsers.compiler import compile_grammar
from shortopt.parsers.parser import ShortOptParser, parse
from shortopt.utils.check_protocol import check_protocol

class TestParserBasics:

    def test_sanity(self):
        assert(True is not False)

    def test_initial(self):
        parser = ShortOptParser("a")
        assert(isinstance(parser, ArgParser_i))
        assert(parser.grammar == compile_grammar("a"))

    def test_str_and_repr(self):
        parser = ShortOptParser("{c|x}[v]f:")
        assert(str(parser) == "{c|x}[v]f:")
        assert("{c|x}[v]f:" in repr(parser))

    def test_bad_grammar_on_construction(self):
        with pytest.raises(errors.GrammarError):
            ShortOptParser("[a")

    def test_callable(self):
        parser = ShortOptParser("a")
        assert(parser(["-a"]) == {"a": ""})

    def test_module_level_parse(self):
        tree = compile_grammar("a:")
        assert(parse(tree, ["-a", "foo"]) == {"a": "foo"})

    def test_package_exports(self):
        parser = shortopt.ShortOptParser("a")
        assert(shortopt.parse(parser.grammar, ["-a"]) == {"a": ""})
        assert(isinstance(shortopt.__version__, str))

    def test_check_protocol_rejects_abstract(self):
        with pytest.raises(NotImplementedError):
            @check_protocol
            class Incomplete(ArgParser_i):
                pass

class TestSingleOption:

    def test_present(self):
        assert(ShortOptParser("a").parse(["-a"]) == {"a": ""})

    def test_missing(self):
        with pytest.raises(errors.ValidationError):
            ShortOptParser("a").parse([])

    def test_duplicate(self):
        with pytest.raises(errors.DuplicateOptionError):
            ShortOptParser("a").parse(["-a", "-a"])

    def test_unexpected_extra(self):
        with pytest.raises(errors.ValidationError):
            ShortOptParser("a").parse(["-a", "-b"])

class TestValueOption:

    def test_separate(self):
        assert(ShortOptParser("a:").parse(["-a", "foo"]) == {"a": "foo"})

    def test_glued(self):
        assert(ShortOptParser("a:").parse(["-afoo"]) == {"a": "foo"})

    def test_missing_value(self):
        with pytest.raises(errors.ValidationError):
            ShortOptParser("a:").parse(["-a"])

    def test_flag_given_a_value(self):
        with pytest.raises(errors.ValidationError):
            ShortOptParser("a").parse(["-a", "foo"])

    def test_unrecognized_token(self):
        with pytest.raises(errors.UnrecognizedTokenError):
            ShortOptParser("a").parse(["foo"])

class TestOptionalGroup:

    def test_absent(self):
        assert(ShortOptParser("[a]").parse([]) == {})

    def test_present(self):
        assert(ShortOptParser("[a]").parse(["-a"]) == {"a": ""})

    def test_partial_group_leaves_leftovers(self):
        parser = ShortOptParser("[ab]")
        with pytest.raises(errors.ValidationError) as ctx:
            parser.parse(["-a"])

        assert(ctx.value.leftover == {"a": ""})

    def test_full_group(self):
        assert(ShortOptParser("[ab:]").parse(["-a", "-b", "x"]) == {"a": "", "b": "x"})

class TestChoiceGroup:

    def test_first(self):
        assert(ShortOptParser("{a|b}").parse(["-a"]) == {"a": ""})

    def test_second(self):
        assert(ShortOptParser("{a|b}").parse(["-b"]) == {"b": ""})

    def test_neither(self):
        with pytest.raises(errors.ValidationError):
            ShortOptParser("{a|b}").parse([])

    def test_both(self):
        with pytest.raises(errors.ValidationError) as ctx:
            ShortOptParser("{a|b}").parse(["-a", "-b"])

        assert(ctx.value.leftover == {"b": ""})

    def test_declaration_order_fails(self):
        with pytest.raises(errors.ValidationError):
            ShortOptParser("{a|ab}").parse(["-a", "-b"])

    def test_declaration_order_succeeds(self):
        assert(ShortOptParser("{ab|a}").parse(["-a", "-b"]) == {"a": "", "b": ""})

class TestComplexGrammar:

    @pytest.fixture(scope="function")
    def tar(self):
        return ShortOptParser("{c|x|t}[v]f:")

    def test_minimal(self, tar):
        assert(tar.parse(["-x", "-f", "a.tar"]) == {"x": "", "f": "a.tar"})

    def test_full(self, tar):
        assert(tar.parse(["-c", "-v", "-fa.tar"]) == {"c": "", "v": "", "f": "a.tar"})

    def test_any_order(self, tar):
        assert(tar.parse(["-fa.tar", "-v", "-t"]) == {"f": "a.tar", "v": "", "t": ""})

    def test_two_modes(self, tar):
        with pytest.raises(errors.ValidationError):
            tar.parse(["-c", "-x", "-f", "a.tar"])

    def test_missing_file(self, tar):
        with pytest.raises(errors.ValidationError):
            tar.parse(["-c"])

    def test_result_keeps_input_order(self, tar):
        assert(list(tar.parse(["-v", "-f", "a.tar", "-x"])) == ["v", "f", "x"])

    def test_reusable(self, tar):
        first  = tar.parse(["-x", "-f", "a.tar"])
        second = tar.parse(["-t", "-f", "b.tar"])
        assert(first == {"x": "", "f": "a.tar"})
        assert(second == {"t": "", "f": "b.tar"})

    def test_failed_parse_doesnt_affect_next(self, tar):
        with pytest.raises(errors.ValidationError):
            tar.parse(["-c", "-x"])

        assert(tar.parse(["-c", "-f", "a.tar"]) == {"c": "", "f": "a.tar"})

class TestBehaviouralEquality:

    CANDIDATES = [[], ["-a"], ["-b"], ["-c", "v"], ["-a", "-c", "v"], ["-b", "-d"], ["-a", "-b", "-d"]]

    @pytest.mark.parametrize("spec", ["{a|b[d]}[c:]", "a[b]{c:|d}", "[a][b][c:][d]"])
    def test_compiled_twice_behaves_the_same(self, spec):
        first  = ShortOptParser(spec)
        second = ShortOptParser(spec)
        for args in self.CANDIDATES:
            results = []
            for parser in (first, second):
                try:
                    results.append(parser.parse(args))
                except errors.ParseError as err:
                    results.append(type(err))

            assert(results[0] == results[1]), args

    def test_optional_chain_accepts_all_subsets(self):
        parser = ShortOptParser("[a][b][c]")
        for count in range(4):
            for combo in itz.combinations("abc", count):
                args = [f"-{x}" for x in combo]
                assert(parser.parse(args) == {x: "" for x in combo})
