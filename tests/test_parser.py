"""Tests for the command-line front end and backend detection."""

from __future__ import annotations

import argparse
import importlib.util

import pytest

from solver_options.config.environment import gurobi_enabled
from solver_options.config.parser import OptionParser
from solver_options.domain.identifiers import OptionId
from solver_options.domain.protocols import CapabilityProbe, OptionParserProtocol
from solver_options.domain.strategies import DivideStrategy


# =====================================================================
# Argument parsing
# =====================================================================


class TestOptionParser:
    """Flags on the command line become writes on the bound store."""

    def test_satisfies_protocol(self, options):
        assert isinstance(OptionParser(options), OptionParserProtocol)

    def test_no_arguments_keeps_defaults(self, options):
        OptionParser(options).parse([])
        assert options.get_int(OptionId.NUM_WORKERS) == 1
        assert options.get_bool(OptionId.DNC_MODE) is False
        assert options.get_string(OptionId.INPUT_FILE_PATH) == ""

    def test_positionals(self, options):
        OptionParser(options).parse(["net.nnet", "prop.txt"])
        assert options.get_string(OptionId.INPUT_FILE_PATH) == "net.nnet"
        assert options.get_string(OptionId.PROPERTY_FILE_PATH) == "prop.txt"

    def test_scalar_flags(self, options):
        OptionParser(options).parse([
            "--dnc",
            "--num-workers", "8",
            "--timeout-factor", "2.5",
            "--preprocessor-bound-tolerance", "1e-6",
            "--summary-file", "out.txt",
        ])
        assert options.get_bool(OptionId.DNC_MODE) is True
        assert options.get_int(OptionId.NUM_WORKERS) == 8
        assert options.get_float(OptionId.TIMEOUT_FACTOR) == 2.5
        assert options.get_float(OptionId.PREPROCESSOR_BOUND_TOLERANCE) == 1e-6
        assert options.get_string(OptionId.SUMMARY_FILE) == "out.txt"

    def test_strategy_strings_pass_through(self, options):
        OptionParser(options).parse([
            "--split-strategy", "not-a-strategy",
            "--milp-tightening", "milp-inc",
        ])
        assert options.get_string(OptionId.SPLITTING_STRATEGY) == "not-a-strategy"
        assert options.get_divide_strategy() is DivideStrategy.AUTO
        assert (
            options.get_string(OptionId.MILP_SOLVER_BOUND_TIGHTENING_TYPE)
            == "milp-inc"
        )

    def test_absent_flags_preserve_programmatic_values(self, options):
        options.set_int(OptionId.TIMEOUT, 60)
        OptionParser(options).parse(["--verbosity", "0"])
        assert options.get_int(OptionId.TIMEOUT) == 60
        assert options.get_int(OptionId.VERBOSITY) == 0

    def test_bad_int_exits(self, options):
        with pytest.raises(SystemExit):
            OptionParser(options).parse(["--num-workers", "many"])
        assert options.get_int(OptionId.NUM_WORKERS) == 1

    def test_apply_ignores_unrelated_attributes(self, options):
        namespace = argparse.Namespace(debug=True, num_workers=3)
        OptionParser(options).apply(namespace)
        assert options.get_int(OptionId.NUM_WORKERS) == 3

    def test_help_lists_flags(self, options):
        text = OptionParser(options).format_help()
        for flag in ("--num-workers", "--split-strategy", "--milp-tightening"):
            assert flag in text

    def test_store_parse_options(self, options):
        options.parse_options(["--restore-tree-states", "--initial-divides", "4"])
        assert options.get_bool(OptionId.RESTORE_TREE_STATES) is True
        assert options.get_int(OptionId.NUM_INITIAL_DIVIDES) == 4
        assert options.parser is options.parser

    def test_store_print_help(self, options, capsys):
        options.print_help_message()
        assert "--snc-split-strategy" in capsys.readouterr().out


# =====================================================================
# Backend detection
# =====================================================================


class TestGurobiDetection:
    """``gurobi_enabled`` reflects whether ``gurobipy`` can be found."""

    def test_is_capability_probe(self):
        assert isinstance(gurobi_enabled, CapabilityProbe)

    def test_missing_module(self, monkeypatch):
        monkeypatch.setattr(importlib.util, "find_spec", lambda name: None)
        assert gurobi_enabled() is False

    def test_present_module(self, monkeypatch):
        monkeypatch.setattr(importlib.util, "find_spec", lambda name: object())
        assert gurobi_enabled() is True

    def test_broken_module_treated_as_missing(self, monkeypatch):
        def _raise(name):
            raise ValueError("gurobipy.__spec__ is None")

        monkeypatch.setattr(importlib.util, "find_spec", _raise)
        assert gurobi_enabled() is False

    def test_result_cached(self, monkeypatch):
        calls = []

        def _spec(name):
            calls.append(name)
            return None

        monkeypatch.setattr(importlib.util, "find_spec", _spec)
        gurobi_enabled()
        gurobi_enabled()
        assert calls == ["gurobipy"]
