"""
Self-test harness tests: vector table, table rendering, CLI behavior.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pytest
from digit_arith.selftest import (
    TEST_VECTORS, TestVector, VectorResult,
    run_vectors, count_failures, format_table,
)
from digit_arith.log_setup import setup_logging, level_from_env
import digit_selftest


HEADER = ("arg            exp result m   result m       "
          "exp result x   result x      ")
RULE = " ".join(["-" * 14] * 5)
BLANK = " " * 14


class TestVectors:
    def test_all_builtin_vectors_pass(self):
        results = run_vectors()
        assert len(results) == len(TEST_VECTORS) == 4
        assert count_failures(results) == 0
        assert all(r.m_ok and r.x_ok for r in results)

    def test_mismatch_detected(self, caplog):
        bad = TestVector(0x0, 0x0000000000001, 0x00000000000001)
        with caplog.at_level(logging.WARNING, logger="digit_arith.selftest"):
            results = run_vectors([bad])
        assert results[0].failed
        assert not results[0].m_ok
        assert results[0].x_ok
        assert results[0].result_m == 0x1000
        assert "add_one_bcd_m" in caplog.text


class TestTable:
    def test_passing_table(self):
        lines = format_table(run_vectors())
        assert lines[0] == HEADER
        assert lines[1] == RULE
        assert lines[2] == " ".join(["00000000000000", "00000000001000", BLANK,
                                     "00000000000001", BLANK])
        assert lines[5] == " ".join(["f006a0000000ab", "f00700000010ab", BLANK,
                                     "f006a000000012", BLANK])
        assert lines[-2] == ""
        assert lines[-1] == "0 test cases have failure(s)."
        assert len(lines) == 2 + 4 + 2

    def test_mismatch_shows_actual_value(self):
        vector = TestVector(0x9009, 0x10009, 0x1)
        lines = format_table([VectorResult(vector, 0x10009, 0x9010)])
        row = lines[2]
        assert row == " ".join(["00000000009009", "00000000010009", BLANK,
                                "00000000000001", "00000000009010"])
        assert lines[-1] == "1 test cases have failure(s)."

    def test_column_widths(self):
        for line in format_table(run_vectors())[:6]:
            assert len(line) == 5 * 14 + 4


class TestCommandLine:
    def test_no_arguments_prints_table(self, capsys):
        assert digit_selftest.main([]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == HEADER
        assert out[-1] == "0 test cases have failure(s)."

    @pytest.mark.parametrize("argv", [["foo"], ["-h"], ["--verbose"]])
    def test_any_argument_is_an_error(self, capsys, argv):
        with pytest.raises(SystemExit) as exc:
            digit_selftest.main(argv)
        assert exc.value.code != 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "usage:" in captured.err

    def test_mismatches_do_not_fail(self, capsys, monkeypatch):
        wrong = (TestVector(0x0, 0x2, 0x2),)
        monkeypatch.setattr(digit_selftest, "run_vectors",
                            lambda: run_vectors(wrong))
        assert digit_selftest.main([]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == \
            "1 test cases have failure(s)."


class TestLogging:
    def test_setup_is_idempotent(self, tmp_path):
        log_file = tmp_path / "logs" / "selftest.log"
        logger = setup_logging("digit_arith.test_idem", "INFO", log_file)
        count = len(logger.handlers)
        again = setup_logging("digit_arith.test_idem", "INFO", log_file)
        assert again is logger
        assert len(again.handlers) == count == 2
        logger.info("hello")
        for h in logger.handlers:
            h.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("DIGIT_ARITH_LOG_LEVEL", "debug")
        assert level_from_env() == logging.DEBUG
        monkeypatch.setenv("DIGIT_ARITH_LOG_LEVEL", "15")
        assert level_from_env() == 15
        monkeypatch.setenv("DIGIT_ARITH_LOG_LEVEL", "nonsense")
        assert level_from_env() == logging.WARNING
        monkeypatch.delenv("DIGIT_ARITH_LOG_LEVEL")
        assert level_from_env() == logging.WARNING
