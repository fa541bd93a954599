#!/usr/bin/env python3
"""
Command line wrapper.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfstrict.cli import main


def write_program(tmp_path, code, name="prog.bf"):
    path = tmp_path / name
    path.write_text(code, encoding="utf-8")
    return str(path)


def test_runs_program(tmp_path, capsys):
    path = write_program(tmp_path, "++++++++[>+++++++++<-]>.+.")
    assert main([path, "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "HI" in out
    assert "No output provided." not in out


def test_no_output_notice(tmp_path, capsys):
    path = write_program(tmp_path, "+")
    assert main([path, "--no-color"]) == 0
    assert "No output provided." in capsys.readouterr().out


def test_debug_prints_memory(tmp_path, capsys):
    path = write_program(tmp_path, ">>+++<")
    assert main([path, "-d", "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "Memory Breakdown" in out
    assert "      2 - [3]" in out
    assert "ptr => 1" in out


def test_runtime_error_exit_code(tmp_path, capsys):
    path = write_program(tmp_path, "+--")
    assert main([path, "--no-color"]) == 1
    out = capsys.readouterr().out
    assert "SubZeroError: at position 2 - cannot decrement memory block below 0." in out
    assert "Hint:" in out


def test_syntax_error_shows_context(tmp_path, capsys):
    path = write_program(tmp_path, "+\n[-\n")
    assert main([path, "--no-color"]) == 1
    out = capsys.readouterr().out
    assert "SyntaxError: at position 2" in out
    assert ">    2 | [-" in out


def test_wrong_extension(tmp_path, capsys):
    path = write_program(tmp_path, "+", name="prog.txt")
    assert main([path, "--no-color"]) == 1
    assert "FileLoadError" in capsys.readouterr().out


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "binary.bf"
    path.write_bytes(b"+++\xff\xfe.")
    assert main([str(path), "--no-color"]) == 1
    assert "FileLoadError: file is not valid utf-8 text" in capsys.readouterr().out


def test_too_many_arguments(tmp_path, capsys):
    path = write_program(tmp_path, "+")
    assert main([path, "extra", "--no-color"]) == 1
    captured = capsys.readouterr()
    assert "ArgumentError: unrecognized arguments: extra." in captured.out
    assert "quotation marks" in captured.out
    assert "\033[" not in captured.out
    assert captured.err == ""


def test_unknown_flag_is_colored(capsys):
    assert main(["prog.bf", "--trace"]) == 1
    out = capsys.readouterr().out
    assert "\033[31mArgumentError: unrecognized arguments: --trace." in out


def test_no_arguments_prints_help(capsys):
    assert main([]) == 0
    assert "usage: bfstrict" in capsys.readouterr().out
