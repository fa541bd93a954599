#!/usr/bin/env python3
"""
Comment stripping, whitespace stripping and structural checks.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfstrict import BFSyntaxError, sanitize, strip_comments


def test_whitespace_is_removed():
    assert sanitize("+ +\n\t>\r\n-") == "++>-"


def test_line_comment_is_removed():
    assert sanitize("+// move [ right ] .\n-") == "+-"


def test_line_comment_at_end_of_file():
    assert sanitize("+-// trailing") == "+-"


def test_block_comment_is_removed():
    assert sanitize("+/* [[[ \n ]] , */-") == "+-"


def test_several_block_comments():
    assert sanitize("/* a */+/* b */-/* c */") == "+-"


def test_comment_content_never_reaches_output():
    plain = "++[>+<-]>."
    commented = "++ /* two */ [>+<-] // move\n >. /* print [ */"
    assert sanitize(commented) == plain


def test_unknown_characters_survive():
    # Rejected later by the interpreter, not here.
    assert sanitize("abc+") == "abc+"


def test_strip_comments_does_not_validate():
    assert strip_comments("[[ // no closing\n") == "[["


def test_unterminated_block_comment_position():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("++/* oops")
    assert exc.value.position == 2
    assert "unterminated multi-line comments" in exc.value.message


def test_unterminated_block_comment_after_closed_one():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("+/* a */ /* b")
    assert exc.value.position == 9


def test_stray_close_marker_position():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("+ */")
    assert exc.value.position == 2
    assert "stray comment characters" in exc.value.message


def test_line_comment_can_hide_block_close():
    # "//" is stripped first, taking the "*/" with it.
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("/* // */\n+")
    assert exc.value.position == 0


def test_unterminated_loop_reports_first_entry():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("// [\n+[[-]")
    # The commented "[" at offset 3 is not an instruction.
    assert exc.value.position == 6
    assert "unterminated while loops" in exc.value.message


def test_trailing_loop_exit_reports_last_exit():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("[-]]+ // ]")
    assert exc.value.position == 3
    assert "trailing while loop" in exc.value.message


def test_only_counts_are_checked():
    assert sanitize("][") == "]["


def test_error_context_points_at_column():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("+\n  -/* open")
    err = exc.value
    assert err.position == 5
    assert ">    2 |   -/* open" in err.context
    assert "       |    ^" in err.context
    assert err.hint is not None


def test_error_string():
    with pytest.raises(BFSyntaxError) as exc:
        sanitize("[")
    assert str(exc.value).startswith("SyntaxError: at position 0 - ")
    assert exc.value.describe().startswith(str(exc.value))
    assert "Hint:" in exc.value.describe()
