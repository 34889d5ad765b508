from __future__ import annotations

import io

from word_index.index import build_index
from word_index.session import PROMPT, InteractiveSession, read_tokens

SAMPLE = ["the quick fox", "the lazy fox", "the end"]


def test_read_tokens_spans_lines_and_skips_blank_lines() -> None:
    tokens = list(read_tokens(io.StringIO("fox\n\n  the  lazy \n")))

    assert tokens == ["fox", "the", "lazy"]


def test_session_reports_then_quits_on_q() -> None:
    session = InteractiveSession(build_index(SAMPLE))
    out = io.StringIO()

    answered = session.serve(in_stream=io.StringIO("fox\nq\nthe\n"), out_stream=out)

    assert answered == 1
    assert out.getvalue() == (
        PROMPT
        + "fox occurs 2 times\n"
        + "\t(line 1) the quick fox\n"
        + "\t(line 2) the lazy fox\n"
        + "\n"
        + PROMPT
    )


def test_session_stops_at_end_of_input() -> None:
    session = InteractiveSession(build_index(SAMPLE))
    out = io.StringIO()

    answered = session.serve(in_stream=io.StringIO("zzz"), out_stream=out)

    assert answered == 1
    assert out.getvalue() == PROMPT + "zzz occurs 0 times\n\n" + PROMPT


def test_session_consumes_several_tokens_from_one_line() -> None:
    session = InteractiveSession(build_index(SAMPLE))
    out = io.StringIO()

    answered = session.serve(in_stream=io.StringIO("end lazy q\n"), out_stream=out)

    assert answered == 2
    assert out.getvalue().count(PROMPT) == 3
    assert "end occurs 1 time\n\t(line 3) the end\n\n" in out.getvalue()
    assert "lazy occurs 1 time\n\t(line 2) the lazy fox\n\n" in out.getvalue()


def test_session_with_empty_input_only_prompts_once() -> None:
    session = InteractiveSession(build_index(SAMPLE))
    out = io.StringIO()

    assert session.serve(in_stream=io.StringIO(""), out_stream=out) == 0
    assert out.getvalue() == PROMPT


def test_quit_token_must_match_exactly() -> None:
    session = InteractiveSession(build_index(["Q q quit"]))
    out = io.StringIO()

    answered = session.serve(in_stream=io.StringIO("Q quit q"), out_stream=out)

    assert answered == 2
    assert "Q occurs 1 time" in out.getvalue()
    assert "quit occurs 1 time" in out.getvalue()
