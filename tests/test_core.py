import datetime

from todotxt.core import (
    date_prefix,
    format_sequence,
    parse_all,
    parse_task,
    sanitize_input,
)


def test_parse_all_skips_blank_lines_without_breaking_numbering():
    text = "first task\n\n   \nsecond task\n\nthird task\n"

    tasks = parse_all(text)

    assert [t.sequence for t in tasks] == [1, 2, 3]
    assert [t.text for t in tasks] == ["first task", "second task", "third task"]


def test_parse_all_tolerates_crlf_and_surrounding_whitespace():
    tasks = parse_all("  call mom @phone  \r\nwater plants\r\n")

    assert len(tasks) == 2
    assert tasks[0].raw == "call mom @phone"
    assert tasks[0].text == "call mom @phone"
    assert tasks[1].text == "water plants"


def test_parse_all_empty_input():
    assert parse_all("") == []
    assert parse_all("\n\n  \n") == []


def test_parse_all_keeps_comment_lines_by_default():
    tasks = parse_all("# not a comment here\nreal task\n")

    assert len(tasks) == 2
    assert tasks[0].text == "# not a comment here"


def test_parse_all_skips_comment_lines_when_asked():
    tasks = parse_all("# header\nreal task\n#another\nsecond\n", comment="#")

    assert [(t.sequence, t.text) for t in tasks] == [(1, "real task"), (2, "second")]


def test_parse_task_extracts_contexts_and_projects_in_order():
    task = parse_task(
        "Buy food @petshop with taurine +BellyOfTheBeast @grocery +Cat @petshop", 7
    )

    assert task.sequence == 7
    assert task.contexts == ["@petshop", "@grocery", "@petshop"]
    assert task.projects == ["+BellyOfTheBeast", "+Cat"]
    assert task.completed is False


def test_parse_task_keeps_tags_in_text():
    task = parse_task("(A) 2014-05-01 Vacuum the house +cleaning", 1)

    assert task.text == "(A) 2014-05-01 Vacuum the house +cleaning"
    assert task.projects == ["+cleaning"]
    assert task.contexts == []


def test_parse_task_only_matches_leading_prefix():
    task = parse_task("email bob@example.com about a+b", 1)

    assert task.contexts == []
    assert task.projects == []


def test_parse_task_preserves_case():
    task = parse_task("meet @Office and @office +Work", 1)

    assert task.contexts == ["@Office", "@office"]
    assert task.projects == ["+Work"]


def test_sanitize_input_strips_quotes_and_whitespace():
    assert sanitize_input('  "Buy eggs and milk @grocery"  \n') == "Buy eggs and milk @grocery"


def test_sanitize_input_collapses_tabs_and_double_spaces():
    assert sanitize_input("a\tb  c\rd") == "a b c d"


def test_sanitize_input_empty():
    assert sanitize_input("   ") == ""


def test_date_prefix():
    assert date_prefix("pay rent", datetime.date(2014, 3, 9)) == "2014-03-09 pay rent"


def test_format_sequence_pads_to_total_width():
    assert format_sequence(3, 9) == "3"
    assert format_sequence(3, 12) == "03"
    assert format_sequence(42, 120) == "042"
    assert format_sequence(120, 120) == "120"


def test_parse_all_only_breaks_on_newline():
    tasks = parse_all("a\x0cb\nc d\r\ne\rf\n")

    assert [t.text for t in tasks] == ["a\x0cb", "c d", "e\rf"]
