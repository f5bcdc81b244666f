import io

import pytest

from hexbench.wordfreq import (
    UsageError,
    count_words,
    format_number,
    help_text,
    main,
    parse_args,
    rank_words,
    report,
)


@pytest.mark.parametrize("n", [0, 7, 42, 999])
def test_format_small_numbers_unchanged(n):
    assert format_number(n) == str(n)


def test_format_large_number():
    assert format_number(1234567) == "1,234,567"


@pytest.mark.parametrize("n", [1000, 65536, 10**9, 123456789012])
def test_format_number_roundtrip(n):
    formatted = format_number(n)
    assert int(formatted.replace(",", "")) == n
    groups = formatted.split(",")
    assert all(len(g) == 3 for g in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_count_splits_on_non_alphanumerics():
    counts = count_words("a-b a,,b; a")
    assert counts == {"a": 3, "b": 2}


def test_count_case_sensitive_by_default():
    counts = count_words("Go go GO")
    assert set(counts) == {"Go", "go", "GO"}


def test_count_ignore_case():
    assert count_words("Go go GO", ignore_case=True) == {"go": 3}


def test_count_min_length():
    counts = count_words("a bb ccc bb", min_length=2)
    assert "a" not in counts
    assert counts["bb"] == 2
    assert counts["ccc"] == 1


def test_count_unicode_letters():
    counts = count_words("café café naïve")
    assert counts["café"] == 2
    assert counts["naïve"] == 1


def test_rank_orders_by_count_then_word():
    ranked = rank_words({"b": 2, "a": 2, "c": 5, "d": 1})
    assert [w for w, _ in ranked] == ["c", "a", "b", "d"]


def test_report_default_header():
    lines = report({"x": 1})
    assert lines[0] == "Word frequency:"
    assert lines[1:] == ["x: 1"]


def test_report_custom_top():
    counts = {"a": 3, "b": 2, "c": 1}
    lines = report(counts, top_n=2)
    assert lines[0] == "Top 2 words:"
    assert lines[1:] == ["a: 3", "b: 2"]


def test_parse_args_collects_text():
    options = parse_args(["--top", "3", "hello", "--ignore-case", "world"])
    assert options.top == 3
    assert options.ignore_case is True
    assert options.text_parts == ["hello", "world"]


@pytest.mark.parametrize("flag", ["--top", "--min-length"])
def test_parse_args_missing_value(flag):
    with pytest.raises(UsageError, match=f"Missing value for {flag}"):
        parse_args([flag])


@pytest.mark.parametrize("flag", ["--top", "--min-length"])
def test_parse_args_bad_value(flag):
    with pytest.raises(UsageError, match=f"{flag} expects a positive integer"):
        parse_args([flag, "0"])


def test_parse_args_unknown():
    with pytest.raises(UsageError, match="Unknown option: -x") as info:
        parse_args(["-x"])
    assert info.value.hint is True


def test_main_with_arguments(capsys):
    assert main(["the", "cat", "the"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Word frequency:", "the: 2", "cat: 1"]


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Dog dog\ncat"))
    assert main(["--ignore-case", "--top", "1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Top 1 words:", "dog: 2"]


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert capsys.readouterr().out.strip() == help_text()


def test_main_usage_error(capsys):
    assert main(["--top", "abc"]) == 2
    assert "--top expects a positive integer" in capsys.readouterr().err