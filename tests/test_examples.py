import importlib.util
from pathlib import Path

import pytest

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


def _load(name: str):
    module_spec = importlib.util.spec_from_file_location(f"examples_{name}", EXAMPLES / f"{name}.py")
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def line_parser():
    return _load("line_parser")


class TestLineParser:
    def test_empty_line_keeps_following_chunks(self, line_parser):
        lines, count = line_parser.collect_lines(["a\n\nb", "c\n"])

        assert lines == ["a", "", "bc"]
        assert count == 3

    def test_lines_split_across_chunks(self, line_parser):
        lines, count = line_parser.collect_lines(["alpha\nbe", "ta\ngamma", "\ndelta"])

        assert lines == ["alpha", "beta", "gamma", "delta"]
        assert count == 4

    def test_no_input(self, line_parser):
        assert line_parser.collect_lines([]) == ([], 0)


def test_running_average_prints_means(capsys):
    _load("running_average").main()

    assert capsys.readouterr().out.splitlines() == [
        "after 10: 10.0",
        "after 20: 15.0",
        "after 60: 30.0",
        "final: 30.0",
    ]
