import pytest

from minitools.hello import greet, main


def test_greet_formats_name():
    assert greet("Alice") == "Hello, Alice!"


@pytest.mark.parametrize("name", ["Bob", "", "two words", "Zoë"])
def test_greet_wraps_name(name):
    result = greet(name)
    assert result.startswith("Hello, ")
    assert result.endswith("!")
    assert result[len("Hello, "):-1] == name


def test_main_without_arguments_greets_world(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello, world!\n"


def test_main_uses_first_argument_only(capsys):
    assert main(["Carol", "ignored"]) == 0
    assert capsys.readouterr().out == greet("Carol") + "\n"