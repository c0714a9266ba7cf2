import re

import pytest

from drillkit.cli import main


def test_prime(capsys):
    assert main(["prime", "7"]) == 0
    assert capsys.readouterr().out == "7 is a prime number.\n"


def test_not_prime(capsys):
    assert main(["prime", "8"]) == 0
    assert capsys.readouterr().out == "8 is not a prime number.\n"


def test_palindrome(capsys):
    assert main(["palindrome", "radar"]) == 0
    assert capsys.readouterr().out == "The string is a palindrome.\n"


def test_not_palindrome(capsys):
    assert main(["palindrome", "hello"]) == 0
    assert capsys.readouterr().out == "The string is not a palindrome.\n"


@pytest.mark.parametrize("key", [1, 5, 10])
def test_search_default_array_found(capsys, key):
    assert main(["search", str(key)]) == 0
    out = capsys.readouterr().out
    match = re.fullmatch(rf"The key {key} was found at index (\d+)\n", out)
    assert match is not None
    assert list(range(1, 11))[int(match.group(1))] == key


def test_search_not_found(capsys):
    assert main(["search", "42"]) == 0
    assert capsys.readouterr().out == "The key 42 was not found\n"


def test_search_custom_values(capsys):
    values = [3, 8, 15, 23]
    assert main(["search", "15", "--values", *map(str, values)]) == 0
    out = capsys.readouterr().out
    match = re.fullmatch(r"The key 15 was found at index (\d+)\n", out)
    assert match is not None
    assert values[int(match.group(1))] == 15


def test_missing_command():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_non_integer_number():
    with pytest.raises(SystemExit) as exc:
        main(["prime", "seven"])
    assert exc.value.code == 2