"""
Tests for regconsole/cli/prompts.py - validated operator input.
"""
import pytest

from regconsole.cli.prompts import Prompter


class TestAskText:
    """Tests for Prompter.ask_text."""

    def test_returns_trimmed_value(self, scripted_input, output):
        prompter = Prompter(scripted_input(["  Paris  "]), output)

        assert prompter.ask_text("Enter city: ") == "Paris"
        assert output.lines == []

    def test_reprompts_until_non_empty(self, scripted_input, output):
        read = scripted_input(["", "   ", "Lyon"])
        prompter = Prompter(read, output)

        assert prompter.ask_text("Enter city: ") == "Lyon"
        assert read.prompts == ["Enter city: "] * 3
        assert output.lines == ["Input cannot be empty. Please try again."] * 2


class TestAskInt:
    """Tests for Prompter.ask_int."""

    def test_parses_integer(self, scripted_input, output):
        assert Prompter(scripted_input(["42"]), output).ask_int("Enter age: ") == 42

    def test_reprompts_on_invalid(self, scripted_input, output):
        prompter = Prompter(scripted_input(["forty", "4.5", "", "-3"]), output)

        assert prompter.ask_int("Enter age: ") == -3
        assert output.lines == ["Invalid input. Please enter a valid integer."] * 3

    @pytest.mark.parametrize("too_large", ["2147483648", "-2147483649", "99999999999999999999"])
    def test_reprompts_outside_int32_range(self, scripted_input, output, too_large):
        prompter = Prompter(scripted_input([too_large, "2147483647"]), output)

        assert prompter.ask_int("Enter age: ") == 2147483647
        assert output.lines == ["Invalid input. Please enter a valid integer."]

    def test_accepts_int32_minimum(self, scripted_input, output):
        assert Prompter(scripted_input(["-2147483648"]), output).ask_int("Enter age: ") == -2147483648


class TestAskFloat:
    """Tests for Prompter.ask_float."""

    def test_parses_float(self, scripted_input, output):
        assert Prompter(scripted_input(["48.8566"]), output).ask_float("lat: ") == 48.8566

    def test_no_range_check(self, scripted_input, output):
        assert Prompter(scripted_input(["1000"]), output).ask_float("lat: ") == 1000.0

    def test_reprompts_on_invalid(self, scripted_input, output):
        prompter = Prompter(scripted_input(["north", "2,5", "2.5"]), output)

        assert prompter.ask_float("lat: ") == 2.5
        assert output.lines == ["Invalid input. Please enter a valid decimal number."] * 2


def test_end_of_input_propagates(scripted_input, output):
    with pytest.raises(EOFError):
        Prompter(scripted_input([]), output).ask_text("Enter name: ")
