import pytest
from robco.terminal.commands import (
    parse_command, Exit, View, Recommend, ShowAnswer, Help, Guess, Add, Remove,
    CommandError, BlankLine, UnrecognisedCommand, UnexpectedToken, MissingToken,
    MalformedCorrectness,
)


@pytest.mark.parametrize("line,expected", [
    ("exit", Exit()),
    ("view\n", View()),
    ("  recommend  ", Recommend()),
    ("answer", ShowAnswer()),
    ("help", Help()),
    ("guess TIRES 3", Guess("TIRES", 3)),
    ("guess\tTIRES\t0\n", Guess("TIRES", 0)),
    ("add SPIES", Add("SPIES")),
    ("remove SPIES", Remove("SPIES")),
])
def test_parse_command_ok(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line,error", [
    ("", BlankLine),
    ("   \n", BlankLine),
    ("hack", UnrecognisedCommand),
    ("view all", UnexpectedToken),
    ("exit now", UnexpectedToken),
    ("guess", MissingToken),
    ("guess TIRES", MissingToken),
    ("guess TIRES three", MalformedCorrectness),
    ("guess TIRES -1", MalformedCorrectness),
    ("guess TIRES 2 extra", UnexpectedToken),
    ("add", MissingToken),
    ("remove", MissingToken),
    ("add A B", UnexpectedToken),
])
def test_parse_command_errors(line, error):
    with pytest.raises(error):
        parse_command(line)


def test_error_details():
    with pytest.raises(CommandError) as ei:
        parse_command("hack now")
    assert ei.value.name == "hack"
    assert str(ei.value) == "command not recognised: hack"

    with pytest.raises(MissingToken) as ei:
        parse_command("guess TIRES")
    assert ei.value.name == "correctness"

    with pytest.raises(MalformedCorrectness) as ei:
        parse_command("guess TIRES x")
    assert ei.value.text == "x"
