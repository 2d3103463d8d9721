import pytest
from pydantic import ValidationError

from config import (
    BOARD_SIZE_PROMPT,
    ROUNDS_PROMPT,
    ConsoleConfigProvider,
    GameConfig,
    StaticConfigProvider,
    build_config,
    parse_int,
)
from errors import InputError


def make_input(*lines):
    answers = iter(lines)

    def input_fn():
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    return input_fn


def silent(_):
    pass


@pytest.mark.parametrize('text, expected', [('5', 5), (' 12 \n', 12), ('0', 0)])
def test_parse_valid(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize('text', ['', '   ', 'abc', '3.5'])
def test_parse_invalid(text):
    with pytest.raises(InputError):
        parse_int(text)


def test_console_provider_prompts_in_order():
    prompts = []
    provider = ConsoleConfigProvider(input_fn=make_input('10', '4'), output=prompts.append)
    assert provider.get_config() == GameConfig(board_size=10, rounds=4)
    assert prompts == [BOARD_SIZE_PROMPT, ROUNDS_PROMPT]


def test_console_provider_bad_rounds():
    provider = ConsoleConfigProvider(input_fn=make_input('10', 'many'), output=silent)
    with pytest.raises(InputError):
        provider.get_config()


def test_console_provider_negative_size():
    provider = ConsoleConfigProvider(input_fn=make_input('-1', '4'), output=silent)
    with pytest.raises(InputError):
        provider.get_config()


def test_console_provider_missing_input():
    provider = ConsoleConfigProvider(input_fn=make_input('10'), output=silent)
    with pytest.raises(InputError):
        provider.get_config()


def test_static_provider():
    assert StaticConfigProvider(3, 2).get_config() == GameConfig(board_size=3, rounds=2)


def test_static_provider_rejects_negative():
    with pytest.raises(InputError):
        StaticConfigProvider(-1, 2)


@pytest.mark.parametrize('board_size, rounds', [(-1, 2), (3, -1), ('5', 2), (3, None), (2.0, 1)])
def test_game_config_validation(board_size, rounds):
    with pytest.raises(ValidationError):
        GameConfig(board_size=board_size, rounds=rounds)


def test_build_config_wraps_validation_error():
    with pytest.raises(InputError) as excinfo:
        build_config('5', 2)
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_game_config_is_frozen():
    config = GameConfig(board_size=3, rounds=2)
    with pytest.raises(ValidationError):
        config.rounds = 5
