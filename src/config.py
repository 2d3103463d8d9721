from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errors import InputError

BOARD_SIZE_PROMPT = "Please enter the board size: "
ROUNDS_PROMPT = "Please enter the number of rounds: "


class GameConfig(BaseModel):
    """Board size and number of rounds for one run."""

    model_config = ConfigDict(frozen=True, strict=True)

    board_size: int = Field(ge=0)
    rounds: int = Field(ge=0)


def build_config(board_size, rounds):
    try:
        return GameConfig(board_size=board_size, rounds=rounds)
    except ValidationError as exc:
        raise InputError(f"Invalid board size or rounds: {exc}") from exc


class ConfigProvider(Protocol):
    def get_config(self) -> GameConfig: ...


class StaticConfigProvider:
    def __init__(self, board_size, rounds):
        self.config = build_config(board_size, rounds)

    def get_config(self):
        return self.config


def parse_int(text):
    try:
        return int(text.strip())
    except ValueError as exc:
        raise InputError(f"Please enter a number! Got {text!r}") from exc


class ConsoleConfigProvider:
    """Ask for the board size and then the number of rounds."""

    def __init__(self, input_fn=input, output=print):
        self.input_fn = input_fn
        self.output = output

    def _ask(self, prompt):
        self.output(prompt)
        try:
            line = self.input_fn()
        except EOFError as exc:
            raise InputError("Failed to read line") from exc
        return parse_int(line)

    def get_config(self):
        board_size = self._ask(BOARD_SIZE_PROMPT)
        rounds = self._ask(ROUNDS_PROMPT)
        return build_config(board_size, rounds)
