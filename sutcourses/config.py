"""Application settings read from the environment and an optional .env file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum

from dotenv import find_dotenv, load_dotenv

_PORT_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_PORT = 65535


class ConfigError(Exception):
    """Raised when the environment does not hold a usable configuration."""


class Stage(Enum):
    """Deployment stage of the service."""

    LOCAL = "Local"
    DEVELOPMENT = "Development"
    PRODUCTION = "Prodcution"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "Stage":
        """Return the stage named by ``value``; raise ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError("Invalid stage") from None


@dataclass(frozen=True)
class ServerConfig:
    course_reg_url: str
    port: int


@dataclass(frozen=True)
class AppConfig:
    server: ServerConfig


def _load_env_file() -> None:
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)


def _require(name: str) -> str:
    value = os.environ.get(name)
    if value is None:
        raise ConfigError(f"{name} is invalid")
    return value


def _parse_port(text: str) -> int:
    if not _PORT_PATTERN.fullmatch(text) or int(text) > _MAX_PORT:
        raise ConfigError(f"invalid SERVER_PORT: {text!r}")
    return int(text)


def load_config() -> AppConfig:
    """Build the configuration from COURSE_REG_URL and SERVER_PORT."""
    _load_env_file()
    course_reg_url = _require("COURSE_REG_URL")
    port = _parse_port(_require("SERVER_PORT"))
    return AppConfig(server=ServerConfig(course_reg_url=course_reg_url, port=port))


def get_stage() -> Stage:
    """Return the stage named by STAGE, falling back to development."""
    _load_env_file()
    try:
        return Stage.parse(os.environ.get("STAGE", ""))
    except ValueError:
        return Stage.DEVELOPMENT