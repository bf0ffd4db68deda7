from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

TOKEN_ENV_VAR = "GITHUB_PAT"


def load_env_file() -> None:
    # A missing or unreadable .env is not an error.
    try:
        load_dotenv(find_dotenv(usecwd=True))
    except (OSError, UnicodeDecodeError):
        pass


def load_token(environ: Mapping[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_ENV_VAR)
    if not token:
        raise ConfigError(f"{TOKEN_ENV_VAR} environment variable is not set.")
    return token


@dataclass(frozen=True)
class RepoTarget:
    owner: str
    repo: str

    @property
    def issues_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/issues"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


DEFAULT_TARGET = RepoTarget("freeCodeCamp", "freeCodeCamp")
