"""
Config for minigrep
-------------------
• Two positional arguments: query and file path
• IGNORE_CASE in the environment (or in a .env file) turns on case-insensitive search
"""

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

SCRIPT_DIR = pathlib.Path(__file__).parent.resolve()
IGNORE_CASE_VAR = "IGNORE_CASE"


class GrepError(Exception):
    """Base for all errors minigrep reports to the user."""


class UsageError(GrepError):
    """Missing command-line arguments."""


@dataclass(frozen=True)
class Config:
    query: str
    file_path: str
    ignore_case: bool = False


def load_env() -> None:
    """Loads .env from the script directory first, then from the current directory."""
    script_dir_env = SCRIPT_DIR / ".env"
    current_dir_env = pathlib.Path.cwd() / ".env"

    # override=False: a variable set on the command line beats the .env file
    if script_dir_env.is_file():
        load_dotenv(dotenv_path=script_dir_env, override=False)
    elif current_dir_env.is_file():
        load_dotenv(dotenv_path=current_dir_env, override=False)
    else:
        load_dotenv()


def build_config(args, environ=None) -> Config:
    """
    Builds a Config from an argv-style list (program name first).

    Arguments after the file path are ignored. IGNORE_CASE only has to be
    present; its value is not inspected, so IGNORE_CASE=0 also ignores case.
    """
    if environ is None:
        environ = os.environ

    it = iter(args)
    next(it, None)  # program name

    query = next(it, None)
    if query is None:
        raise UsageError("Didn't get a query string")

    file_path = next(it, None)
    if file_path is None:
        raise UsageError("Didn't get a file path")

    return Config(
        query=query,
        file_path=file_path,
        ignore_case=IGNORE_CASE_VAR in environ,
    )
