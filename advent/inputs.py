"""Fetching and caching puzzle inputs."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from pathlib import Path

AOC_BASE_URL = "https://adventofcode.com"
COOKIES_FILE = "cookies.json"
INPUTS_DIR = "inputs"
USER_AGENT = "advent-input-fetcher"
NOT_READY_PREFIX = "Please don't"


class InputError(Exception):
    """Raised when a puzzle input cannot be obtained."""


def input_path(day: int) -> Path:
    """Return the cache path for a day's input, e.g. ``inputs/input02``."""
    return Path(INPUTS_DIR) / f"input{day:02}"


def load_cookies(path: str | Path = COOKIES_FILE) -> dict[str, str]:
    """Load a JSON object mapping cookie names to values."""
    try:
        with open(path, encoding="utf-8") as handle:
            cookies = json.load(handle)
    except OSError as exc:
        raise InputError(f"failed to open cookies file {path}") from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"failed to parse cookies file {path}") from exc
    if not isinstance(cookies, dict) or not all(
        isinstance(name, str) and isinstance(value, str)
        for name, value in cookies.items()
    ):
        raise InputError(f"cookies file {path} must map names to strings")
    return cookies


def fetch_day_input(year: int, day: int) -> Path:
    """Download a day's input unless it is already cached; return its path."""
    path = input_path(day)
    if path.exists():
        return path

    cookies = load_cookies(COOKIES_FILE)
    headers = {"User-Agent": USER_AGENT}
    if cookies:
        headers["Cookie"] = "; ".join(f"{name}={value}" for name, value in cookies.items())
    request = urllib.request.Request(
        f"{AOC_BASE_URL}/{year}/day/{day}/input", headers=headers
    )
    try:
        with urllib.request.urlopen(request) as response:
            body = response.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        if exc.code == 400:
            raise InputError(
                "Not logged into Advent of Code - try updating your session cookie"
            ) from exc
        raise InputError(f"failed to load input URL: HTTP {exc.code}") from exc
    except urllib.error.URLError as exc:
        raise InputError(f"failed to load input URL: {exc.reason}") from exc

    if body.startswith(NOT_READY_PREFIX):
        raise InputError(f"Input for day {day} is not available yet")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body, encoding="utf-8")
    return path