"""Named connectivity targets parsed from `name=url` arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Target:
    name: str = ""
    url: str = ""
    status: str = ""
    latency: float = 0.0
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


def parse_target_arg(text: str) -> Target:
    """Split `name=url` on the first `=`.

    Arguments without `=` yield an empty target, which later fails as an
    invalid URL.
    """
    name, sep, url = text.partition("=")
    if not sep:
        return Target()
    return Target(name=name, url=url)


def parse_target_args(values: list[str]) -> list[Target]:
    return [parse_target_arg(value) for value in values]
