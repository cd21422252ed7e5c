from __future__ import annotations

import re
from dataclasses import dataclass

_SCORE_RE = re.compile(r"(\d+):(\d+)", re.ASCII)


@dataclass(frozen=True)
class Score:
    home: int
    away: int


class ParseError(ValueError):
    """
    Строка счёта не в формате "<голы хозяев>:<голы гостей>".
    user — чей прогноз не разобрался (None, если это итоговый счёт).
    """

    def __init__(self, raw: object, user: str | None = None) -> None:
        self.raw = raw
        self.user = user
        if user is None:
            msg = f"Неверный формат счёта: {raw!r}. Ожидается, например, 2:1"
        else:
            msg = f"Неверный формат прогноза у {user!r}: {raw!r}. Ожидается, например, 2:1"
        super().__init__(msg)


def normalize_score(s: str) -> str:
    return s.strip()


def parse_score(s: str) -> Score:
    if not isinstance(s, str):
        raise ParseError(s)
    m = _SCORE_RE.fullmatch(normalize_score(s))
    if m is None:
        raise ParseError(s)
    try:
        return Score(home=int(m.group(1)), away=int(m.group(2)))
    except ValueError:
        # число длиннее лимита int()
        raise ParseError(s) from None
