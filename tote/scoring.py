from __future__ import annotations

import logging
from collections.abc import Mapping

from tote.score import ParseError, Score, parse_score

logger = logging.getLogger(__name__)

HOME_WIN = "home_win"
AWAY_WIN = "away_win"
DRAW = "draw"

EXACT_POINTS = 2
OUTCOME_POINTS = 1
MISS_POINTS = 0

_LABELS = {
    EXACT_POINTS: "exact",
    OUTCOME_POINTS: "outcome",
    MISS_POINTS: "none",
}


def result_category(score: Score) -> str:
    if score.home > score.away:
        return HOME_WIN
    if score.home < score.away:
        return AWAY_WIN
    return DRAW


def calculate_outcome(guess: Score, actual: Score) -> int:
    """
    Правила:
    - точный счёт: 2
    - угадан исход (победа хозяев / победа гостей / ничья): 1
    - иначе: 0
    """

    # 1) Точный счёт
    if guess.home == actual.home and guess.away == actual.away:
        return EXACT_POINTS

    # 2) Только исход
    if result_category(guess) == result_category(actual):
        return OUTCOME_POINTS

    # 3) Не угадал
    return MISS_POINTS


def outcome_label(outcome: int) -> str:
    if isinstance(outcome, bool):
        raise ValueError(f"Недопустимое значение очков: {outcome!r}")
    try:
        return _LABELS[outcome]
    except KeyError:
        raise ValueError(f"Недопустимое значение очков: {outcome!r}") from None


def calculate_points(predictions: Mapping[str, str], actual_result: str) -> dict[str, int]:
    """
    Очки каждого участника за один матч.

    Итоговый счёт разбирается один раз и общий для всех сравнений.
    Если хоть один прогноз не разобрался, весь расчёт падает с ParseError
    (в err.user — чей прогноз), частичный результат не возвращается.
    """
    actual = parse_score(actual_result)

    user_points: dict[str, int] = {}
    for user, guess in predictions.items():
        try:
            guessed = parse_score(guess)
        except ParseError:
            raise ParseError(guess, user=user) from None
        user_points[user] = calculate_outcome(guessed, actual)

    logger.debug("[scoring] actual=%s:%s users=%s", actual.home, actual.away, len(user_points))
    return user_points
