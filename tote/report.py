from collections.abc import Mapping

from tote.score import parse_score
from tote.scoring import outcome_label


def build_points_text(points: Mapping[str, int], actual_result: str) -> str:
    actual = parse_score(actual_result)
    lines = [f"🏁 Итог матча: {actual.home}:{actual.away}"]

    if not points:
        lines.append("Прогнозов нет.")
        return "\n".join(lines)

    # больше очков выше, при равенстве по имени
    for user, pts in sorted(points.items(), key=lambda kv: (-kv[1], kv[0])):
        lines.append(f"{user}: {pts} ({outcome_label(pts)})")

    return "\n".join(lines)
