import logging

from tote.config import load_log_level
from tote.demo import SAMPLE_ACTUAL_RESULT, SAMPLE_PREDICTIONS
from tote.report import build_points_text
from tote.scoring import calculate_points


def main() -> None:
    logging.basicConfig(level=load_log_level())

    points = calculate_points(SAMPLE_PREDICTIONS, SAMPLE_ACTUAL_RESULT)
    logging.info("points: %s", points)
    logging.info("\n%s", build_points_text(points, SAMPLE_ACTUAL_RESULT))


if __name__ == "__main__":
    main()
