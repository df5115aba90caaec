import random

from seed import LEVELS, QUESTIONS_PER_LEVEL, generate_questions, seed_defaults


def test_generated_questions_stay_in_level_range():
    qs = generate_questions(random.Random(42))
    assert len(qs) == len(LEVELS) * QUESTIONS_PER_LEVEL
    for q in qs:
        span = q["level"] * 10
        a_txt, b_txt = q["question"].split(" + ")
        a, b = int(a_txt), int(b_txt.strip("()"))
        assert -span <= a < span and -span <= b < span
        assert q["answer"] == a + b


def test_seed_is_idempotent():
    import main  # noqa: F401  (app import already seeded the test database)

    assert seed_defaults() == {"questions": 0, "admin": 0}
