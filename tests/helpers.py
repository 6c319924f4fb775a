from selfquiz.quiz.question import Question


def make_bank(n: int):
    return [Question(id=i + 1, prompt=f"Q{i + 1}?", accepted_answers=(f"A{i + 1}",)) for i in range(n)]


class FixedOrderRng:
    """Stand-in RNG whose shuffle keeps the input order."""

    def shuffle(self, items) -> None:
        return None
