# File: world_explorer_app/modules/quiz/engine/selection.py
import random
from dataclasses import replace
from typing import List, Optional, Sequence

from ..schemas import Question


class WeightedTemplateSelector:
    """
    Weighted template selection without replacement.

    Every template index is placed in a pool ``weight`` times. Draws are
    uniform over the pool; a draw that hits an already used template is
    rejected and redrawn. Selection stops once ``count`` templates are chosen
    or the whole catalog has been used, so no template is picked twice.

    Near catalog exhaustion the remaining templates are still drawn in
    proportion to their own weights, but the overall inclusion probabilities
    are not exactly proportional to weight.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def select(self, templates: Sequence, count: int) -> List[int]:
        if count <= 0 or not templates:
            return []

        pool = [index for index, template in enumerate(templates) for _ in range(template.weight)]
        chosen: List[int] = []
        used = set()

        while len(chosen) < count and len(used) < len(templates):
            index = self.rng.choice(pool)
            if index in used:
                continue
            used.add(index)
            chosen.append(index)

        return chosen


def shuffle_question(question: Question, rng: Optional[random.Random] = None) -> Question:
    """
    Return a copy of ``question`` with its options permuted.

    ``correct`` is moved to the first option whose text equals the original
    correct text, so duplicated placeholder texts resolve deterministically.
    """
    rng = rng or random.Random()
    correct_text = question.options[question.correct]
    options = list(question.options)
    rng.shuffle(options)
    return replace(question, options=options, correct=options.index(correct_text))
