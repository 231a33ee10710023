# File: world_explorer_app/modules/quiz/config.py


class QuizModuleDefaultConfig:
    """
    Default configuration for the quiz module.
    """
    QUIZ_DEFAULT_QUESTION_COUNT = 5
    QUIZ_MAX_QUESTION_COUNT = 10
    QUIZ_ADVANCE_DELAY_SECONDS = 3.0

    # Data fetch limits used by the generator
    SAME_CONTINENT_LIMIT = 10
    OTHER_CONTINENT_LIMIT = 5
    CONTINENT_QUIZ_LIMIT = 15
    RANDOM_QUIZ_POOL_LIMIT = 50

    QUIZ_MODES = [
        {'id': 'country', 'name': 'Country quiz'},
        {'id': 'continent', 'name': 'Continent quiz'},
        {'id': 'random', 'name': 'Random world quiz'},
    ]

    FEEDBACK_CORRECT = "Great job! That's correct!"
    FEEDBACK_INCORRECT = "Almost! Let's try to remember for next time."
