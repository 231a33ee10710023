"""
Central Signal Registry for Event-Driven Architecture.

Uses blinker namespaces so that quiz and narration events can be observed
without coupling the emitting module to its listeners.

Usage:
    # Publisher (sender)
    from world_explorer_app.core.signals import quiz_completed
    quiz_completed.send(runner, score=2, total=3, quiz_type='Asia Quiz')

    # Subscriber (receiver)
    @quiz_completed.connect
    def on_quiz_completed(sender, **kwargs):
        ...
"""
from blinker import Namespace

# ============================================
# Quiz Signals
# ============================================
quiz_signals = Namespace()

# Signal: Fired when the learner picks an option
# Payload: question_index, answer_index, is_correct, score
answer_submitted = quiz_signals.signal('answer_submitted')

# Signal: Fired once when a quiz session reaches its last question
# Payload: score, total, quiz_type
quiz_completed = quiz_signals.signal('quiz_completed')

# ============================================
# Narration Signals
# ============================================
narration_signals = Namespace()

# Signal: Fired when a clip starts playing
# Payload: text, url, speed, volume, duration
narration_started = narration_signals.signal('narration_started')

# Signal: Fired after a request finished playing (or was skipped while muted)
# Payload: text, skipped
narration_completed = narration_signals.signal('narration_completed')

# Signal: Fired when synthesis or playback of a single request failed
# Payload: text, error
narration_failed = narration_signals.signal('narration_failed')
