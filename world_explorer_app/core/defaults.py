"""
Centralized Default Configuration for World Explorer.

These values are used as fallbacks when a key is missing from the Flask
application config.
"""

from typing import Any

DEFAULT_APP_CONFIGS = {
    # --- Quiz ---
    'QUIZ_DEFAULT_QUESTION_COUNT': 5,
    'QUIZ_MAX_QUESTION_COUNT': 10,
    'QUIZ_ADVANCE_DELAY_SECONDS': 3.0,

    # --- Narration ---
    'NARRATION_PAUSE_SECONDS': 0.5,
    'NARRATION_DEFAULT_SPEED': 1.0,
    'NARRATION_DEFAULT_VOLUME': 1.0,

    # --- Audio ---
    'AUDIO_DEFAULT_ENGINE': 'edge',
    'AUDIO_DEFAULT_VOICE_EDGE': 'en-US-AriaNeural',
    'AUDIO_DEFAULT_VOICE_GTTS': 'en',
}


def get_setting(key: str, default: Any = None) -> Any:
    """Resolve a setting from the active app config, then from the code-level defaults."""
    from flask import current_app, has_app_context

    if has_app_context():
        value = current_app.config.get(key)
        if value is not None:
            return value

    if key in DEFAULT_APP_CONFIGS:
        return DEFAULT_APP_CONFIGS[key]

    return default
