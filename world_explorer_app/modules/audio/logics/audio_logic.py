import hashlib
import json
import os
from pathlib import Path
from typing import Optional

from flask import current_app


def generate_hash_name(text: str, engine: str, voice: Optional[str], tuning: Optional[dict] = None) -> str:
    """
    Generate a deterministic MD5 hash filename for the audio request.
    Format: md5(text|engine|voice[|tuning]).mp3

    ``tuning`` is the voice-settings payload of engines that honour it, so a
    changed stability or style produces a new clip instead of a cache hit.
    """
    text_norm = text.strip()
    voice_norm = voice if voice else "default"

    raw_key = f"{text_norm}|{engine}|{voice_norm}"
    if tuning:
        raw_key += "|" + json.dumps(tuning, sort_keys=True)
    hash_obj = hashlib.md5(raw_key.encode('utf-8'))
    return f"{hash_obj.hexdigest()}.mp3"


def get_storage_path(filename: str, cache_dir: Optional[str] = None) -> dict:
    """
    Resolve physical path and public URL for a cached audio file.

    Files live under ``AUDIO_CACHE_DIR``; URLs are built relative to
    ``UPLOAD_FOLDER``, which the app serves at ``/uploads``.

    Returns:
        dict: {'physical_path': str, 'url': str}
    """
    upload_root = Path(current_app.config['UPLOAD_FOLDER'])
    physical_dir = Path(cache_dir or current_app.config['AUDIO_CACHE_DIR'])
    physical_path = physical_dir / filename

    try:
        relative = physical_path.relative_to(upload_root).as_posix()
        url_path = f"{current_app.config.get('UPLOAD_URL_PATH', '/uploads')}/{relative}"
    except ValueError:
        # Cache outside the uploads folder is not web-served
        url_path = physical_path.as_uri()

    return {
        'physical_path': os.fspath(physical_path),
        'url': url_path,
    }
