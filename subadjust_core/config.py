# subadjust_core/config.py
# -*- coding: utf-8 -*-
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / '.config' / 'subadjust' / 'settings.json'


class AppConfig:
    def __init__(self, settings_path=None):
        env_path = os.environ.get('SUBADJUST_CONFIG')
        self.settings_path = Path(settings_path or env_path or DEFAULT_SETTINGS_PATH)
        self.defaults = {
            # --- External Tools ---
            'ffmpeg_path': '',               # '' = search PATH for ffmpeg, then ffmpeg.exe
            'extract_subtitle_stream': 0,    # subtitle stream index passed to ffmpeg (-map 0:s:N)

            # --- Output ---
            'make_backup': True,
            'backup_suffix': '.bak',
            'output_encoding': '',           # '' = keep the encoding of the source file

            # --- Logging ---
            'log_level': 'WARNING',
            'log_compact': True,
            'log_error_tail': 20,
            'log_tail_lines': 0,
        }
        self.settings = self.defaults.copy()
        self.load()

    def load(self):
        changed = False
        if self.settings_path.exists():
            try:
                with open(self.settings_path, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if not isinstance(loaded_settings, dict):
                    raise ValueError('settings file must hold a JSON object')

                for key, default_value in self.defaults.items():
                    if key not in loaded_settings:
                        loaded_settings[key] = default_value
                        changed = True
                self.settings = loaded_settings
            except (json.JSONDecodeError, ValueError, IOError) as e:
                logger.warning("Ignoring unreadable settings file %s: %s", self.settings_path, e)
                self.settings = self.defaults.copy()
                changed = True
        else:
            self.settings = self.defaults.copy()
            changed = True

        if changed:
            self.save()

    def save(self):
        try:
            keys_to_save = self.defaults.keys()
            settings_to_save = {k: self.settings.get(k) for k in keys_to_save if k in self.settings}
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(settings_to_save, f, indent=4)
        except OSError as e:
            logger.warning("Error saving settings: %s", e)

    def get(self, key: str, default=None):
        return self.settings.get(key, default)

    def set(self, key: str, value):
        self.settings[key] = value
