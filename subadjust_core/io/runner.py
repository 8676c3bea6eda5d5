# subadjust_core/io/runner.py

# -*- coding: utf-8 -*-

"""
Wrapper for running external command-line tools (ffmpeg).
"""

import shlex
import subprocess
from collections import deque
from datetime import datetime
from typing import Callable, List, Optional


class CommandRunner:
    """Executes external commands and logs their output."""

    def __init__(self, config, log_callback: Callable[[str], None]):
        self.config = config
        self.log = log_callback

    def _log_message(self, message: str):
        """Formats and sends a message to the log callback."""
        ts = datetime.now().strftime('%H:%M:%S')
        self.log(f'[{ts}] {message}')

    def run(self, cmd: List[str], tool_paths: Optional[dict] = None) -> Optional[str]:
        """
        Executes a command to completion.
        Returns captured stdout/stderr as a string, or None on failure.
        """
        if not cmd:
            return None

        tool_paths = tool_paths or {}
        tool_name = str(cmd[0])
        full_cmd = [tool_paths.get(tool_name) or tool_name] + [str(c) for c in cmd[1:]]
        self._log_message('$ ' + ' '.join(shlex.quote(c) for c in full_cmd))

        compact = self.config.get('log_compact', True)
        tail_ok = int(self.config.get('log_tail_lines', 0))
        err_tail = int(self.config.get('log_error_tail', 20))

        try:
            proc = subprocess.run(
                full_cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding='utf-8',
                errors='replace',
            )
        except OSError as e:
            self._log_message(f'[!] Failed to execute command: {e}')
            return None

        output = proc.stdout or ''
        if not compact:
            for line in output.splitlines():
                self._log_message(line)

        if proc.returncode != 0:
            self._log_message(f'[!] Command failed with exit code {proc.returncode}')
            if compact and err_tail > 0:
                error_lines = deque(output.splitlines(), maxlen=err_tail)
                if error_lines:
                    self._log_message('[stderr/tail]\n' + '\n'.join(error_lines))
            return None

        if compact and tail_ok > 0:
            success_lines = deque(output.splitlines(), maxlen=tail_ok)
            if success_lines:
                self._log_message('[stdout/tail]\n' + '\n'.join(success_lines))

        return output
