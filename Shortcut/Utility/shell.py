"""
Hands URLs and local paths over to the browser / desktop shell.
"""
import os
import sys
import subprocess
import webbrowser
import logging
from typing import Optional

from Shortcut.Exception.ShortcutError import ActivationError

logger = logging.getLogger(__name__)


class ShellOpener:
    def __init__(self, browser_path: Optional[str] = None):
        self.browser_path = browser_path

    def open_url(self, url: str) -> None:
        logger.debug("Opening url %s", url)
        if self.browser_path:
            self._spawn([self.browser_path, url], url)
            return
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as e:
            raise ActivationError(f"Cannot open {url}: {e}", url) from e
        if not opened:
            raise ActivationError(f"No browser available to open {url}", url)

    def open_path(self, path: str) -> None:
        logger.debug("Opening path %s", path)
        if not os.path.exists(path):
            raise ActivationError(f"Path does not exist: {path}", path)
        if sys.platform.startswith("win"):
            try:
                os.startfile(path)
            except OSError as e:
                raise ActivationError(f"Cannot open {path}: {e}", path) from e
            return
        command = "open" if sys.platform == "darwin" else "xdg-open"
        self._spawn([command, path], path)

    def _spawn(self, cmd, target: str) -> None:
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            raise ActivationError(f"Cannot run {cmd[0]} for {target}: {e}", target) from e
