"""Clipboard and browser helpers for the credential guidance steps.

Both helpers are advisory: they log and return ``False`` instead of raising.
"""

from __future__ import annotations

import logging
import platform
import subprocess
import webbrowser

logger = logging.getLogger(__name__)

SECRET_NAME = "OPENAI_API_KEY"
API_KEYS_URL = "https://beta.openai.com/account/api-keys"

_CLIPBOARD_COMMANDS: dict[str, list[list[str]]] = {
    "Darwin": [["pbcopy"]],
    "Windows": [["clip"]],
    "Linux": [["wl-copy"], ["xclip", "-selection", "clipboard"], ["xsel", "--clipboard", "--input"]],
}


def clipboard_commands(system: str | None = None) -> list[list[str]]:
    system = system or platform.system()
    return _CLIPBOARD_COMMANDS.get(system, _CLIPBOARD_COMMANDS["Linux"])


def copy_to_clipboard(text: str) -> bool:
    """Copy *text* with the first clipboard utility that works on this platform."""
    for cmd in clipboard_commands():
        try:
            subprocess.run(
                cmd,
                input=text,
                text=True,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=5,
            )
        except FileNotFoundError:
            continue
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("Clipboard command %s failed: %s", cmd[0], exc)
            continue
        logger.debug("Copied to clipboard with %s", cmd[0])
        return True
    logger.warning("No clipboard utility available; copy %r manually", text)
    return False


def open_in_browser(url: str) -> bool:
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as exc:
        logger.warning("Could not open browser at %s: %s", url, exc)
        return False
    if not opened:
        logger.warning("No browser available to open %s", url)
    return opened


__all__ = ["API_KEYS_URL", "SECRET_NAME", "clipboard_commands", "copy_to_clipboard", "open_in_browser"]
