# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = (
    "keyboard",
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
    "config",
)


class Debug:
    _root_configured: bool = False          # class-level guard
    _active: Dict[str, bool] = {c: False for c in COMPONENTS}
    _enabled: bool = True

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        If `log_to` is given, messages also stream to that file.
        Every Debug() shares the root logger config and the component map,
        so toggling a component from the CLI reaches all modules.
        """
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str, *args: object) -> None:
        """*args* are %-interpolated into *message* only if the component is on."""
        if Debug._enabled and Debug._active.get(component, False):
            self.logger.debug("[%s] " + message, component.upper(), *args)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._active[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._active[c] = False

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return dict(Debug._active)

    @property
    def enabled(self) -> bool:
        return Debug._enabled

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._active:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._active.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
