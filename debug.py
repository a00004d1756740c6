# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = ("plugboard", "rotor", "stepping", "encipher", "setup")


class Debug:
    _root_configured: bool = False          # class-level guard

    def __init__(self, *, enabled: bool = True, name: str = "ENIGMA") -> None:
        """
        A component-gated view onto one named logger.  Nothing is printed
        until the root logger is configured (see `Debug.configure`) and
        the component in question is switched on.
        """
        self.logger = logging.getLogger(name)
        self.enabled = enabled     # global switch

        # every component starts silent
        self.components: Dict[str, bool] = {c: False for c in COMPONENTS}

    @classmethod
    def configure(cls, *, log_to: str | None = None, level: int = logging.DEBUG) -> None:
        """
        Install the root handler once.  If `log_to` is given, messages also
        stream to that file.  Stream output goes to stderr so traces never
        mix with converted text on stdout.
        """
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=level,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    def log(self, component: str, message: str) -> None:
        if self.active(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def enable_all(self) -> None:
        self.enable(*self.components)

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
