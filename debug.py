# debug.py
from __future__ import annotations
import logging
from typing import Dict, Iterable

COMPONENTS: tuple[str, ...] = (
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
)


class Debug:
    """Per-component switchboard in front of the ``ENIGMA`` logger.

    Every component starts silent; the command line turns some on with
    ``--debug stepping encipher`` (or ``--debug all``).
    """

    _root_configured: bool = False          # class-level guard

    def __init__(self, *, name: str = "ENIGMA") -> None:
        self.logger = logging.getLogger(name)
        self.enabled = True        # global switch
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    @classmethod
    def configure(cls, *, log_to: str | None = None) -> None:
        """Install the root handlers once. Later calls are no-ops."""
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=logging.DEBUG,
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
        for c in self._expand(components):
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in self._expand(components):
            self.components[c] = False

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _expand(self, components: Iterable[str]) -> list[str]:
        names: list[str] = []
        for c in components:
            if c == "all":
                names.extend(self.components)
                continue
            if c not in self.components:
                raise ValueError(f"No such component: {c!r}")
            names.append(c)
        return names

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"


# shared by every module of the machine
debug = Debug()
