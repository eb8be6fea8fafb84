# termsnake/viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from termsnake.config import AppConfig
from termsnake.core.interfaces import Snapshot

class Renderer(Protocol):
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def close(self) -> None: ...
