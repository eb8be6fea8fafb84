# termsnake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from termsnake.config import AppConfig
from termsnake.core.interfaces import Snapshot

class HeadlessRenderer:
    """Keeps every drawn snapshot instead of showing it."""
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frames: List[Snapshot] = []
        self.closed = False
    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frames.clear()
        self.closed = False
    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
    def close(self) -> None:
        self.closed = True
