import os

# pygame prints a banner on import; it would land on the terminal before curses starts
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
