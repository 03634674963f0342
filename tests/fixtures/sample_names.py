"""
Sample file names for truncation tests.

Real-world names from download folders and shared drives, chosen for
long bases, unusual extensions and multi-code-point clusters.
"""

SCREENSHOT = "ChatGPT Image Sep 10, 2025, 06_11_25 PM.png"
TAX_FORM = "2024 K1 Very Good Garage LLC - BRIAN LEISHMAN.pdf"
PHOTOS_LIBRARY = "Photos Library.photoslibrary"
DOTFILE = ".gitignore"
ENV_FILE = ".env.local"

# Person, medium skin tone, zero-width joiner, rocket: one cluster
ASTRONAUT = "\U0001F9D1\U0001F3FD\u200d\U0001F680"
ASTRONAUT_FILE = ASTRONAUT + "file.txt"
ASTRONAUT_PLAN = f"{ASTRONAUT} launch plan {ASTRONAUT} final draft.txt"

# 'e' followed by a combining acute accent
E_ACUTE = "e\u0301"
COMBINING_NAME = f"Caf{E_ACUTE} Am{E_ACUTE}lie r{E_ACUTE}sum{E_ACUTE} draft.docx"

FLAG_NAME = "\U0001F1FA\U0001F1F8 quarterly numbers summary.xlsx"

LONG_NAMES = [
    SCREENSHOT,
    TAX_FORM,
    PHOTOS_LIBRARY,
    ASTRONAUT_PLAN,
    COMBINING_NAME,
    FLAG_NAME,
    "no_extension_but_a_rather_long_name_anyway",
    "archive.tar.gz",
    "notes.",
]
