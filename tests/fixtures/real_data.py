"""
Real-world test data for fuzzyrank testing.

Contains realistic examples of:
- Command palette entries
- Records with several searchable fields
- Accented place names
"""

# Command palette entries, as shown in an editor
COMMANDS = [
    "Open File",
    "Open Recent File",
    "Open Folder",
    "Save File",
    "Save All",
    "Close Window",
    "Close All Editors",
    "New Terminal",
    "New Terminal Window",
    "Toggle Word Wrap",
    "Format Document",
    "Go to Line",
    "Go to Symbol in Workspace",
    "Find in Files",
    "Replace in Files",
    "Git: Commit",
    "Git: Push",
    "Git: Pull (Rebase)",
    "Preferences: Open Settings (JSON)",
    "View: Toggle Sidebar Visibility",
]

# Records with several searchable fields
USERS = [
    {"name": "John Smith", "email": "jsmith@example.com", "team": "Platform"},
    {"name": "Jane Doe", "email": "jane@example.com", "team": "Design"},
    {"name": "María José Núñez", "email": "mjnunez@example.com", "team": None},
    {"name": "Zoë Łukasiewicz", "email": "zoe.l@example.com", "team": "Research"},
    {"name": None, "email": "ghost@example.com", "team": "Platform"},
]

# Place names with diacritics, and their normalized forms
PLACES = [
    ("Zürich", "zurich"),
    ("São Paulo", "sao paulo"),
    ("Kraków", "krakow"),
    ("Łódź", "lodz"),
    ("Málaga", "malaga"),
    ("Reykjavík", "reykjavik"),
    ("Düsseldorf", "dusseldorf"),
    ("Peña Nevada", "pena nevada"),
]
