"""
NoteThread Backend - Personal notes with comment threads

A small backend for private notes: user accounts, ownership-scoped note
CRUD and paginated comment threads on each note.

Version: 1.0.0
"""

__version__ = "1.0.0"
