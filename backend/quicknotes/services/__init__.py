# Services package init
"""
QuickNotes Backend — Services Layer
=====================================

What:  Note rules and persistence, independent of HTTP.

Service Inventory:
    - NoteStore: whole-document JSON load/save plus the single-writer lock
    - validate_note: title/content acceptance rules
    - NoteService: list / get / create workflows used by the routes
"""
