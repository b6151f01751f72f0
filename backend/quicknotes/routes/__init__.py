# Routes package init
"""
QuickNotes Backend — API Routes Package
=========================================

Route Inventory:
    - notes.py:   GET  /api/notes            (notes page loader)
                  POST /api/notes            (new-note form action)
                  GET  /api/notes/{id}       (note detail loader)
    - health.py:  GET  /health               (service health check)

Routes stay thin: read the request, call NoteService, shape the response.
"""
