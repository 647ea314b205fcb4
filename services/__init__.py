"""Service layer package for the Notes app.

Hosts the database-facing import surface and the view-state controller that
sits between the window and the notes table.
"""
