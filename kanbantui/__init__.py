"""Screen model for a terminal kanban board: tasks, columns, sprints, views and rendering to plain panels."""

__version__ = "0.1.6"