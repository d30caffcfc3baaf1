"""blueprinter: turn Waiframe wireframe projects into application blueprints.

Reads a project's screens and flows from the Waiframe API (or a local JSON
export), detects the product features the wireframes imply, picks a web or
Flutter stack, maps screens to routes and files, and renders a markdown
blueprint an AI coding assistant can scaffold from.
"""

__version__ = "0.1.0"
