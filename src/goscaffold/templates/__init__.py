"""Bundled project templates.

``project/`` holds the Go service template tree. Files ending in ``.tmpl``
are Jinja2 templates rendered with ``project``, ``module`` and ``port``;
everything else is copied as is.
"""
