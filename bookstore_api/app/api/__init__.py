"""
API package containing the HTTP routes.

``router`` aggregates the domain routers defined in ``endpoints`` and
is mounted by ``main.create_app`` under the ``/api`` prefix.
"""
