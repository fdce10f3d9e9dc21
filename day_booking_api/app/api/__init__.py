"""
HTTP layer of the booking service.

Routes are grouped by API version (``v1``); each version exposes a
single ``router`` that ``main.create_app`` mounts under its prefix.
"""
