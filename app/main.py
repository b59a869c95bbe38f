"""ASGI entry point: ``uvicorn main:server_app``.

Startup and shutdown live in ``server.lifespan``.
"""

from dotenv import load_dotenv
from server import server

server_app = server.handler

load_dotenv()
