# src/create_typerestjs/__main__.py
from .cli import app

app(prog_name="create-typerestjs")
