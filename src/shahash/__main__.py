# src/shahash/__main__.py
from .cli import main

main()
