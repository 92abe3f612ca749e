"""Entry point for ``python -m xtrange <command>``.

Commands:
    characters - list the cast loaded from the cast packs
    ask        - ask a character a question at the door
    inspect    - inspect a character's eyes, teeth or pockets
    serve      - run the FastAPI backend under uvicorn
"""
from xtrange.cli import main

if __name__ == "__main__":
    main()
