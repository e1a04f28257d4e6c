"""Entry point: python -m ngstubs -s openapi.json"""

from .cli import main

if __name__ == "__main__":
    main()
