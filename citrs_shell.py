# citrs_shell.py
from pathlib import Path

from dotenv import load_dotenv

from citrs.cli import run


def main() -> None:
    # project root is where citrs_shell.py lives
    load_dotenv(Path(__file__).resolve().parent / ".env", override=False)
    run()


if __name__ == "__main__":
    main()
