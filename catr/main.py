# catr/main.py
# Console-script entry point

from .cli.app import app


def main() -> None:
    app(prog_name="catr")


if __name__ == "__main__":
    main()
