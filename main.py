"""llister 실행 스크립트 (python main.py ...)"""

from cli.app import cli


def main():
    """Entry point for the llister CLI. Delegates to cli.app:cli."""
    cli()


if __name__ == "__main__":
    main()
