from sdprovision.cli import run_cli


def main() -> None:
    """The main entry point for the application.
    """
    run_cli()


if __name__ == '__main__':
    main()
