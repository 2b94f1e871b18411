"""Allow ``python -m nsadmin``."""

from nsadmin.cli.main import run

if __name__ == "__main__":
    run()
