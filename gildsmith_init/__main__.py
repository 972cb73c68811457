"""Allow ``python -m gildsmith_init``."""

from gildsmith_init.setup.app_runner import entry_point

if __name__ == "__main__":
    entry_point()
