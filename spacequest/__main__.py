"""
Entry point: python -m spacequest
"""

from spacequest.core.runtime.main_loop import MainLoop


def main():
    MainLoop().run()


if __name__ == "__main__":
    main()
