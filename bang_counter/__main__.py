"""Package entry point for ``python -m bang_counter``.

WHY: Cron jobs and users run the workflows as
``python -m bang_counter <command>``; Python's ``-m`` flag looks for
``__main__.py`` inside the package.

HOW: Delegates to the CLI's main() function.
"""

from bang_counter.cli import main

if __name__ == "__main__":
    main()
