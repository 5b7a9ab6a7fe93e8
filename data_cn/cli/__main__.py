"""Module entrypoint for `python -m data_cn.cli`.

Delegates to the CLI implementation.
"""

from .run_validate import main


if __name__ == "__main__":
    main()
