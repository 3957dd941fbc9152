"""Package entry point for ``python -m text_align``.

WHY: Users run the aligner as ``python -m text_align 60 justify < in.txt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.

HOW: Delegates to the CLI's main() function.
"""

from text_align.cli import main

if __name__ == "__main__":
    main()
