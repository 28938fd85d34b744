"""Package entry point for ``python -m word_scrambler``.

WHY: Users run the scrambler as ``python -m word_scrambler file.txt`` or
pipe text through ``python -m word_scrambler``.

HOW: Delegates to the CLI's main() function.
"""

from word_scrambler.cli import main

if __name__ == "__main__":
    main()
