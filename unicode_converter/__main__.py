"""Package entry point for ``python -m unicode_converter``.

WHY: Users run the converter as ``python -m unicode_converter encode 20AC``
for scripted use, or ``python -m unicode_converter --interactive`` for the
menu-driven shell.

HOW: Checks sys.argv for the ``--interactive`` flag. If present, launches
the menu loop. Otherwise, delegates to the CLI's main() function.

RULES:
- ``--interactive`` (or no arguments at all) launches the menu shell
- Anything else falls through to the CLI
- The menu shell parses --strict and --log-level from the same argv
"""

import sys

if __name__ == "__main__":
    if "--interactive" in sys.argv or len(sys.argv) == 1:
        from unicode_converter.interactive import main as interactive_main
        interactive_main()
    else:
        from unicode_converter.cli import main
        main()
