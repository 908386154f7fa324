"""Entry point for 'python -m keysmith' command.

This module allows the KeySmith CLI to be invoked using
'python -m keysmith'.
"""

from keysmith.cli import main

if __name__ == "__main__":
    main()
