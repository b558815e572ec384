"""
Entry point for python -m git_pseudo_version

Allows running the package as a module:
    python -m git_pseudo_version /path/to/repo
"""

from .cli import main

if __name__ == '__main__':
    main()
